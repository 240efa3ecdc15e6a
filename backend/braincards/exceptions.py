"""
Brain Cards Backend — Exception Hierarchy
==========================================

What:  Application-specific exceptions for failures nobody can fix by
       changing their request: the backing file is unreadable, unwritable
       or holds something that is not a list of categories.
Why:   Expected failures (bad input, unknown id) travel as Err results
       (see results.py). Exceptions are left for the cases where the
       operation cannot continue at all.
Who:   Raised by the category store; caught by the category service,
       which turns them into a 500 result. The global handler in main.py
       is the last resort for anything that escapes.

Exception Hierarchy:
    BrainCardsError (base)
    └── StorageError   → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class BrainCardsError(Exception):
    """
    Base exception for all Brain Cards application errors.

    Attributes:
        message:  Operator-facing error description
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class StorageError(BrainCardsError):
    """
    Raised when the category store cannot be read, parsed or written.

    Wraps the underlying OSError / parse error so callers only need to
    catch one type. The original exception is chained as __cause__.
    """

    def __init__(
        self,
        message: str = "Category store operation failed",
        path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message=message, context=ctx)
        self.path = path
