"""
Brain Cards Backend — Abstract Category Store Interface
========================================================

What:  Abstract base class for wherever the category collection lives.
Why:   The domain operations only need "give me every category" and "here is
       the new full collection". Keeping that behind an interface means the
       flat JSON file can be replaced (key-value store, real database) without
       touching CategoryService.
How:   Concrete stores inherit from CategoryStore and implement the three
       coroutines below.

Contract:
    - load() returns the whole collection in stored order
    - append() adds one category after the existing ones, leaving those as stored
    - save() replaces the whole collection; there are no partial updates
    - ensure_exists() is called once at startup
    - Every backend failure is raised as StorageError
    - No locking: two interleaved load/save cycles can lose a write
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from braincards.schemas.category import Category


class CategoryStore(ABC):
    """Abstract persistence for the flat category collection."""

    @abstractmethod
    async def ensure_exists(self) -> Optional[List[Category]]:
        """
        Make sure an (at least empty) collection exists.

        Returns:
            The freshly created empty collection, or None when one was
            already there and has been left untouched.

        Raises:
            StorageError: The collection could not be created. At startup
                this is fatal.
        """
        ...

    @abstractmethod
    async def load(self) -> List[Category]:
        """
        Read the entire collection.

        Raises:
            StorageError: Missing backing data, I/O failure, or content
                that is not a list of categories.
        """
        ...

    @abstractmethod
    async def append(self, category: Category) -> None:
        """
        Add `category` after every existing one and persist the collection.

        Records already in the store are written back exactly as they were
        read; appending never rewrites them.

        Raises:
            StorageError: The collection could not be read, was not a list
                of categories, or could not be written.
        """
        ...

    @abstractmethod
    async def save(self, categories: List[Category]) -> None:
        """
        Overwrite the entire collection with `categories`.

        Raises:
            StorageError: The write failed. The backing data may be left
                truncated; nothing is rolled back.
        """
        ...

    @abstractmethod
    def describe(self) -> str:
        """Human-readable location of the store, for logs and health checks."""
        ...
