"""
Brain Cards Backend — Category Service (Domain Operations)
===========================================================

What:  Create, list and fetch categories.
Why:   Keeps input validation and id generation out of the HTTP layer.
How:   List and get read the full collection from the CategoryStore and
       work on it in memory; create hands the new category to
       CategoryStore.append, which rewrites the file with it at the end.
       Results are returned as Ok / Err (see results.py).
Who:   Called by the category route handlers.

Validation order for create (first failure wins):
    1. title is a non-empty string          → "title is required"
    2. pairs, when present, is an array     → "pairs must be an array"
    3. the first pair is itself an array    → "pairs may only contain arrays"
    4. every pair is exactly two strings    → "pairs must contain arrays of two strings"
"""

import logging
import secrets
import string
from typing import Any, List, Optional, Tuple

from braincards.config import settings
from braincards.exceptions import StorageError
from braincards.results import Err, Ok, Result, not_found, server_error, validation_error
from braincards.schemas.category import Category, CategoryListItem
from braincards.services.json_store import JsonFileStore
from braincards.services.store_base import CategoryStore

logger = logging.getLogger(__name__)

ID_PREFIX = "bc"
ID_LENGTH = 10
ID_ALPHABET = string.digits + string.ascii_lowercase  # base 36

TITLE_REQUIRED = "title is required"
PAIRS_NOT_ARRAY = "pairs must be an array"
PAIRS_ONLY_ARRAYS = "pairs may only contain arrays"
PAIRS_TWO_STRINGS = "pairs must contain arrays of two strings"


def generate_category_id() -> str:
    """
    Return a new category id: 'bc' followed by 10 random base-36 characters.

    Existing ids are not checked; with 36**10 possibilities a collision is
    not a practical concern for a single-file store.
    """
    return ID_PREFIX + "".join(secrets.choice(ID_ALPHABET) for _ in range(ID_LENGTH))


def _is_pair(item: Any) -> bool:
    return (
        isinstance(item, list)
        and len(item) == 2
        and isinstance(item[0], str)
        and isinstance(item[1], str)
    )


def validate_category_input(payload: Any) -> Tuple[Optional[Err], str, List[Tuple[str, str]]]:
    """
    Check a decoded POST body.

    Returns:
        (None, title, pairs) when the body is acceptable, otherwise
        (Err, "", []) describing the first problem found.
    """
    if not isinstance(payload, dict):
        return validation_error(TITLE_REQUIRED), "", []

    title = payload.get("title")
    if not isinstance(title, str) or not title:
        return validation_error(TITLE_REQUIRED), "", []

    # Absent means empty; an explicit null is not an array
    pairs = payload.get("pairs", [])
    if not isinstance(pairs, list):
        return validation_error(PAIRS_NOT_ARRAY), "", []

    if pairs and not isinstance(pairs[0], list):
        return validation_error(PAIRS_ONLY_ARRAYS), "", []

    if not all(_is_pair(item) for item in pairs):
        return validation_error(PAIRS_TWO_STRINGS), "", []

    return None, title, [(word, definition) for word, definition in pairs]


class CategoryService:
    """
    Domain operations over a CategoryStore.

    The service holds no state besides the store reference, so one instance
    serves every request. Storage failures are logged here and come back as
    a 500 Err; nothing is persisted when an operation fails.
    """

    def __init__(self, store: CategoryStore):
        self.store = store

    async def create_category(self, payload: Any) -> Result[Category]:
        """
        Validate the body, assign an id, append to the store and persist.

        Args:
            payload: The decoded JSON request body (any JSON value).

        Returns:
            Ok(Category) with the generated id, or Err (400 on invalid
            input, 500 when the store cannot be read or written).
        """
        error, title, pairs = validate_category_input(payload)
        if error is not None:
            logger.info("Rejected category: %s", error.message)
            return error

        try:
            category = Category(id=generate_category_id(), title=title, pairs=pairs)
            await self.store.append(category)
        except StorageError as e:
            logger.error("Could not create category: %s | Context: %s", e.message, e.context)
            return server_error()
        except Exception as e:
            logger.error("Unexpected error creating category: %s", str(e), exc_info=True)
            return server_error()

        logger.info("Created category %s (%d pairs)", category.id, len(category.pairs))
        return Ok(category)

    async def get_category_list(self) -> Result[List[CategoryListItem]]:
        """Every category as {id, title, length}, in stored order."""
        try:
            categories = await self.store.load()
        except StorageError as e:
            logger.error("Could not list categories: %s | Context: %s", e.message, e.context)
            return server_error()

        return Ok([CategoryListItem.from_category(c) for c in categories])

    async def get_category(self, category_id: str) -> Result[Category]:
        """
        Find a category by exact id match.

        Linear scan over the stored collection; returns the first match.
        """
        try:
            categories = await self.store.load()
        except StorageError as e:
            logger.error("Could not load category %s: %s | Context: %s", category_id, e.message, e.context)
            return server_error()

        for category in categories:
            if category.id == category_id:
                return Ok(category)

        logger.info("Category not found: %r", category_id)
        return not_found()


# ── Singleton Instance ────────────────────────────────────────────────────
category_service = CategoryService(JsonFileStore(settings.db_card_path))


def get_category_service() -> CategoryService:
    """
    FastAPI dependency returning the shared CategoryService.

    Tests swap in a service over a temporary store through
    app.dependency_overrides[get_category_service].
    """
    return category_service
