"""
Brain Cards Backend — JSON File Category Store
===============================================

What:  CategoryStore backed by a single JSON file holding an array of categories.
Why:   Durable shared state without running a database.
How:   Every load reads and parses the whole file; every write serializes the
       whole collection and overwrites the file. Nothing is cached between
       requests, so edits made to the file by hand are picked up immediately.

File format:
    [
        {"id": "bc1a2b3c4d5e", "title": "Animals", "pairs": [["cat", "meow"]]},
        ...
    ]

Appending keeps the records already in the file exactly as they were read:
keys the Category model does not know, and missing optional keys, are written
back untouched. Only the new record goes through the model.

Known limitations:
    - Writes are not atomic; a crash mid-write can leave a truncated file.
    - No locking; concurrent creates can overwrite each other's append.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional

import aiofiles
import aiofiles.os
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from braincards.exceptions import StorageError
from braincards.schemas.category import Category
from braincards.services.store_base import CategoryStore

logger = logging.getLogger(__name__)

# Raw records as they sit in the file, and the same records as categories
_records_adapter = TypeAdapter(List[Any])
_categories_adapter = TypeAdapter(List[Category])


class JsonFileStore(CategoryStore):
    """
    Stores the category collection in one JSON file.

    The path is resolved when the store is created but nothing touches the
    file system until ensure_exists(), load(), append() or save() is awaited.
    """

    def __init__(self, path: str):
        self.path = Path(path).resolve()

    def describe(self) -> str:
        return str(self.path)

    async def ensure_exists(self) -> Optional[List[Category]]:
        """
        Create the file with an empty array if it is missing.

        An existing file is left untouched, even if its content is invalid;
        that surfaces later as a StorageError on the first load.
        """
        if await aiofiles.os.path.exists(self.path):
            logger.debug("Category store present: %s", self.path)
            return None

        try:
            await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
        except OSError as e:
            raise StorageError(
                message=f"Could not create directory for category store: {e}",
                path=str(self.path),
                context={"os_error": str(e)},
            ) from e

        empty: List[Category] = []
        await self.save(empty)
        logger.info("Created empty category store: %s", self.path)
        return empty

    async def load(self) -> List[Category]:
        records = await self._read_records()
        return self._validate(records)

    async def append(self, category: Category) -> None:
        records = await self._read_records()
        # Refuse to extend a file whose existing content is not a category list
        self._validate(records)
        records.append(category.model_dump(mode="json"))
        await self._write(self._serialize(records, _records_adapter))

    async def save(self, categories: List[Category]) -> None:
        await self._write(self._serialize(categories, _categories_adapter))
        logger.debug("Wrote %d categories to %s", len(categories), self.path)

    # ── Internals ─────────────────────────────────────────────────────────

    async def _read_records(self) -> List[Any]:
        try:
            async with aiofiles.open(self.path, "rb") as f:
                raw = await f.read()
        except OSError as e:
            logger.error("Failed to read category store %s: %s", self.path, str(e))
            raise StorageError(
                message=f"Could not read category store: {e}",
                path=str(self.path),
                context={"os_error": str(e)},
            ) from e

        try:
            return _records_adapter.validate_json(raw)
        except ValidationError as e:
            logger.error("Category store %s is not a JSON array", self.path)
            raise self._parse_error(e) from e

    def _validate(self, records: List[Any]) -> List[Category]:
        try:
            return _categories_adapter.validate_python(records)
        except ValidationError as e:
            logger.error("Category store %s is not a valid category list", self.path)
            raise self._parse_error(e) from e

    def _parse_error(self, e: ValidationError) -> StorageError:
        return StorageError(
            message=f"Could not parse category store: {e.error_count()} error(s)",
            path=str(self.path),
            context={"errors": e.errors(include_url=False)[:5]},
        )

    def _serialize(self, value: List[Any], adapter: TypeAdapter) -> bytes:
        try:
            return adapter.dump_json(value)
        except PydanticSerializationError as e:
            # e.g. lone surrogates in a title: valid JSON input, not encodable as UTF-8
            logger.error("Could not serialize category store %s: %s", self.path, str(e))
            raise StorageError(
                message=f"Could not serialize category store: {e}",
                path=str(self.path),
            ) from e

    async def _write(self, data: bytes) -> None:
        try:
            async with aiofiles.open(self.path, "wb") as f:
                await f.write(data)
        except OSError as e:
            logger.error("Failed to write category store %s: %s", self.path, str(e))
            raise StorageError(
                message=f"Could not write category store: {e}",
                path=str(self.path),
                context={"os_error": str(e)},
            ) from e
