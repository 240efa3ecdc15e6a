"""
Brain Cards Backend — Category Service Unit Tests
==================================================

What:  Tests for CategoryService business logic (create, list, get).
How:   A real JsonFileStore over tmp_path for the happy paths; AsyncMock
       stores to simulate storage failures.

What we test:
    ✅ Create validates title and pairs in order and persists on success
    ✅ Generated ids have the 'bc' + 10 base-36 shape
    ✅ Failed validation leaves the store unchanged
    ✅ List projects pairs down to a count
    ✅ Get returns the full category or a 404 result
    ✅ Storage failures become 500 results
"""

import re
from unittest.mock import AsyncMock, MagicMock

import pytest

from braincards.exceptions import StorageError
from braincards.results import Err, Ok
from braincards.services.category_service import (
    CategoryService,
    PAIRS_NOT_ARRAY,
    PAIRS_ONLY_ARRAYS,
    PAIRS_TWO_STRINGS,
    TITLE_REQUIRED,
    generate_category_id,
    validate_category_input,
)
from braincards.services.store_base import CategoryStore

ID_PATTERN = re.compile(r"^bc[0-9a-z]{10}$")


def failing_store(error: StorageError) -> MagicMock:
    store = MagicMock(spec=CategoryStore)
    store.load = AsyncMock(side_effect=error)
    store.append = AsyncMock(side_effect=error)
    store.save = AsyncMock()
    return store


class TestGenerateCategoryId:

    def test_id_shape(self):
        for _ in range(50):
            assert ID_PATTERN.match(generate_category_id())

    def test_ids_differ(self):
        ids = {generate_category_id() for _ in range(100)}
        assert len(ids) == 100


class TestValidateCategoryInput:
    """Validation rules and their precedence."""

    def test_valid_payload(self):
        error, title, pairs = validate_category_input(
            {"title": "Animals", "pairs": [["cat", "meow"]]}
        )
        assert error is None
        assert title == "Animals"
        assert pairs == [("cat", "meow")]

    def test_pairs_default_to_empty(self):
        error, _, pairs = validate_category_input({"title": "Empty"})
        assert error is None
        assert pairs == []

    @pytest.mark.parametrize("payload", [
        {},
        {"title": None},
        {"title": 42},
        {"title": ""},
        [],
        "Animals",
        None,
    ])
    def test_title_required(self, payload):
        error, _, _ = validate_category_input(payload)
        assert error.status_code == 400
        assert error.payload == {"message": TITLE_REQUIRED}

    def test_whitespace_title_is_accepted(self):
        error, title, _ = validate_category_input({"title": "   "})
        assert error is None
        assert title == "   "

    @pytest.mark.parametrize("pairs", [None, "cat", {"cat": "meow"}, 3])
    def test_pairs_must_be_array(self, pairs):
        error, _, _ = validate_category_input({"title": "T", "pairs": pairs})
        assert error.payload == {"message": PAIRS_NOT_ARRAY}

    def test_first_pair_must_be_array(self):
        error, _, _ = validate_category_input({"title": "T", "pairs": ["cat", ["a", "b"]]})
        assert error.payload == {"message": PAIRS_ONLY_ARRAYS}

    def test_only_first_pair_gets_the_array_message(self):
        """A non-array after the first element falls through to the two-strings rule."""
        error, _, _ = validate_category_input({"title": "T", "pairs": [["a", "b"], "cat"]})
        assert error.payload == {"message": PAIRS_TWO_STRINGS}

    @pytest.mark.parametrize("pair", [
        ["cat", 1],
        [None, "meow"],
        ["cat"],
        ["cat", "meow", "purr"],
        [],
    ])
    def test_pairs_must_hold_two_strings(self, pair):
        error, _, _ = validate_category_input({"title": "T", "pairs": [["a", "b"], pair]})
        assert error.status_code == 400
        assert error.payload == {"message": PAIRS_TWO_STRINGS}


class TestCreateCategory:

    @pytest.mark.asyncio
    async def test_create_success(self, category_service, sample_payload, read_store):
        result = await category_service.create_category(sample_payload)

        assert isinstance(result, Ok)
        category = result.value
        assert ID_PATTERN.match(category.id)
        assert category.title == "Animals"
        assert category.pairs == [("cat", "meow"), ("dog", "woof")]
        assert read_store() == [{
            "id": category.id,
            "title": "Animals",
            "pairs": [["cat", "meow"], ["dog", "woof"]],
        }]

    @pytest.mark.asyncio
    async def test_create_appends_after_existing(self, category_service, read_store):
        first = (await category_service.create_category({"title": "First"})).value
        second = (await category_service.create_category({"title": "Second"})).value

        assert [c["id"] for c in read_store()] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_invalid_input_leaves_store_unchanged(self, category_service, store_path):
        before = store_path.read_text(encoding="utf-8")

        result = await category_service.create_category({"pairs": [["a", "b"]]})

        assert isinstance(result, Err)
        assert result.kind == "validation_error"
        assert store_path.read_text(encoding="utf-8") == before

    @pytest.mark.asyncio
    async def test_invalid_input_skips_storage(self):
        store = failing_store(StorageError("unreachable"))
        service = CategoryService(store)

        result = await service.create_category({"title": 1})

        assert result.status_code == 400
        store.load.assert_not_called()
        store.append.assert_not_called()
        store.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_storage_failure_is_server_error(self, sample_payload):
        store = failing_store(StorageError("disk gone"))
        service = CategoryService(store)

        result = await service.create_category(sample_payload)

        assert isinstance(result, Err)
        assert result.status_code == 500
        assert result.payload == {"message": "Server Error"}
        store.append.assert_awaited_once()
        store.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unexpected_store_error_is_server_error(self, sample_payload):
        store = MagicMock(spec=CategoryStore)
        store.append = AsyncMock(side_effect=RuntimeError("boom"))
        service = CategoryService(store)

        result = await service.create_category(sample_payload)

        assert isinstance(result, Err)
        assert result.status_code == 500

    @pytest.mark.asyncio
    async def test_unencodable_title_is_server_error(self, category_service, store_path):
        """A lone surrogate is valid JSON but cannot be written as UTF-8."""
        before = store_path.read_text(encoding="utf-8")

        result = await category_service.create_category({"title": "\ud800"})

        assert isinstance(result, Err)
        assert result.payload == {"message": "Server Error"}
        assert store_path.read_text(encoding="utf-8") == before


class TestGetCategoryList:

    @pytest.mark.asyncio
    async def test_empty_store(self, category_service):
        result = await category_service.get_category_list()
        assert result == Ok([])

    @pytest.mark.asyncio
    async def test_projection_counts_pairs(self, category_service, sample_payload):
        created = (await category_service.create_category(sample_payload)).value
        await category_service.create_category({"title": "Empty"})

        items = (await category_service.get_category_list()).value

        assert items[0].model_dump() == {"id": created.id, "title": "Animals", "length": 2}
        assert items[1].title == "Empty"
        assert items[1].length == 0
        assert not hasattr(items[0], "pairs")

    @pytest.mark.asyncio
    async def test_storage_failure_is_server_error(self):
        service = CategoryService(failing_store(StorageError("bad json")))

        result = await service.get_category_list()

        assert result.status_code == 500


class TestGetCategory:

    @pytest.mark.asyncio
    async def test_found(self, category_service, sample_payload):
        created = (await category_service.create_category(sample_payload)).value

        result = await category_service.get_category(created.id)

        assert isinstance(result, Ok)
        assert result.value == created

    @pytest.mark.asyncio
    async def test_not_found(self, category_service):
        result = await category_service.get_category("bcdoesnotexist")

        assert isinstance(result, Err)
        assert result.status_code == 404
        assert result.payload == {"message": "Item Not Found"}

    @pytest.mark.asyncio
    async def test_match_is_exact(self, category_service):
        created = (await category_service.create_category({"title": "T"})).value

        assert (await category_service.get_category(created.id.upper())).status_code == 404
        assert (await category_service.get_category(created.id[:-1])).status_code == 404

    @pytest.mark.asyncio
    async def test_storage_failure_is_server_error(self):
        service = CategoryService(failing_store(StorageError("gone")))

        result = await service.get_category("bc0000000001")

        assert result.status_code == 500
