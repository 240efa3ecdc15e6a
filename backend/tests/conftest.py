"""
Brain Cards Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── store_path: Path of an initialized, empty store file in tmp_path
    ├── json_store: JsonFileStore over store_path
    ├── category_service: CategoryService over json_store
    ├── sample_payload: A valid POST body
    └── test_client: HTTPX AsyncClient wired to the app with the temp store
"""

import json
import os
import tempfile

# Environment must be set BEFORE any braincards import reads settings
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DB_CARD_PATH"] = os.path.join(
    tempfile.mkdtemp(prefix="braincards_test_"), "db_card.json"
)

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from braincards.services.category_service import CategoryService, get_category_service
from braincards.services.json_store import JsonFileStore


@pytest.fixture
def store_path(tmp_path):
    """A store file holding an empty JSON array."""
    path = tmp_path / "db_card.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture
def read_store(store_path):
    """Reads the raw store file back as plain JSON, bypassing the app."""
    def _read():
        return json.loads(store_path.read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def json_store(store_path):
    return JsonFileStore(str(store_path))


@pytest.fixture
def category_service(json_store):
    return CategoryService(json_store)


@pytest.fixture
def sample_payload():
    return {"title": "Animals", "pairs": [["cat", "meow"], ["dog", "woof"]]}


@pytest_asyncio.fixture
async def test_client(category_service):
    """
    HTTPX AsyncClient talking to the FastAPI app in-process.

    The app's CategoryService is replaced by one over the per-test store.
    Lifespan does not run under ASGITransport; store_path is already initialized.
    """
    from braincards.main import app

    app.dependency_overrides[get_category_service] = lambda: category_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
