"""
Test configuration for the hospital dashboard backend.
"""
import pytest
from fastapi.testclient import TestClient

from hospital_api.core.bootstrap import COLLECTIONS, default_collections
from hospital_api.core.storage import JsonStore
from hospital_api.database import get_store
from hospital_api.main import app


@pytest.fixture(scope="function")
def store(tmp_path):
    """
    Create a seeded store in a fresh temporary directory for each test.
    """
    store = JsonStore(tmp_path / "data", collections=COLLECTIONS, seed_factory=default_collections)
    store.ensure_ready()
    return store


@pytest.fixture(scope="function")
def empty_store(tmp_path):
    """
    Create a store whose collections all start empty.
    """
    store = JsonStore(tmp_path / "empty", collections=COLLECTIONS)
    store.ensure_ready()
    return store


@pytest.fixture(scope="function")
def client(store):
    """
    Create a test client whose handlers use the temporary store.
    """
    def override_get_store():
        store.ensure_ready()
        return store

    # Override the get_store dependency
    app.dependency_overrides[get_store] = override_get_store

    # Create test client
    with TestClient(app) as client:
        yield client

    # Remove dependency override
    app.dependency_overrides = {}
