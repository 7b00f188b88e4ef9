from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from campus_api.app.api.v1.router import RESOURCES
from campus_api.app.core.config import settings
from campus_api.app.core.security import ROLE_ADMIN, create_access_token
from campus_api.app.main import create_app
from campus_api.app.repositories import InMemoryRepository


@pytest.fixture
def repositories():
    """In-memory repositories wrapped in mocks so tests can count calls."""
    return {
        definition.kind: MagicMock(wraps=InMemoryRepository(definition.record_model, definition.key_field))
        for definition in RESOURCES
    }


@pytest.fixture
def client(repositories):
    return TestClient(create_app(repositories))


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {create_access_token('student@ucsb.edu')}"}


@pytest.fixture
def admin_headers():
    token = create_access_token("admin@ucsb.edu", roles=[ROLE_ADMIN])
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sqlite_db(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file for the test."""
    path = tmp_path / "campus_api_test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    return path
