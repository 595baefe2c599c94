"""Shared pytest fixtures."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from saydone.config import DEFAULT_VOCABULARY, ParserVocabulary, settings
from saydone.main import app
from saydone.routes.tasks import get_store
from saydone.services.task_store import TaskStore

# 2024-01-10 is a Wednesday
WEDNESDAY = datetime(2024, 1, 10, 9, 30)


@pytest.fixture
def now() -> datetime:
    """Fixed reference moment for relative dates."""
    return WEDNESDAY


@pytest.fixture
def vocabulary() -> ParserVocabulary:
    return DEFAULT_VOCABULARY


@pytest.fixture
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Point the SQLite task database at a temporary file."""
    path = tmp_path / "tasks.db"
    monkeypatch.setattr(settings, "db_path", path)
    return path


@pytest.fixture
def client(store: TaskStore):
    """Test client with an in-memory task store."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
