"""Test configuration for the todo service."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todoapp.api.dependencies import get_todo_repository, get_todo_service  # noqa: E402
from todoapp.main import app  # noqa: E402
from todoapp.models.todo import TodoListFilter  # noqa: E402
from todoapp.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def reset_store():
    """Reset the shared store and current filter for each test."""
    get_todo_repository().reset(seed=get_settings().seed_default_todos)
    get_todo_service().set_filter(TodoListFilter.ALL)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    """Provide a FastAPI test client."""
    return TestClient(app)
