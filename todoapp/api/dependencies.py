"""API dependencies for todo management and jokes."""

from todoapp.clients.joke_client import JokeClient
from todoapp.repositories.todo_repository import TodoRepository
from todoapp.services.todo_service import TodoService
from todoapp.settings import get_settings

_repository = TodoRepository(None if get_settings().seed_default_todos else [])
_service = TodoService(_repository)


def get_todo_repository() -> TodoRepository:
    """Dependency for getting todo repository instance."""
    return _repository


def get_todo_service() -> TodoService:
    """Dependency for the shared todo service; it also holds the current filter."""
    return _service


def get_joke_client() -> JokeClient:
    """Dependency for getting a joke API client."""
    settings = get_settings()
    return JokeClient(settings.joke_api_url, settings.joke_api_timeout_seconds)
