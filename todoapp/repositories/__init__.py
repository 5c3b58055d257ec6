from .todo_repository import DEFAULT_TODOS, TodoRepository

__all__ = ["DEFAULT_TODOS", "TodoRepository"]
