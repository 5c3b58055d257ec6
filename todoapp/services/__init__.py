from .filters import count_incomplete, filter_todos
from .todo_service import TodoService

__all__ = ["TodoService", "count_incomplete", "filter_todos"]
