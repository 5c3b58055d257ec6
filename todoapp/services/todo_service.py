"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from todoapp.models.todo import Todo, TodoListFilter
from todoapp.repositories.todo_repository import TodoRepository

from .filters import count_incomplete, filter_todos

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo business logic and the currently selected filter."""

    def __init__(self, repository: Optional[TodoRepository] = None) -> None:
        self.repository = repository or TodoRepository()
        self._filter = TodoListFilter.ALL

    def list_todos(self) -> List[Todo]:
        """Get all todos in insertion order."""
        return self.repository.get_all()

    def get_todo(self, todo_id: str) -> Optional[Todo]:
        return self.repository.get_by_id(todo_id)

    def add_todo(self, description: str) -> Todo:
        return self.repository.add(description)

    def toggle_todo(self, todo_id: str) -> Optional[Todo]:
        """Toggle completion; ``None`` when the id is unknown."""
        return self.repository.toggle(todo_id)

    def edit_todo(self, todo_id: str, description: str) -> Optional[Todo]:
        """Change the description; ``None`` when the id is unknown."""
        return self.repository.edit(todo_id, description)

    def remove_todo(self, todo: Todo) -> None:
        self.repository.remove(todo)

    def remove_todo_by_id(self, todo_id: str) -> bool:
        """Remove by id. Returns whether a todo was present."""
        todo = self.repository.get_by_id(todo_id)
        if todo is None:
            return False
        self.repository.remove(todo)
        logger.info("Removed todo %s", todo_id)
        return True

    def get_filter(self) -> TodoListFilter:
        return self._filter

    def set_filter(self, todo_filter: TodoListFilter) -> TodoListFilter:
        self._filter = TodoListFilter(todo_filter)
        return self._filter

    def filtered_todos(self, todo_filter: Optional[TodoListFilter] = None) -> Sequence[Todo]:
        """Todos matching ``todo_filter``, or the current filter when omitted."""
        selected = self._filter if todo_filter is None else todo_filter
        return filter_todos(self.repository.get_all(), selected)

    def incomplete_count(self) -> int:
        return count_incomplete(self.repository.get_all())
