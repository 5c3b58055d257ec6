"""Todo repository - data access layer."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from todoapp.models.todo import Todo

logger = logging.getLogger(__name__)

DEFAULT_TODOS: Tuple[Todo, ...] = (
    Todo(id="todo-0", description="Buy cookies"),
    Todo(id="todo-1", description="Star Riverpod"),
    Todo(id="todo-2", description="Have a walk"),
)


class TodoRepository:
    """Repository for todos with in-memory, ordered storage.

    Every mutation builds a new list and swaps it in, so a list returned by
    ``get_all`` is never changed afterwards.
    """

    def __init__(self, todos: Optional[Iterable[Todo]] = None) -> None:
        self._todos: List[Todo] = list(DEFAULT_TODOS if todos is None else todos)

    def get_all(self) -> List[Todo]:
        """Get all todos in insertion order."""
        return self._todos

    def get_by_id(self, todo_id: str) -> Optional[Todo]:
        """Get todo by ID."""
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        return None

    def add(self, description: str) -> Todo:
        """Append a new todo with a fresh id."""
        todo = Todo(description=description)
        self._todos = [*self._todos, todo]
        logger.info("Added todo %s", todo.id)
        return todo

    def toggle(self, todo_id: str) -> Optional[Todo]:
        """Flip ``completed`` on the matching todo."""
        self._todos = [
            todo.copy_with(completed=not todo.completed) if todo.id == todo_id else todo
            for todo in self._todos
        ]
        return self.get_by_id(todo_id)

    def edit(self, todo_id: str, description: str) -> Optional[Todo]:
        """Replace the description of the matching todo."""
        self._todos = [
            todo.copy_with(description=description) if todo.id == todo_id else todo
            for todo in self._todos
        ]
        return self.get_by_id(todo_id)

    def remove(self, target: Todo) -> None:
        """Remove every todo sharing the target's id."""
        self._todos = [todo for todo in self._todos if todo.id != target.id]

    def reset(self, *, seed: bool = True) -> None:
        """Restore the default todos, or empty the store (testing helper)."""
        self._todos = list(DEFAULT_TODOS) if seed else []
