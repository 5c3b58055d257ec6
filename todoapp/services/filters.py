"""Derived views over a todo list."""

from __future__ import annotations

from typing import Sequence

from todoapp.models.todo import Todo, TodoListFilter


def filter_todos(todos: Sequence[Todo], todo_filter: TodoListFilter) -> Sequence[Todo]:
    """Return the todos selected by ``todo_filter``.

    ``ALL`` hands back the input unchanged; the other filters build a new list.
    """
    if todo_filter == TodoListFilter.COMPLETED:
        return [todo for todo in todos if todo.completed]
    if todo_filter == TodoListFilter.ACTIVE:
        return [todo for todo in todos if not todo.completed]
    return todos


def count_incomplete(todos: Sequence[Todo]) -> int:
    return sum(1 for todo in todos if not todo.completed)
