"""Tests for the todo and joke models."""

import pytest
from pydantic import ValidationError

from todoapp.models.joke import Joke
from todoapp.models.todo import Todo, TodoListFilter


def test_todo_defaults_to_incomplete_with_fresh_id():
    first = Todo(description="Buy milk")
    second = Todo(description="Buy milk")
    assert first.completed is False
    assert first.id and second.id
    assert first.id != second.id


def test_todo_is_immutable():
    todo = Todo(id="todo-0", description="Buy cookies")
    with pytest.raises(ValidationError):
        todo.description = "changed"


def test_copy_with_keeps_unset_fields():
    todo = Todo(id="todo-0", description="Buy cookies")
    edited = todo.copy_with(description="Buy more cookies")
    assert edited.id == "todo-0"
    assert edited.description == "Buy more cookies"
    assert edited.completed is False
    assert todo.description == "Buy cookies"

    done = todo.copy_with(completed=True)
    assert done.completed is True
    assert done.description == "Buy cookies"


def test_todo_str():
    todo = Todo(id="todo-1", description="Star Riverpod", completed=True)
    assert str(todo) == "Todo(description: Star Riverpod, completed: True)"


def test_filter_values():
    assert [f.value for f in TodoListFilter] == ["all", "active", "completed"]
    assert TodoListFilter("active") is TodoListFilter.ACTIVE


def test_joke_from_json():
    joke = Joke.from_json(
        {
            "type": "general",
            "setup": "Why did the chicken cross the road?",
            "punchline": "To get to the other side.",
            "id": 42,
        }
    )
    assert joke.id == 42
    assert joke.type == "general"
    assert joke.punchline == "To get to the other side."


def test_joke_from_json_missing_field():
    with pytest.raises(KeyError):
        Joke.from_json({"type": "general", "setup": "s", "id": 1})


def test_joke_from_json_wrong_type():
    with pytest.raises(ValidationError):
        Joke.from_json({"type": "general", "setup": "s", "punchline": "p", "id": "not-a-number"})


@pytest.mark.parametrize("raw_id", ["7", True, 7.0])
def test_joke_from_json_rejects_coercible_id(raw_id):
    with pytest.raises(ValidationError):
        Joke.from_json({"type": "general", "setup": "s", "punchline": "p", "id": raw_id})
