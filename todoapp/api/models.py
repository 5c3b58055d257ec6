"""Request/response schemas specific to the HTTP API."""

from pydantic import BaseModel

from todoapp.models.todo import TodoListFilter


class FilterState(BaseModel):
    filter: TodoListFilter


class TodoStats(BaseModel):
    incomplete: int
    total: int
