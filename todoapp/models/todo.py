"""Todo data models using Pydantic."""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TodoListFilter(str, Enum):
    """The different ways to filter the list of todos."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


def new_todo_id() -> str:
    return str(uuid.uuid4())


class Todo(BaseModel):
    """A read-only description of a todo item."""

    id: str = Field(default_factory=new_todo_id)
    description: str
    completed: bool = False

    model_config = ConfigDict(frozen=True)

    def copy_with(
        self,
        *,
        id: Optional[str] = None,
        description: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> "Todo":
        return Todo(
            id=self.id if id is None else id,
            description=self.description if description is None else description,
            completed=self.completed if completed is None else completed,
        )

    def __str__(self) -> str:
        return f"Todo(description: {self.description}, completed: {self.completed})"


class TodoCreate(BaseModel):
    """Model for creating new todos."""

    description: str


class TodoUpdate(BaseModel):
    """Model for editing the description of an existing todo."""

    description: str
