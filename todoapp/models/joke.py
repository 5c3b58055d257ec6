"""Joke model returned by the public joke API."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict


class Joke(BaseModel):
    id: int
    type: str
    setup: str
    punchline: str

    model_config = ConfigDict(frozen=True, strict=True)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Joke":
        """Map an untyped JSON object onto a joke.

        Missing keys raise ``KeyError``; wrongly typed values raise pydantic's
        ``ValidationError``.
        """
        return cls(
            setup=data["setup"],
            punchline=data["punchline"],
            type=data["type"],
            id=data["id"],
        )
