"""Todo data models using Pydantic."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TodoBase(BaseModel):
    """Fields shared by stored todos and incoming requests."""

    text: str
    completed: bool = False
    user_id: int


class TodoRequest(TodoBase):
    """Payload for creating or updating a todo.

    Types are strict so that ``"1"`` is not silently accepted as a user id and
    ``"true"`` is not accepted as a boolean. Emptiness of ``text`` and the sign
    of ``user_id`` are business rules checked by the service, not here.
    """

    model_config = ConfigDict(strict=True)


class Todo(TodoBase):
    """Complete todo model with system fields."""

    id: int = 0
    created_by: str = ""
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    model_config = ConfigDict(from_attributes=True)
