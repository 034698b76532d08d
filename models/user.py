"""User data model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .todo import utc_now


class User(BaseModel):
    """A seeded user that todos can be assigned to."""

    id: int
    name: str
    email: str
    created_at: datetime = Field(default_factory=utc_now)

    model_config = ConfigDict(from_attributes=True)
