"""Initial user data for the in-memory repository."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

from models.todo import utc_now
from models.user import User

DEFAULT_USERS = (
    (1, "John Doe", "john@example.com"),
    (2, "Jane Smith", "jane@example.com"),
    (3, "Bob Johnson", "bob@example.com"),
)


def seed_users(now: Optional[datetime] = None) -> Dict[int, User]:
    """Return the users every fresh repository starts with."""
    created_at = now or utc_now()
    return {
        user_id: User(id=user_id, name=name, email=email, created_at=created_at)
        for user_id, name, email in DEFAULT_USERS
    }


def add_user_to_seed(users: Dict[int, User], user_id: int, name: str, email: str) -> User:
    """Add a user to a seed mapping before it is handed to a repository."""
    if user_id <= 0:
        raise ValueError("Seed user ID must be positive")
    user = User(id=user_id, name=name, email=email, created_at=utc_now())
    users[user_id] = user
    return user
