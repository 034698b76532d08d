"""Test configuration for repo-root tests."""

import sys
from datetime import datetime, timedelta, timezone
from itertools import count
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from repositories.todo_repository import TodoRepository  # noqa: E402
from services.todo_service import TodoService  # noqa: E402

EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TickingClock:
    """Clock that moves forward one second every time it is read."""

    def __init__(self, start: datetime = EPOCH) -> None:
        self._ticks = count()
        self._start = start

    def __call__(self) -> datetime:
        return self._start + timedelta(seconds=next(self._ticks))


@pytest.fixture
def repository() -> TodoRepository:
    """Fresh repository with the default seed users."""
    return TodoRepository()


@pytest.fixture
def todo_service(repository: TodoRepository) -> TodoService:
    """Service over a fresh repository with a deterministic clock."""
    return TodoService(repository, clock=TickingClock())
