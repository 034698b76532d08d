"""Todo service - business logic layer."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable, List, Optional

from models.todo import Todo, utc_now
from models.user import User
from repositories.todo_repository import RecordNotFoundError, TodoRepository
from services.errors import (
    InvalidTodoIDError,
    InvalidTodoTextError,
    InvalidUserIDError,
    TodoNotFoundError,
    UserNotFoundError,
)

Clock = Callable[[], datetime]

_TICK = timedelta(microseconds=1)


def _later_than(now: datetime, previous: datetime) -> datetime:
    """Return ``now``, nudged forward if the clock has not moved past ``previous``."""
    if now <= previous:
        return previous + _TICK
    return now


class TodoService:
    """Validates requests and composes repository calls for todos.

    All validation happens before the repository is touched. Repository
    ``RecordNotFoundError`` is translated into the service's own errors.
    """

    def __init__(self, repository: Optional[TodoRepository] = None, clock: Optional[Clock] = None) -> None:
        self.repository = repository or TodoRepository()
        self._clock = clock or utc_now

    def get_all_todos(self) -> List[Todo]:
        """Get every todo in creation order."""
        return self.repository.find_all()

    def get_all_users(self) -> List[User]:
        """Get every seeded user."""
        return self.repository.get_all_users()

    def get_todos_by_user(self, user_id: int) -> List[Todo]:
        """Get the todos of one user; an existing user without todos gives an empty list."""
        if user_id <= 0:
            raise InvalidUserIDError()
        self._resolve_user(user_id)
        return self.repository.find_by_user_id(user_id)

    def get_todo_by_id(self, todo_id: int) -> Todo:
        """Get a specific todo by ID."""
        self._validate_todo_id(todo_id)
        return self._find_todo(todo_id)

    def create_todo(self, text: str, user_id: int, completed: bool = False) -> Todo:
        """Create a new todo owned by an existing user."""
        self._validate_request(text, user_id)
        user = self._resolve_user(user_id)

        now = self._clock()
        todo = Todo(
            text=text.strip(),
            completed=completed,
            user_id=user_id,
            created_by=user.name,
            created_at=now,
            updated_at=now,
        )
        return self.repository.create(todo)

    def delete_todo(self, todo_id: int) -> None:
        """Delete a todo by ID."""
        self._validate_todo_id(todo_id)
        self._find_todo(todo_id)
        try:
            self.repository.delete(todo_id)
        except RecordNotFoundError as exc:
            # deleted by someone else after the existence check
            raise TodoNotFoundError() from exc

    def toggle_todo(self, todo_id: int) -> Todo:
        """Flip the completed flag of a todo."""
        self._validate_todo_id(todo_id)
        now = self._clock()

        def toggle(todo: Todo) -> Todo:
            todo.completed = not todo.completed
            todo.updated_at = _later_than(now, todo.updated_at)
            return todo

        return self._mutate(todo_id, toggle)

    def update_todo(self, todo_id: int, text: str, user_id: int, completed: bool = False) -> Todo:
        """Overwrite the text and completed flag of a todo.

        ``user_id`` is validated like on creation but the owner of an existing
        todo never changes.
        """
        self._validate_todo_id(todo_id)
        self._validate_request(text, user_id)
        new_text = text.strip()
        now = self._clock()

        def update(todo: Todo) -> Todo:
            todo.text = new_text
            todo.completed = completed
            todo.updated_at = _later_than(now, todo.updated_at)
            return todo

        return self._mutate(todo_id, update)

    def _mutate(self, todo_id: int, mutate: Callable[[Todo], Todo]) -> Todo:
        try:
            return self.repository.mutate_if_present(todo_id, mutate)
        except RecordNotFoundError as exc:
            raise TodoNotFoundError() from exc

    def _find_todo(self, todo_id: int) -> Todo:
        try:
            return self.repository.find_by_id(todo_id)
        except RecordNotFoundError as exc:
            raise TodoNotFoundError() from exc

    def _resolve_user(self, user_id: int) -> User:
        try:
            return self.repository.get_user_by_id(user_id)
        except RecordNotFoundError as exc:
            raise UserNotFoundError() from exc

    @staticmethod
    def _validate_todo_id(todo_id: int) -> None:
        if todo_id <= 0:
            raise InvalidTodoIDError()

    @staticmethod
    def _validate_request(text: str, user_id: int) -> None:
        if not text.strip():
            raise InvalidTodoTextError()
        if user_id <= 0:
            raise InvalidUserIDError()
