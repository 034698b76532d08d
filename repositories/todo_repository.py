"""Todo repository - data access layer."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from models.todo import Todo
from models.user import User
from repositories.locks import ReadWriteLock
from repositories.user_seeder import seed_users

logger = logging.getLogger(__name__)

TodoMutation = Callable[[Todo], Todo]


class RecordNotFoundError(LookupError):
    """Raised when a todo or user identity is not present in the repository."""

    def __init__(self, entity: str, record_id: int) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class TodoRepository:
    """Thread-safe in-memory storage for todos and the seeded users.

    A single reader/writer lock guards both collections and the id counter.
    Every record passed in or handed out is a deep copy, so callers never
    share state with the repository.
    """

    def __init__(self, users: Optional[Dict[int, User]] = None) -> None:
        self._lock = ReadWriteLock()
        self._seed = {user_id: user.model_copy(deep=True) for user_id, user in (users or seed_users()).items()}
        self._users: Dict[int, User] = self._copy_seed()
        # dict keeps insertion order and in-place replacement keeps position
        self._todos: Dict[int, Todo] = {}
        self._next_id = 1

    def _copy_seed(self) -> Dict[int, User]:
        return {user_id: user.model_copy(deep=True) for user_id, user in self._seed.items()}

    def find_all(self) -> List[Todo]:
        """Return every todo in insertion order."""
        with self._lock.read_locked():
            return [todo.model_copy(deep=True) for todo in self._todos.values()]

    def find_by_id(self, todo_id: int) -> Todo:
        """Return a todo by ID or raise RecordNotFoundError."""
        with self._lock.read_locked():
            todo = self._todos.get(todo_id)
            if todo is None:
                raise RecordNotFoundError("todo", todo_id)
            return todo.model_copy(deep=True)

    def find_by_user_id(self, user_id: int) -> List[Todo]:
        """Return the todos owned by a user in insertion order."""
        with self._lock.read_locked():
            return [
                todo.model_copy(deep=True)
                for todo in self._todos.values()
                if todo.user_id == user_id
            ]

    def create(self, todo: Todo) -> Todo:
        """Store a new todo under the next free identity."""
        with self._lock.write_locked():
            todo_id = self._next_id
            self._next_id += 1
            stored = todo.model_copy(update={"id": todo_id}, deep=True)
            self._todos[todo_id] = stored
            result = stored.model_copy(deep=True)
        logger.debug("Assigned todo id %s", todo_id)
        return result

    def update(self, todo: Todo) -> Todo:
        """Replace the stored todo that has the same ID."""
        with self._lock.write_locked():
            if todo.id not in self._todos:
                raise RecordNotFoundError("todo", todo.id)
            stored = todo.model_copy(deep=True)
            self._todos[todo.id] = stored
            return stored.model_copy(deep=True)

    def mutate_if_present(self, todo_id: int, mutate: TodoMutation) -> Todo:
        """Read, change and write back a todo under one write lock.

        ``mutate`` receives a private copy of the stored todo and returns the
        replacement. It runs while the write lock is held, so it must not call
        back into the repository.
        """
        with self._lock.write_locked():
            current = self._todos.get(todo_id)
            if current is None:
                raise RecordNotFoundError("todo", todo_id)
            replacement = mutate(current.model_copy(deep=True))
            stored = replacement.model_copy(update={"id": todo_id}, deep=True)
            self._todos[todo_id] = stored
            return stored.model_copy(deep=True)

    def delete(self, todo_id: int) -> None:
        """Remove a todo permanently. Its ID is never handed out again."""
        with self._lock.write_locked():
            if todo_id not in self._todos:
                raise RecordNotFoundError("todo", todo_id)
            del self._todos[todo_id]

    def get_user_by_id(self, user_id: int) -> User:
        with self._lock.read_locked():
            user = self._users.get(user_id)
            if user is None:
                raise RecordNotFoundError("user", user_id)
            return user.model_copy(deep=True)

    def get_all_users(self) -> List[User]:
        with self._lock.read_locked():
            return [self._users[user_id].model_copy(deep=True) for user_id in sorted(self._users)]

    def clear(self) -> None:
        """Drop all todos, reset the id counter and restore the seed users (testing helper)."""
        with self._lock.write_locked():
            self._todos.clear()
            self._users = self._copy_seed()
            self._next_id = 1
