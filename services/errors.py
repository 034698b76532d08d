"""Errors raised by the todo service.

Each error belongs to one of three kinds, exposed through ``code``:
invalid input, a missing record, or a reference to a user that does not exist.
"""

from __future__ import annotations

from typing import Optional


class TodoServiceError(Exception):
    code = "error"
    default_message = "todo service error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInputError(TodoServiceError):
    code = "invalid_input"
    default_message = "invalid input"


class InvalidTodoTextError(InvalidInputError):
    default_message = "todo text cannot be empty"


class InvalidUserIDError(InvalidInputError):
    default_message = "invalid user ID"


class InvalidTodoIDError(InvalidInputError):
    default_message = "invalid todo ID"


class NotFoundError(TodoServiceError):
    code = "not_found"
    default_message = "record not found"


class TodoNotFoundError(NotFoundError):
    default_message = "todo not found"


class ReferentialViolationError(TodoServiceError):
    code = "referential_violation"
    default_message = "referenced record does not exist"


class UserNotFoundError(ReferentialViolationError):
    default_message = "user_id not found"
