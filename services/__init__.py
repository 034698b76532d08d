from .errors import (
    InvalidInputError,
    InvalidTodoIDError,
    InvalidTodoTextError,
    InvalidUserIDError,
    NotFoundError,
    ReferentialViolationError,
    TodoNotFoundError,
    TodoServiceError,
    UserNotFoundError,
)
from .todo_service import TodoService

__all__ = [
    "InvalidInputError",
    "InvalidTodoIDError",
    "InvalidTodoTextError",
    "InvalidUserIDError",
    "NotFoundError",
    "ReferentialViolationError",
    "TodoNotFoundError",
    "TodoService",
    "TodoServiceError",
    "UserNotFoundError",
]
