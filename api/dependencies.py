"""Dependency wiring for the todo routes."""

from functools import lru_cache

from fastapi import Depends

from repositories.todo_repository import TodoRepository
from services.todo_service import TodoService


@lru_cache
def get_todo_repository() -> TodoRepository:
    """The process-wide store shared by every request thread."""
    return TodoRepository()


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    return TodoService(repository)
