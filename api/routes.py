"""API routes for todo management."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from api import responses
from api.dependencies import get_todo_service
from models.todo import TodoRequest
from services.todo_service import TodoService

router = APIRouter()


@router.get("/users")
def get_users(service: TodoService = Depends(get_todo_service)) -> JSONResponse:
    """Get all users."""
    return responses.success(responses.GET, service.get_all_users())


@router.get("/todos")
def get_todos(
    user_id: Optional[int] = Query(None, description="Only return todos owned by this user"),
    service: TodoService = Depends(get_todo_service),
) -> JSONResponse:
    """Get all todos, optionally filtered by owner."""
    if user_id is None:
        todos = service.get_all_todos()
    else:
        todos = service.get_todos_by_user(user_id)
    return responses.success(responses.GET, todos)


@router.get("/todos/{todo_id}")
def get_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> JSONResponse:
    """Get a specific todo item by ID."""
    return responses.success(responses.GET, service.get_todo_by_id(todo_id))


@router.post("/todos")
def create_todo(
    todo_data: TodoRequest,
    service: TodoService = Depends(get_todo_service),
) -> JSONResponse:
    """Create a new todo item. The user must exist."""
    todo = service.create_todo(todo_data.text, todo_data.user_id, todo_data.completed)
    return responses.success(responses.CREATED, todo)


@router.put("/todos/{todo_id}")
def update_todo(
    todo_id: int,
    todo_data: TodoRequest,
    service: TodoService = Depends(get_todo_service),
) -> JSONResponse:
    """Update the text and completed flag of a todo item."""
    todo = service.update_todo(todo_id, todo_data.text, todo_data.user_id, todo_data.completed)
    return responses.success(responses.UPDATED, todo)


@router.patch("/todos/{todo_id}/toggle")
def toggle_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> JSONResponse:
    """Toggle the completed status of a todo item."""
    todo = service.toggle_todo(todo_id)
    return responses.success(responses.UPDATED, todo, "Todo toggled successfully")


@router.delete("/todos/{todo_id}")
def delete_todo(
    todo_id: int,
    service: TodoService = Depends(get_todo_service),
) -> JSONResponse:
    """Delete a todo item."""
    service.delete_todo(todo_id)
    return responses.success(responses.DELETED, message="Todo deleted successfully")
