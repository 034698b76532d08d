from .todo import Todo, TodoBase, TodoRequest
from .user import User

__all__ = ["Todo", "TodoBase", "TodoRequest", "User"]
