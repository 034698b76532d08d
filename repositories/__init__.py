from .locks import ReadWriteLock
from .todo_repository import RecordNotFoundError, TodoRepository
from .user_seeder import add_user_to_seed, seed_users

__all__ = [
    "ReadWriteLock",
    "RecordNotFoundError",
    "TodoRepository",
    "add_user_to_seed",
    "seed_users",
]
