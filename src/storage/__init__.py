"""In-memory indices backing the todo store."""

from src.storage.email_index import EmailIndex
from src.storage.todo_index import TodoIndex
from src.storage.user_index import UserIndex

__all__ = [
    "EmailIndex",
    "UserIndex",
    "TodoIndex",
]
