"""In-memory entity models."""

from src.models.enums import TodoStatus
from src.models.todo import Todo
from src.models.user import User

__all__ = [
    "User",
    "Todo",
    "TodoStatus",
]
