"""Enums for model fields."""

from enum import StrEnum


class TodoStatus(StrEnum):
    """Lifecycle status of a todo."""

    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"

    def is_done(self) -> bool:
        """Check if this status marks the todo as finished."""
        return self == TodoStatus.COMPLETED
