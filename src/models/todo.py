"""Todo model."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from src.models.enums import TodoStatus


@dataclass(eq=False)
class Todo:
    """Todo item owned by exactly one user."""

    title: str
    details: str | None = None
    status: TodoStatus = TodoStatus.ACTIVE
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.now)

    @property
    def is_completed(self) -> bool:
        """Check if the todo has been completed."""
        return self.status.is_done()

    def matches(self, query: str) -> bool:
        """Check whether the query occurs in the title, details or creation time.

        Matching is case-insensitive and substring based, so "dentist" finds
        "Schedule Dentist Appointment" and "2026-10" finds every todo created
        in October 2026.
        """
        needle = query.lower()
        if needle in self.title.lower():
            return True
        if self.details is not None and needle in self.details.lower():
            return True
        return needle in self.created_at.isoformat().lower()
