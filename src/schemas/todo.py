"""Todo schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import TodoStatus


class TodoResponse(BaseModel):
    """Read-only snapshot of a todo handed out by the store."""

    model_config = ConfigDict(from_attributes=True, frozen=True, populate_by_name=True)

    id: UUID
    title: str
    details: str | None
    status: TodoStatus
    created_at: datetime = Field(alias="createdAt")
