"""Pydantic schemas for store responses."""

from src.schemas.todo import TodoResponse

__all__ = [
    "TodoResponse",
]
