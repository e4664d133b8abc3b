"""JSON envelopes for store outcomes."""

import json
from typing import Any

from pydantic_core import to_jsonable_python

from src.config import get_settings
from src.services.outcome import Failure, Outcome

SERIALIZATION_ERROR = '{"status":"error", "message":"Failed to serialize response."}'


def to_jsonable(outcome: Outcome) -> dict[str, Any]:
    """Convert an outcome to plain JSON types.

    Schemas are dumped by alias (createdAt), UUIDs become hyphenated hex
    strings and datetimes become ISO-8601 strings.
    """
    return to_jsonable_python(outcome.to_dict(), by_alias=True)


def render(outcome: Outcome, indent: int | None = None) -> str:
    """Render an outcome as a JSON envelope.

    Falls back to a fixed error envelope if the payload holds a value that
    cannot be serialized.
    """
    if indent is None:
        indent = get_settings().json_indent
    try:
        return json.dumps(to_jsonable(outcome), indent=indent)
    except (TypeError, ValueError):
        return SERIALIZATION_ERROR


def error_response(message: str, indent: int | None = None) -> str:
    """Render a bare error envelope."""
    return render(Failure(message), indent=indent)
