"""Result type returned by every todo store operation."""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from src.services.errors import ErrorKind


@dataclass(frozen=True)
class Success:
    """Successful operation carrying its response fields."""

    payload: dict[str, Any] = field(default_factory=dict)
    ok: ClassVar[bool] = True

    def to_dict(self) -> dict[str, Any]:
        return {"status": "success", **self.payload}


@dataclass(frozen=True)
class Failure:
    """Failed operation with a human-readable message."""

    message: str
    kind: ErrorKind = ErrorKind.INVALID_INPUT
    ok: ClassVar[bool] = False

    def to_dict(self) -> dict[str, Any]:
        return {"status": "error", "message": self.message}


Outcome = Success | Failure
