"""Errors raised inside the todo store before they become Failure outcomes."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Categories of failed store operations."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"


class StoreError(Exception):
    """Base class for expected store failures."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UserNotFoundError(StoreError):
    kind = ErrorKind.NOT_FOUND


class TodoNotFoundError(StoreError):
    kind = ErrorKind.NOT_FOUND


class DuplicateEmailError(StoreError):
    kind = ErrorKind.CONFLICT


class InvalidArgumentError(StoreError):
    kind = ErrorKind.INVALID_INPUT


class AuthenticationError(StoreError):
    kind = ErrorKind.UNAUTHORIZED
