"""Todo store service: user accounts and their todos."""

import logging
import threading
from collections.abc import Callable
from functools import wraps
from typing import Any
from uuid import UUID

from src.config import Settings, get_settings
from src.models.enums import TodoStatus
from src.models.todo import Todo
from src.models.user import User
from src.schemas.todo import TodoResponse
from src.services.errors import (
    AuthenticationError,
    DuplicateEmailError,
    InvalidArgumentError,
    StoreError,
    TodoNotFoundError,
    UserNotFoundError,
)
from src.services.outcome import Failure, Outcome, Success
from src.storage import EmailIndex, TodoIndex, UserIndex

logger = logging.getLogger(__name__)


def store_operation(func: Callable[..., Outcome]) -> Callable[..., Outcome]:
    """Run a service method under the store lock and turn StoreErrors into Failures."""

    @wraps(func)
    def wrapper(self: "TodoService", *args: Any, **kwargs: Any) -> Outcome:
        with self._lock:
            try:
                return func(self, *args, **kwargs)
            except StoreError as e:
                logger.warning(f"{func.__name__} failed ({e.kind}): {e.message}")
                return Failure(e.message, e.kind)

    return wrapper


def _parse_id(value: UUID | str | None, label: str) -> UUID:
    """Accept a UUID or its canonical string form."""
    if value is None:
        raise InvalidArgumentError(f"{label} cannot be null.")
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise InvalidArgumentError(f"{label} '{value}' is not a valid identifier.") from None


def _parse_status(value: TodoStatus | str) -> TodoStatus:
    if isinstance(value, TodoStatus):
        return value
    try:
        return TodoStatus(str(value).upper())
    except ValueError:
        raise InvalidArgumentError(f"Unknown todo status '{value}'.") from None


def _snapshot(todo: Todo) -> TodoResponse:
    return TodoResponse.model_validate(todo)


class TodoService:
    """Façade over the user, email and todo indices.

    Every public method returns an Outcome and never raises for bad input,
    missing records or wrong passwords. All methods share one re-entrant
    lock, so each runs as a single atomic step even with concurrent callers.
    Checks always run before any index is touched, so a Failure leaves the
    store unchanged.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self._emails = EmailIndex()
        self._users = UserIndex()
        self._todos = TodoIndex()
        self._lock = threading.RLock()

    # ========== Users ==========

    @store_operation
    def register_user(self, email: str | None, password: str | None) -> Outcome:
        """Register a new user and return its id."""
        if email is None:
            raise InvalidArgumentError("Email cannot be null.")
        if not email.strip():
            raise InvalidArgumentError("Email cannot be empty.")
        if "@" not in email:
            raise InvalidArgumentError(f"Email '{email}' must contain '@'.")
        self._check_password(password, "Password")
        if self._emails.contains_email(email):
            raise DuplicateEmailError(f"Email '{email}' is already registered.")

        user = User(email=email, password=password)
        self._users.put(user.id, user)
        self._emails.put(user.id, user.email)

        logger.info(f"Registered user {user.id}")
        return Success({"message": "User registered successfully.", "userId": user.id})

    @store_operation
    def login_user(self, email: str | None, password: str | None) -> Outcome:
        """Check credentials and return the user id, which acts as a bearer token."""
        if email is None:
            raise InvalidArgumentError("Email cannot be null.")
        if password is None:
            raise InvalidArgumentError("Password cannot be null.")

        user_id = self._emails.get_id_by_email(email)
        if user_id is None:
            raise UserNotFoundError(f"User with email '{email}' not found.")
        user = self._get_user(user_id)
        if user.password != password:
            raise AuthenticationError("Invalid password.")

        logger.info(f"User {user.id} logged in")
        return Success({"message": "Login successful.", "userId": user.id})

    @store_operation
    def update_password(
        self,
        user_id: UUID | str | None,
        old_password: str | None,
        new_password: str | None,
    ) -> Outcome:
        """Replace a user's password after confirming the current one."""
        user = self._get_user(user_id)
        if user.password != old_password:
            raise AuthenticationError("Old password does not match.")
        self._check_password(new_password, "New password")

        user.password = new_password
        self._users.put(user.id, user)

        logger.info(f"Updated password for user {user.id}")
        return Success({"message": "Password updated successfully."})

    # ========== Todos ==========

    @store_operation
    def add_todo(
        self,
        user_id: UUID | str | None,
        title: str | None,
        details: str | None = None,
    ) -> Outcome:
        """Create an active todo for the user."""
        user = self._get_user(user_id)
        self._check_title(title)

        todo = Todo(title=title, details=details)
        self._todos.put(user.id, todo)

        logger.info(f"Added todo {todo.id} for user {user.id}")
        return Success({"message": "Todo added successfully.", "todo": _snapshot(todo)})

    @store_operation
    def update_todo(
        self,
        user_id: UUID | str | None,
        todo_id: UUID | str | None,
        title: str | None = None,
        details: str | None = None,
        status: TodoStatus | str | None = None,
    ) -> Outcome:
        """Apply a partial update; fields left as None keep their value."""
        user = self._get_user(user_id)
        todo = self._get_todo(user, todo_id)
        if title is not None:
            self._check_title(title)
        new_status = _parse_status(status) if status is not None else None

        if title is not None:
            todo.title = title
        if details is not None:
            todo.details = details
        if new_status is not None:
            todo.status = new_status

        logger.info(f"Updated todo {todo.id} for user {user.id}")
        return Success({"updatedTodo": _snapshot(todo)})

    @store_operation
    def delete_todo(self, user_id: UUID | str | None, todo_id: UUID | str | None) -> Outcome:
        """Remove a todo from the user's collection."""
        user = self._get_user(user_id)
        target = _parse_id(todo_id, "Todo ID")

        if not self._todos.remove_where(user.id, lambda todo: todo.id == target):
            raise TodoNotFoundError(f"Todo with ID '{target}' not found for this user.")

        logger.info(f"Deleted todo {target} for user {user.id}")
        return Success({"message": "Todo deleted successfully."})

    @store_operation
    def get_all_todos(self, user_id: UUID | str | None) -> Outcome:
        """List every todo of the user in insertion order."""
        user = self._get_user(user_id)
        return self._todo_list(self._todos.get(user.id))

    @store_operation
    def get_active_todos(self, user_id: UUID | str | None) -> Outcome:
        user = self._get_user(user_id)
        return self._todo_list(
            todo for todo in self._todos.get(user.id) if todo.status == TodoStatus.ACTIVE
        )

    @store_operation
    def get_completed_todos(self, user_id: UUID | str | None) -> Outcome:
        user = self._get_user(user_id)
        return self._todo_list(
            todo for todo in self._todos.get(user.id) if todo.status == TodoStatus.COMPLETED
        )

    @store_operation
    def search_todos(self, user_id: UUID | str | None, query: str | None) -> Outcome:
        """Find todos whose title, details or creation time contain the query.

        Matching ignores case. An empty query matches every todo.
        """
        user = self._get_user(user_id)
        if query is None:
            raise InvalidArgumentError("Search query cannot be null.")
        return self._todo_list(todo for todo in self._todos.get(user.id) if todo.matches(query))

    # ========== Helpers ==========

    def _get_user(self, user_id: UUID | str | None) -> User:
        key = _parse_id(user_id, "User ID")
        user = self._users.get(key)
        if user is None:
            raise UserNotFoundError(f"User with ID '{key}' not found.")
        logger.debug(f"Resolved user {key}")
        return user

    def _get_todo(self, user: User, todo_id: UUID | str | None) -> Todo:
        target = _parse_id(todo_id, "Todo ID")
        todo = self._todos.find(user.id, lambda candidate: candidate.id == target)
        if todo is None:
            raise TodoNotFoundError(f"Todo with ID '{target}' not found.")
        return todo

    def _check_password(self, password: str | None, label: str) -> None:
        if password is None:
            raise InvalidArgumentError(f"{label} cannot be null.")
        minimum = self.settings.min_password_length
        if len(password) < minimum:
            raise InvalidArgumentError(f"{label} must be at least {minimum} characters long.")

    @staticmethod
    def _check_title(title: str | None) -> None:
        if title is None:
            raise InvalidArgumentError("Todo title cannot be null.")
        if not title.strip():
            raise InvalidArgumentError("Todo title cannot be empty.")

    @staticmethod
    def _todo_list(todos) -> Success:
        return Success({"todos": [_snapshot(todo) for todo in todos]})
