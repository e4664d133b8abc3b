"""User id -> ordered todos index."""

from collections import defaultdict
from collections.abc import Callable
from uuid import UUID

from src.models.todo import Todo

TodoPredicate = Callable[[Todo], bool]


class TodoIndex:
    """One-to-many index from a user id to that user's todos.

    Each user owns a separate list kept in insertion order. Lists are created
    on first insert and never shared. Empty lists are kept after removals.
    """

    def __init__(self) -> None:
        self._todos: defaultdict[UUID, list[Todo]] = defaultdict(list)

    def put(self, user_id: UUID, todo: Todo) -> None:
        """Append a todo to the user's list."""
        self._todos[user_id].append(todo)

    def get(self, user_id: UUID) -> list[Todo]:
        """Return a copy of the user's todos in insertion order.

        Reading an unknown user returns an empty list without creating one.
        """
        return list(self._todos.get(user_id, ()))

    def find(self, user_id: UUID, predicate: TodoPredicate) -> Todo | None:
        """Return the first todo of the user matching the predicate."""
        for todo in self._todos.get(user_id, ()):
            if predicate(todo):
                return todo
        return None

    def remove_where(self, user_id: UUID, predicate: TodoPredicate) -> bool:
        """Remove the first todo of the user matching the predicate.

        Returns:
            True if a todo was removed, False otherwise
        """
        todos = self._todos.get(user_id)
        if not todos:
            return False
        for position, todo in enumerate(todos):
            if predicate(todo):
                del todos[position]
                return True
        return False

    def count(self, user_id: UUID) -> int:
        return len(self._todos.get(user_id, ()))
