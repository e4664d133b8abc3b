"""User id -> User index."""

from uuid import UUID

from src.models.user import User


class UserIndex:
    """Source of truth for user records, keyed by user id."""

    def __init__(self) -> None:
        self._users: dict[UUID, User] = {}

    def put(self, user_id: UUID, user: User) -> None:
        """Store a user, replacing any record already held under the id."""
        self._users[user_id] = user

    def get(self, user_id: UUID) -> User | None:
        return self._users.get(user_id)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._users

    def __len__(self) -> int:
        return len(self._users)
