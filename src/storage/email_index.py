"""Bidirectional user id <-> email index."""

from uuid import UUID


class EmailIndex:
    """Two one-directional dicts kept in step by a single write path.

    The index does not check uniqueness itself. Callers must confirm with
    contains_email() before calling put().
    """

    def __init__(self) -> None:
        self._email_by_id: dict[UUID, str] = {}
        self._id_by_email: dict[str, UUID] = {}

    def put(self, user_id: UUID, email: str) -> None:
        """Bind a user id and an email in both directions."""
        self._email_by_id[user_id] = email
        self._id_by_email[email] = user_id

    def contains_email(self, email: str) -> bool:
        return email in self._id_by_email

    def get_id_by_email(self, email: str) -> UUID | None:
        return self._id_by_email.get(email)

    def get_email(self, user_id: UUID) -> str | None:
        return self._email_by_id.get(user_id)

    def __len__(self) -> int:
        return len(self._email_by_id)
