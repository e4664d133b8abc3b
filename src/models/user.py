"""User model."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass(eq=False)
class User:
    """User account owning a collection of todos.

    Only the password changes after registration. It is stored and compared
    as plaintext.
    """

    email: str
    password: str = field(repr=False)
    id: UUID = field(default_factory=uuid4)
