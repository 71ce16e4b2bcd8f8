"""Storage port for user records: the interface every backend implements."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class StoredUser:
    """A user row as the storage layer sees it, including the password hash."""

    id: int
    username: str
    password_hash: str
    scope: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DuplicateUsernameError(Exception):
    """Raised by a repository when a write would break username uniqueness."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username '{username}' already exists")


# Fields a caller may change through UserRepository.update.
UPDATABLE_FIELDS = frozenset({"username", "password_hash", "scope"})


class UserRepository(ABC):
    @abstractmethod
    def create(self, username: str, password_hash: str, scope: Sequence[str]) -> StoredUser:
        """
        Persist a new user and return it with its assigned id.

        Raises DuplicateUsernameError if the username is taken; the check and the
        insert must be a single atomic step in the backend.
        """

    @abstractmethod
    def get(self, user_id: int) -> StoredUser | None:
        """Return the user with this id, or None."""

    @abstractmethod
    def find_by_username(self, username: str) -> StoredUser | None:
        """Return the user with this username, or None."""

    @abstractmethod
    def update(self, user_id: int, changes: dict[str, Any]) -> StoredUser | None:
        """
        Apply a partial update and return the updated user, or None if absent.

        Only keys in UPDATABLE_FIELDS are allowed. Raises DuplicateUsernameError
        when renaming onto an existing username.
        """

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove the user; return False if there was nothing to remove."""

    @abstractmethod
    def list(self, offset: int, limit: int) -> list[StoredUser]:
        """Return up to limit users after skipping offset, in ascending id order."""

    @abstractmethod
    def count(self) -> int:
        """Return the total number of users."""

    @abstractmethod
    def ping(self) -> bool:
        """Return True if the backend is reachable."""


def check_changes(changes: dict[str, Any]) -> None:
    unknown = set(changes) - UPDATABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")
