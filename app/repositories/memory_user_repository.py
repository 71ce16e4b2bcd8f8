"""UserRepository kept in process memory (document-store style, no SQL)."""

import itertools
import threading
from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from app.repositories.base import (
    DuplicateUsernameError,
    StoredUser,
    UserRepository,
    check_changes,
)


class InMemoryUserRepository(UserRepository):
    """Users keyed by id; writes hold a lock so the uniqueness check and write are atomic."""

    def __init__(self) -> None:
        self._users: dict[int, StoredUser] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _username_taken(self, username: str, exclude_id: int | None = None) -> bool:
        return any(u.username == username and u.id != exclude_id for u in self._users.values())

    def create(self, username: str, password_hash: str, scope: Sequence[str]) -> StoredUser:
        with self._lock:
            if self._username_taken(username):
                raise DuplicateUsernameError(username)
            user = StoredUser(
                id=next(self._ids),
                username=username,
                password_hash=password_hash,
                scope=list(scope),
                created_at=datetime.now(UTC),
            )
            self._users[user.id] = user
            return user

    def get(self, user_id: int) -> StoredUser | None:
        return self._users.get(user_id)

    def find_by_username(self, username: str) -> StoredUser | None:
        for user in list(self._users.values()):
            if user.username == username:
                return user
        return None

    def update(self, user_id: int, changes: dict[str, Any]) -> StoredUser | None:
        check_changes(changes)
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return None
            if not changes:
                return user
            if "username" in changes and self._username_taken(changes["username"], exclude_id=user_id):
                raise DuplicateUsernameError(changes["username"])
            values = dict(changes)
            if "scope" in values:
                values["scope"] = list(values["scope"])
            updated = replace(user, updated_at=datetime.now(UTC), **values)
            self._users[user_id] = updated
            return updated

    def delete(self, user_id: int) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def list(self, offset: int, limit: int) -> list[StoredUser]:
        ordered = sorted(self._users.values(), key=lambda u: u.id)
        return ordered[offset : offset + limit]

    def count(self) -> int:
        return len(self._users)

    def ping(self) -> bool:
        return True
