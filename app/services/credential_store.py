"""Credential store: user records, password hashing and credential checks."""

import logging
from collections.abc import Sequence

from app.core.security import (
    DEFAULT_BCRYPT_ROUNDS,
    DEFAULT_SCOPE,
    hash_password,
    verify_password,
)
from app.repositories.base import DuplicateUsernameError, StoredUser, UserRepository
from app.schemas.users import Pagination, UserPage, UserView
from app.services.exceptions import UsernameTakenError, UserNotFoundError

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
USERNAME_TAKEN = "Username already taken"


def _view(user: StoredUser) -> UserView:
    return UserView.model_validate(user)


class CredentialStore:
    """
    Owns user records on top of a UserRepository.

    Callers hand in plaintext passwords and get back UserView objects; the
    bcrypt hash never leaves this class. Storage errors other than the typed
    outcomes of the repository propagate unchanged.
    """

    def __init__(self, repository: UserRepository, bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS):
        """
        Args:
            repository: storage backend for user rows.
            bcrypt_rounds: bcrypt cost factor for new hashes.
        """
        self.repository = repository
        self.bcrypt_rounds = bcrypt_rounds

    def create(
        self,
        username: str,
        password: str,
        scope: Sequence[str] | None = None,
    ) -> int:
        """
        Hash the password, persist the user and return its new id.

        Raises:
            UsernameTakenError: the username already exists. Detected by the
                repository's uniqueness constraint, so concurrent creates with
                the same username yield exactly one record.
        """
        password_hash = hash_password(password, self.bcrypt_rounds)
        try:
            user = self.repository.create(
                username=username,
                password_hash=password_hash,
                scope=list(scope) if scope else list(DEFAULT_SCOPE),
            )
        except DuplicateUsernameError as e:
            raise UsernameTakenError(USERNAME_TAKEN) from e
        logger.info("Created user id=%s username=%s scope=%s", user.id, user.username, user.scope)
        return user.id

    def read(self, user_id: int) -> UserView:
        """
        Return the user without its hash.

        Raises:
            UserNotFoundError: no user has this id.
        """
        user = self.repository.get(user_id)
        if user is None:
            raise UserNotFoundError(USER_NOT_FOUND)
        return _view(user)

    def update(
        self,
        user_id: int,
        *,
        password: str | None = None,
        scope: Sequence[str] | None = None,
        username: str | None = None,
    ) -> UserView:
        """
        Partially update a user and return the result.

        Arguments left as None are not touched; a new password is re-hashed.

        Raises:
            UserNotFoundError: no user has this id.
            UsernameTakenError: renaming onto an existing username.
        """
        changes: dict[str, object] = {}
        if username is not None:
            changes["username"] = username
        if scope is not None:
            changes["scope"] = list(scope)
        if password is not None:
            changes["password_hash"] = hash_password(password, self.bcrypt_rounds)

        try:
            user = self.repository.update(user_id, changes)
        except DuplicateUsernameError as e:
            raise UsernameTakenError(USERNAME_TAKEN) from e
        if user is None:
            raise UserNotFoundError(USER_NOT_FOUND)
        if changes:
            logger.info("Updated user id=%s fields=%s", user_id, sorted(changes))
        return _view(user)

    def delete(self, user_id: int) -> None:
        """
        Remove a user.

        Raises:
            UserNotFoundError: no user has this id.
        """
        if not self.repository.delete(user_id):
            raise UserNotFoundError(USER_NOT_FOUND)
        logger.info("Deleted user id=%s", user_id)

    def list(self, page: int = 1, limit: int = 10) -> UserPage:
        """
        Offset pagination in ascending id order; totalItems counts all users.

        A page past the last one is empty and never reaches the repository's
        list query, so arbitrarily large page numbers are safe.
        """
        total = self.repository.count()
        offset = (page - 1) * limit
        users = self.repository.list(offset=offset, limit=limit) if offset < total else []
        return UserPage(
            pagination=Pagination(total_items=total, page=page, limit=limit),
            data=[_view(u) for u in users],
        )

    def validate_credentials(self, username: str, password: str) -> UserView | None:
        """Return the user if the password matches, else None. Never raises for a mismatch."""
        user = self.repository.find_by_username(username)
        if user is None:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return _view(user)
