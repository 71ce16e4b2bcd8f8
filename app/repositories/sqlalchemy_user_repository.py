"""UserRepository backed by the SQLAlchemy ORM."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.core.database import check_db_connected
from app.models.user import User
from app.repositories.base import (
    DuplicateUsernameError,
    StoredUser,
    UserRepository,
    check_changes,
)

logger = logging.getLogger(__name__)

# users.id is a 32-bit INTEGER column.
MAX_USER_ID = 2**31 - 1


def _storable_id(user_id: int) -> bool:
    return 1 <= user_id <= MAX_USER_ID


def _to_stored(user: User) -> StoredUser:
    return StoredUser(
        id=user.id,
        username=user.username,
        password_hash=user.password_hash,
        scope=list(user.scope or []),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


class SqlalchemyUserRepository(UserRepository):
    """
    Opens one short-lived session per operation from a shared session factory.

    Username uniqueness is enforced by the unique index on users.username; an
    IntegrityError on commit is reported as DuplicateUsernameError.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self.session_factory = session_factory

    def create(self, username: str, password_hash: str, scope: Sequence[str]) -> StoredUser:
        with self.session_factory() as db:
            user = User(username=username, password_hash=password_hash, scope=list(scope))
            db.add(user)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise DuplicateUsernameError(username) from e
            db.refresh(user)
            return _to_stored(user)

    def get(self, user_id: int) -> StoredUser | None:
        if not _storable_id(user_id):
            return None
        with self.session_factory() as db:
            user = db.get(User, user_id)
            return _to_stored(user) if user is not None else None

    def find_by_username(self, username: str) -> StoredUser | None:
        with self.session_factory() as db:
            user = db.query(User).filter(User.username == username).first()
            return _to_stored(user) if user is not None else None

    def update(self, user_id: int, changes: dict[str, Any]) -> StoredUser | None:
        check_changes(changes)
        if not _storable_id(user_id):
            return None
        with self.session_factory() as db:
            user = db.get(User, user_id)
            if user is None:
                return None
            if not changes:
                return _to_stored(user)
            for name, value in changes.items():
                setattr(user, name, list(value) if name == "scope" else value)
            try:
                db.commit()
            except IntegrityError as e:
                db.rollback()
                raise DuplicateUsernameError(changes.get("username", user.username)) from e
            db.refresh(user)
            return _to_stored(user)

    def delete(self, user_id: int) -> bool:
        if not _storable_id(user_id):
            return False
        with self.session_factory() as db:
            deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
            db.commit()
            return deleted > 0

    def list(self, offset: int, limit: int) -> list[StoredUser]:
        with self.session_factory() as db:
            users = db.query(User).order_by(User.id).offset(offset).limit(limit).all()
            return [_to_stored(u) for u in users]

    def count(self) -> int:
        with self.session_factory() as db:
            return db.query(User).count()

    def ping(self) -> bool:
        return check_db_connected(self.session_factory)
