"""User storage port and its backends."""

from app.repositories.base import (
    DuplicateUsernameError,
    StoredUser,
    UserRepository,
)
from app.repositories.memory_user_repository import InMemoryUserRepository
from app.repositories.sqlalchemy_user_repository import SqlalchemyUserRepository

__all__ = [
    "DuplicateUsernameError",
    "InMemoryUserRepository",
    "SqlalchemyUserRepository",
    "StoredUser",
    "UserRepository",
]
