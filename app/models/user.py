"""ORM model for user accounts."""

from sqlalchemy import JSON, Column, DateTime, Integer, String, func
from sqlalchemy.dialects.postgresql import JSONB

from app.models.base import Base


class User(Base):
    """
    User account for cookie-session authentication and scope-based access control.

    scope: non-empty list of 'user' and/or 'admin'.
    The bcrypt hash is stored in the 'hash' column and never leaves the repository layer.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True, index=True)
    password_hash = Column("hash", String(255), nullable=False)
    scope = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=func.now(),
    )
