"""Request/response schemas for the users resource."""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from app.core.security import (
    DEFAULT_SCOPE,
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)

ScopeName = Literal["user", "admin"]


def _require_utf8(value: str) -> str:
    # JSON allows lone surrogates ("\ud800"); bcrypt and the database need UTF-8.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError("must be valid UTF-8 text") from e
    return value


CredentialStr = Annotated[str, AfterValidator(_require_utf8)]


def _dedupe_scope(scope: list[str]) -> list[str]:
    return list(dict.fromkeys(scope))


# Scope is a set; repeated tags collapse, first occurrence keeps its position.
ScopeList = Annotated[list[ScopeName], Field(min_length=1), AfterValidator(_dedupe_scope)]


class UserCreate(BaseModel):
    """Payload for creating a user; scope defaults to ['user']."""

    username: CredentialStr = Field(
        ...,
        min_length=USERNAME_MIN_LEN,
        max_length=USERNAME_MAX_LEN,
        description="User's username, used for login",
    )
    password: CredentialStr = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="User's password, used for login",
    )
    scope: ScopeList = Field(
        default_factory=lambda: list(DEFAULT_SCOPE),
        description="Roles that decide what the user may do in the system",
    )


class UserUpdate(BaseModel):
    """Partial update: omitted (or null) fields are left unchanged."""

    username: CredentialStr | None = Field(
        default=None, min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN
    )
    password: CredentialStr | None = Field(
        default=None, min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN
    )
    scope: ScopeList | None = None


class UserView(BaseModel):
    """A user record as exposed outside the credential store (no password, no hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    scope: list[str]
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_items: int = Field(..., alias="totalItems", description="Count of all users")
    page: int
    limit: int


class UserPage(BaseModel):
    """Response for GET /api/users: one offset page plus totals."""

    pagination: Pagination
    data: list[UserView]


class MessageResponse(BaseModel):
    ok: bool = True
    message: str
