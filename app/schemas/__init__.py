"""Pydantic request/response schemas."""

from app.schemas.auth import CurrentUser, LoginRequest, LoginResponse, LogoutResponse
from app.schemas.health import HealthResponse
from app.schemas.users import (
    MessageResponse,
    Pagination,
    UserCreate,
    UserPage,
    UserUpdate,
    UserView,
)

__all__ = [
    "CurrentUser",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "MessageResponse",
    "Pagination",
    "UserCreate",
    "UserPage",
    "UserUpdate",
    "UserView",
]
