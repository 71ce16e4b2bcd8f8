"""Request/response schemas for login and logout."""

from pydantic import BaseModel, ConfigDict, Field

from app.core.security import LOGIN_PASSWORD_MIN_LEN, PASSWORD_MAX_LEN
from app.schemas.users import CredentialStr


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: CredentialStr = Field(..., min_length=1, description="Username")
    password: CredentialStr = Field(
        ...,
        min_length=LOGIN_PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )


class CurrentUser(BaseModel):
    """Session principal: the sanitized user attached to an authenticated session."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    scope: list[str]


class LoginResponse(BaseModel):
    """Returned with the session cookie after a successful login."""

    ok: bool = True
    message: str = "login successful"
    data: CurrentUser


class LogoutResponse(BaseModel):
    ok: bool = True
    message: str = "logout successful"
