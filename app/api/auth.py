"""Cookie-session login/logout and auth dependencies (get_current_user, require_scope)."""

from collections.abc import Callable
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status

from app.core.context import AppContext, get_context, get_session_gate
from app.schemas.auth import CurrentUser, LoginRequest, LoginResponse, LogoutResponse
from app.services.session_gate import SessionGate

router = APIRouter()


def get_current_user(
    request: Request,
    gate: Annotated[SessionGate, Depends(get_session_gate)],
) -> CurrentUser:
    """Dependency: require a session principal. Raises 401 if there is none."""
    principal = gate.current_principal(request.session)
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return principal


def require_scope(*allowed: str) -> Callable[[CurrentUser], CurrentUser]:
    """
    Build a dependency that requires the principal's scope to intersect `allowed`.

    Scopes are flat tags: 'admin' does not imply 'user' or the other way round.
    """
    allowed_set = frozenset(allowed)

    def dependency(
        current_user: Annotated[CurrentUser, Depends(get_current_user)],
    ) -> CurrentUser:
        if allowed_set.isdisjoint(current_user.scope):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient scope",
            )
        return current_user

    return dependency


require_admin = require_scope("admin")
require_member = require_scope("user", "admin")


def require_registration_access(
    request: Request,
    context: Annotated[AppContext, Depends(get_context)],
) -> CurrentUser | None:
    """Dependency for POST /api/users: open when OPEN_REGISTRATION is set, admin-only otherwise."""
    if context.settings.OPEN_REGISTRATION:
        return None
    return require_admin(get_current_user(request, context.session_gate))


@router.post("/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    request: Request,
    gate: Annotated[SessionGate, Depends(get_session_gate)],
) -> LoginResponse:
    """
    Authenticate with username and password.

    On success the signed session cookie carries the principal; every failure
    gets the same 401 message.
    """
    principal = gate.login(request.session, body.username, body.password)
    return LoginResponse(data=principal)


@router.get("/logout", response_model=LogoutResponse)
def logout(
    request: Request,
    gate: Annotated[SessionGate, Depends(get_session_gate)],
    _user: Annotated[CurrentUser, Depends(require_member)],
) -> LogoutResponse:
    """Clear the session and its cookie."""
    gate.logout(request.session)
    return LogoutResponse()
