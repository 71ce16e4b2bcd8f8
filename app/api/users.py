"""Users resource: create, read, update, delete and list user accounts."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.auth import require_admin, require_member, require_registration_access
from app.core.context import get_credential_store
from app.schemas.auth import CurrentUser
from app.schemas.users import MessageResponse, UserCreate, UserPage, UserUpdate, UserView
from app.services.credential_store import CredentialStore

router = APIRouter()

Store = Annotated[CredentialStore, Depends(get_credential_store)]


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    store: Store,
    _user: Annotated[CurrentUser | None, Depends(require_registration_access)],
) -> MessageResponse:
    """Create a user. Duplicate usernames are rejected with 400."""
    user_id = store.create(body.username, body.password, body.scope)
    return MessageResponse(message=f"Created user with id {user_id}")


@router.get("", response_model=UserPage)
def list_users(
    store: Store,
    _user: Annotated[CurrentUser, Depends(require_member)],
    page: Annotated[int, Query(ge=1, description="page to fetch")] = 1,
    limit: Annotated[int, Query(ge=1, le=100, description="number of items per page")] = 10,
) -> UserPage:
    """List users one page at a time, ordered by id."""
    return store.list(page=page, limit=limit)


@router.get("/{user_id}", response_model=UserView)
def read_user(
    user_id: int,
    store: Store,
    _user: Annotated[CurrentUser, Depends(require_member)],
) -> UserView:
    return store.read(user_id)


@router.put("/{user_id}", response_model=MessageResponse)
def update_user(
    user_id: int,
    body: UserUpdate,
    store: Store,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    """Update username, password and/or scope; omitted fields keep their values."""
    user = store.update(
        user_id,
        username=body.username,
        password=body.password,
        scope=body.scope,
    )
    return MessageResponse(message=f"Updated user {user.id}")


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    store: Store,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Response:
    store.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
