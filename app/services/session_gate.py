"""Session gate: turns verified credentials into a session principal and back."""

import logging
from collections.abc import MutableMapping
from typing import Any

from pydantic import ValidationError

from app.schemas.auth import CurrentUser
from app.services.credential_store import CredentialStore
from app.services.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

# Same message for unknown user and wrong password.
BAD_CREDENTIALS = "Bad username or password"
PRINCIPAL_KEY = "principal"


class SessionGate:
    """
    Login/logout over a session mapping (the signed-cookie session of the request).

    The gate only writes and clears the principal; signing, expiry and the
    cookie itself belong to the session middleware.
    """

    def __init__(self, credential_store: CredentialStore):
        self.credential_store = credential_store

    def login(self, session: MutableMapping[str, Any], username: str, password: str) -> CurrentUser:
        user = self.credential_store.validate_credentials(username, password)
        if user is None:
            logger.info("Rejected login for username=%s", username)
            raise InvalidCredentialsError(BAD_CREDENTIALS)
        principal = CurrentUser(id=user.id, username=user.username, scope=user.scope)
        session.clear()
        session[PRINCIPAL_KEY] = principal.model_dump()
        logger.info("Login id=%s username=%s", principal.id, principal.username)
        return principal

    def logout(self, session: MutableMapping[str, Any]) -> None:
        """Clear the session; a session with no principal is not an error."""
        session.clear()

    def current_principal(self, session: MutableMapping[str, Any]) -> CurrentUser | None:
        """Return the principal stored in the session, or None if absent or malformed."""
        raw = session.get(PRINCIPAL_KEY)
        if raw is None:
            return None
        try:
            return CurrentUser.model_validate(raw)
        except ValidationError:
            return None
