"""Process-wide collaborators, built once at startup and handed to request handlers."""

import logging
from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.engine import Engine

from app.core.config import Settings
from app.core.database import create_db_engine, make_session_factory
from app.models import Base
from app.repositories import (
    InMemoryUserRepository,
    SqlalchemyUserRepository,
    UserRepository,
)
from app.services.credential_store import CredentialStore
from app.services.session_gate import SessionGate

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    settings: Settings
    repository: UserRepository
    credential_store: CredentialStore
    session_gate: SessionGate
    engine: Engine | None = None

    def close(self) -> None:
        """Close the connection pool. In-flight operations are not awaited."""
        if self.engine is not None:
            self.engine.dispose()


def build_context(settings: Settings) -> AppContext:
    """Select the storage backend from settings and wire the services on top of it."""
    engine = None
    if settings.USER_STORE_BACKEND == "memory":
        repository: UserRepository = InMemoryUserRepository()
    else:
        engine = create_db_engine(settings)
        if settings.DATABASE_CREATE_TABLES:
            Base.metadata.create_all(bind=engine)
        repository = SqlalchemyUserRepository(make_session_factory(engine))
    logger.info("User store backend: %s", settings.USER_STORE_BACKEND)

    credential_store = CredentialStore(repository, bcrypt_rounds=settings.BCRYPT_ROUNDS)
    return AppContext(
        settings=settings,
        repository=repository,
        credential_store=credential_store,
        session_gate=SessionGate(credential_store),
        engine=engine,
    )


def get_context(request: Request) -> AppContext:
    """Dependency: the AppContext attached to the running application."""
    return request.app.state.context


def get_credential_store(request: Request) -> CredentialStore:
    return get_context(request).credential_store


def get_session_gate(request: Request) -> SessionGate:
    return get_context(request).session_gate
