"""Health check endpoint with storage connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.core.context import AppContext, get_context
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(context: Annotated[AppContext, Depends(get_context)]) -> HealthResponse:
    """
    Return service health status and storage connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if context.repository.ping() else "disconnected"

    return HealthResponse(
        status="ok",
        environment=context.settings.APP_ENV,
        backend=context.settings.USER_STORE_BACKEND,
        database=db_status,
    )
