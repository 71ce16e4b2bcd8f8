"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status plus which user store is active and whether it answers."""

    status: Literal["ok"] = "ok"
    environment: str = Field(description="Current app environment (dev, test, prod)")
    backend: Literal["sql", "memory"] = Field(description="Configured user store backend")
    database: Literal["connected", "disconnected"] = Field(
        description="Whether the user store answered a trivial query",
    )
