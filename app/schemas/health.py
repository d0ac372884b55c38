"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status, build version and database reachability."""

    status: Literal["ok"] = "ok"
    service: str = Field(default="daily-menu-api", description="Service name")
    version: str = Field(description="Application version")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Result of a SELECT 1 against the configured database",
    )
