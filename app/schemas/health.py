"""Pydantic schemas for health check responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["OK"] = Field(default="OK", description="Service status")
    message: str = Field(description="Human-readable service status")
    timestamp: datetime = Field(description="Server time of the check (UTC)")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when check is performed",
    )
