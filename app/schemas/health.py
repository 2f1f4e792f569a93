"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus database reachability; served without authentication."""

    status: Literal["ok"] = "ok"
    version: str = Field(description="Application version")
    environment: Literal["dev", "test", "prod"]
    database: Literal["connected", "disconnected"]
