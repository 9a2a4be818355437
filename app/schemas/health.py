"""Schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    environment: str = Field(description="APP_ENV the process runs with")
    version: str
    database: Literal["connected", "disconnected"] = Field(
        description="Whether a trivial SELECT succeeded",
    )
