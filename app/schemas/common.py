"""Shared response envelopes."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    success: bool = Field(default=False)
    message: str = Field(..., description="Human-readable failure reason")
    error: str | None = Field(default=None, description="Underlying error detail, when useful")


class MessageResponse(BaseModel):
    """Success with a message and no payload (e.g. deletions)."""

    success: bool = True
    message: str
