"""Schemas for the API keys resource."""

from datetime import datetime

from pydantic import BaseModel, Field


class KeyGenerateRequest(BaseModel):
    user_id: int | None = Field(default=None, description="Owner of the new key")


class GeneratedKey(BaseModel):
    """Returned once at generation; the token is not retrievable afterwards."""

    id: int
    token: str
    user_id: int
    requests: int


class KeyGenerateResponse(BaseModel):
    success: bool = True
    message: str
    data: GeneratedKey


class KeyOwner(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str


class KeyListItem(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    user_id: int
    requests: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user: KeyOwner


class KeysListResponse(BaseModel):
    success: bool = True
    data: list[KeyListItem]
