"""Schemas for the users resource."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.schemas.auth import UserPublic, UserRole


class UserCreateRequest(BaseModel):
    name: str | None = Field(default=None, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, max_length=128)
    role: UserRole | None = None


class UserUpdateRequest(BaseModel):
    """Only the display name is editable; email and role changes go through re-registration."""

    name: str | None = Field(default=None, max_length=255)


class UserKeySummary(BaseModel):
    """API key as listed under its owner (the key value is never re-shown)."""

    model_config = {"from_attributes": True}

    id: int
    requests: int
    created_at: datetime | None = None


class UserProductSummary(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    type: str
    serial_number: str


class UserDetail(UserPublic):
    """User with the keys and products they own."""

    keys: list[UserKeySummary] = Field(default_factory=list)
    products: list[UserProductSummary] = Field(default_factory=list)


class UserResponse(BaseModel):
    success: bool = True
    data: UserPublic


class UserDetailResponse(BaseModel):
    success: bool = True
    data: UserDetail


class UsersListResponse(BaseModel):
    success: bool = True
    data: list[UserDetail]
