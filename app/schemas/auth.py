"""Request/response schemas for auth endpoints and token claims."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

UserRole = Literal["user", "admin"]

USER_ROLES: tuple[str, ...] = ("user", "admin")


class RegisterRequest(BaseModel):
    """Registration payload. Blank fields are rejected by the identity service."""

    name: str | None = Field(default=None, max_length=255, description="Display name")
    email: str | None = Field(default=None, max_length=255, description="Email (unique)")
    password: str | None = Field(default=None, max_length=128, description="Password")
    role: UserRole | None = Field(default=None, description="Role; defaults to 'user'")


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str | None = Field(default=None, max_length=255, description="Email")
    password: str | None = Field(default=None, max_length=128, description="Password")


class UserPublic(BaseModel):
    """Identity fields safe to return to clients (never the password hash)."""

    model_config = {"from_attributes": True}

    id: int
    name: str
    email: str
    role: UserRole
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AuthResponse(BaseModel):
    """Returned by register and login: a bearer token plus the identity it was issued for."""

    success: bool = True
    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
    user: UserPublic


class MeResponse(BaseModel):
    success: bool = True
    user: UserPublic


class TokenClaims(BaseModel):
    """Verified claims recovered from a bearer token."""

    user_id: int
    email: str
    role: str | None = None
    iat: int | None = None
    exp: int


class AuthContext(BaseModel):
    """Request-scoped identity attached by the auth gate."""

    user_id: int
    claims: TokenClaims
