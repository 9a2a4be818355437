"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthContext,
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    TokenClaims,
    UserPublic,
)
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.health import HealthResponse
from app.schemas.keys import KeyGenerateRequest, KeyGenerateResponse, KeysListResponse
from app.schemas.products import (
    PRODUCT_TYPES,
    ProductCreateRequest,
    ProductType,
    ProductUpdateRequest,
)
from app.schemas.users import UserCreateRequest, UserDetail, UserUpdateRequest

__all__ = [
    "PRODUCT_TYPES",
    "AuthContext",
    "AuthResponse",
    "ErrorResponse",
    "HealthResponse",
    "KeyGenerateRequest",
    "KeyGenerateResponse",
    "KeysListResponse",
    "LoginRequest",
    "MeResponse",
    "MessageResponse",
    "ProductCreateRequest",
    "ProductType",
    "ProductUpdateRequest",
    "RegisterRequest",
    "TokenClaims",
    "UserCreateRequest",
    "UserDetail",
    "UserPublic",
    "UserUpdateRequest",
]
