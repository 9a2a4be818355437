"""Auth routes (register, login, me) and the bearer-token gate used by protected routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import AuthenticationError, AuthorizationError, InternalError
from app.core.security import (
    InvalidTokenError,
    TokenExpiredError,
    TokenVerificationError,
    decode_access_token,
)
from app.schemas.auth import (
    AuthContext,
    AuthResponse,
    LoginRequest,
    MeResponse,
    RegisterRequest,
)
from app.schemas.common import ErrorResponse
from app.services import identity

logger = logging.getLogger(__name__)

router = APIRouter()
security = HTTPBearer(auto_error=False)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> AuthContext:
    """
    Dependency: require a valid Bearer JWT and return the caller's identity context.

    No header or non-Bearer scheme -> 401; expired -> 401; bad signature or corrupt token -> 403;
    any other verification fault -> 500. The store is not consulted.
    """
    # HTTPBearer accepts any case of the scheme; only the exact "Bearer" prefix is honoured.
    if credentials is None or credentials.scheme != "Bearer" or not credentials.credentials:
        raise AuthenticationError(
            "Missing or invalid Authorization header. Format: Bearer <token>",
            headers=BEARER_CHALLENGE,
        )
    try:
        claims = decode_access_token(credentials.credentials)
    except TokenExpiredError:
        raise AuthenticationError("Token expired", headers=BEARER_CHALLENGE)
    except InvalidTokenError as e:
        logger.info("Rejected invalid token: %s", e)
        raise AuthorizationError("Invalid token")
    except TokenVerificationError as e:
        logger.error("Token verification fault: %s", e)
        raise InternalError("Auth check failed", error=str(e)) from e
    return AuthContext(user_id=claims.user_id, claims=claims)


CurrentUser = Annotated[AuthContext, Depends(get_current_user)]

AUTH_GATE_RESPONSES: dict[int | str, dict] = {
    401: {"model": ErrorResponse, "description": "Token missing or expired"},
    403: {"model": ErrorResponse, "description": "Token invalid"},
}


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Required fields missing"},
        409: {"model": ErrorResponse, "description": "Email already taken"},
    },
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Register a new user and return a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    return identity.register(db, body)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Required fields missing"},
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
    },
)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Authenticate with email and password; returns a JWT access token."""
    return identity.login(db, body)


@router.get(
    "/me",
    response_model=MeResponse,
    responses={
        **AUTH_GATE_RESPONSES,
        404: {"model": ErrorResponse, "description": "User no longer exists"},
    },
)
def me(
    current_user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> MeResponse:
    """Return the authenticated user's profile."""
    return MeResponse(user=identity.get_me(db, current_user.user_id))
