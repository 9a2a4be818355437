"""Password hashing, API key generation, and JWT creation/verification for authentication."""

import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings
from app.schemas.auth import TokenClaims

# Bcrypt cost (rounds); 10 keeps login latency interactive.
BCRYPT_ROUNDS = 10

# bcrypt only reads the first 72 bytes of input.
BCRYPT_MAX_BYTES = 72

API_KEY_BYTES = 32


class TokenVerificationError(Exception):
    """Token could not be verified for a reason other than expiry or invalidity."""


class TokenExpiredError(TokenVerificationError):
    """Signature is valid but the exp claim has passed."""


class InvalidTokenError(TokenVerificationError):
    """Bad signature, wrong secret, corrupt structure, or unusable claims."""


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def generate_api_key() -> str:
    """Random opaque key (hex); shown to the caller once."""
    return secrets.token_hex(API_KEY_BYTES)


def create_access_token(
    user_id: int,
    email: str,
    role: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create a signed JWT carrying sub (user id), email, optional role, iat and exp."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }
    if role is not None:
        payload["role"] = role
    secret = settings.JWT_SECRET.get_secret_value()
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> TokenClaims:
    """
    Verify signature and expiry; return the token's claims.
    Raises TokenExpiredError, InvalidTokenError, or TokenVerificationError for anything else.
    """
    secret = settings.JWT_SECRET.get_secret_value()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpiredError("Token expired") from e
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(str(e)) from e
    except Exception as e:
        raise TokenVerificationError(str(e)) from e

    try:
        user_id = int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token payload") from e
    email = payload.get("email")
    if not isinstance(email, str) or not email:
        raise InvalidTokenError("Invalid token payload")
    role = payload.get("role")
    if role is not None and not isinstance(role, str):
        raise InvalidTokenError("Invalid token payload")

    # NumericDate may be fractional; claims keep whole seconds.
    try:
        iat = payload.get("iat")
        return TokenClaims(
            user_id=user_id,
            email=email,
            role=role,
            iat=int(iat) if iat is not None else None,
            exp=int(payload["exp"]),
        )
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidTokenError("Invalid token payload") from e
