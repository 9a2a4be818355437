"""Identity flows: register, login, and fetch-self, composing the hasher and token issuer."""

import logging
from functools import lru_cache

from sqlalchemy.orm import Session

from app.core.errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    RequestValidationFailed,
)
from app.core.security import create_access_token, hash_password, verify_password
from app.models import User
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from app.services.store import store_call
from app.services.validation import is_blank

logger = logging.getLogger(__name__)

# Same text for unknown email and wrong password so callers cannot probe for accounts.
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"
EMAIL_TAKEN_MESSAGE = "Email is already taken"


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    """Hash checked against when the email is unknown, so both failures cost one bcrypt verify."""
    return hash_password("dummy-password-for-timing")


def issue_token(user: User) -> str:
    return create_access_token(user_id=user.id, email=user.email, role=user.role)


def register(db: Session, body: RegisterRequest) -> AuthResponse:
    """
    Create an identity and issue its first token.

    The email lookup only produces the friendlier 409 early; concurrent registrations that both pass it
    are settled by the unique constraint on users.email, which store_call maps to the same 409.
    """
    if is_blank(body.name) or is_blank(body.email) or is_blank(body.password):
        raise RequestValidationFailed("Fields name, email and password are required")

    with store_call(db, "Registration failed", conflict=EMAIL_TAKEN_MESSAGE):
        existing = db.query(User).filter(User.email == body.email).first()
        if existing is not None:
            raise ConflictError(EMAIL_TAKEN_MESSAGE)

        user = User(
            name=body.name,
            email=body.email,
            password_hash=hash_password(body.password),
            role=body.role or "user",
        )
        db.add(user)
        db.commit()
        db.refresh(user)

    logger.info("Registered user id=%s role=%s", user.id, user.role)
    return AuthResponse(token=issue_token(user), user=UserPublic.model_validate(user))


def login(db: Session, body: LoginRequest) -> AuthResponse:
    """Authenticate by email and password; unknown email and wrong password fail identically."""
    if is_blank(body.email) or is_blank(body.password):
        raise RequestValidationFailed("Fields email and password are required")

    with store_call(db, "Login failed"):
        user = db.query(User).filter(User.email == body.email).first()

    if user is None:
        verify_password(body.password, _dummy_hash())
        logger.info("Failed login: unknown email")
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)
    if not verify_password(body.password, user.password_hash):
        logger.info("Failed login: bad password for user id=%s", user.id)
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

    return AuthResponse(token=issue_token(user), user=UserPublic.model_validate(user))


def get_me(db: Session, user_id: int) -> UserPublic:
    """Return the caller's identity; 404 when it was deleted after the token was issued."""
    with store_call(db, "Failed to get user"):
        user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return UserPublic.model_validate(user)
