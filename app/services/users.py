"""Users resource: list, fetch, create, rename, delete (deletion cascades in the store)."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session, selectinload

from app.core.errors import NotFoundError, RequestValidationFailed
from app.core.security import hash_password
from app.models import User
from app.schemas.auth import UserPublic
from app.schemas.users import UserCreateRequest, UserDetail, UserUpdateRequest
from app.services.store import store_call
from app.services.validation import is_blank

logger = logging.getLogger(__name__)


def _with_owned_rows(db: Session):
    return db.query(User).options(selectinload(User.keys), selectinload(User.products))


def list_users(db: Session) -> list[UserDetail]:
    with store_call(db, "Failed to list users"):
        users = _with_owned_rows(db).order_by(User.id).all()
    return [UserDetail.model_validate(u) for u in users]


def get_user(db: Session, user_id: int) -> UserDetail:
    with store_call(db, "Failed to get user"):
        user = _with_owned_rows(db).filter(User.id == user_id).first()
    if user is None:
        raise NotFoundError("User not found")
    return UserDetail.model_validate(user)


def create_user(db: Session, body: UserCreateRequest) -> UserPublic:
    """Insert a user directly; duplicates are reported by the email unique constraint."""
    if is_blank(body.name) or is_blank(body.email) or is_blank(body.password):
        raise RequestValidationFailed("Required fields: name, email, password")

    with store_call(db, "Failed to create user", conflict="Email already exists"):
        user = User(
            name=body.name,
            email=body.email,
            password_hash=hash_password(body.password),
            role=body.role or "user",
        )
        db.add(user)
        db.commit()
        db.refresh(user)
    logger.info("Created user id=%s", user.id)
    return UserPublic.model_validate(user)


def update_user(db: Session, user_id: int, body: UserUpdateRequest) -> UserPublic:
    with store_call(db, "Failed to update user"):
        user = db.get(User, user_id)
        if user is None:
            raise NotFoundError("User not found")
        if not is_blank(body.name):
            user.name = body.name
        user.updated_at = datetime.now(UTC)
        db.commit()
        db.refresh(user)
    return UserPublic.model_validate(user)


def delete_user(db: Session, user_id: int) -> None:
    """Delete in one statement; the store's ON DELETE CASCADE removes owned keys and products."""
    with store_call(db, "Failed to delete user"):
        deleted = (
            db.query(User)
            .filter(User.id == user_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    if deleted == 0:
        raise NotFoundError("User not found")
    logger.info("Deleted user id=%s with its keys and products", user_id)
