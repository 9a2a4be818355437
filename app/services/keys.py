"""API keys resource: generate for an existing user, list, revoke."""

import logging

from sqlalchemy.orm import Session, joinedload

from app.core.errors import NotFoundError, RequestValidationFailed
from app.core.security import generate_api_key
from app.models import ApiKey, User
from app.schemas.keys import GeneratedKey, KeyGenerateResponse, KeyListItem
from app.services.store import store_call

logger = logging.getLogger(__name__)

KEY_GENERATED_MESSAGE = "New API key generated. Save it, it won't be shown again."


def generate_key(db: Session, user_id: int | None) -> KeyGenerateResponse:
    if not user_id:
        raise RequestValidationFailed("Required field: user_id")

    with store_call(db, "Failed to generate key", missing_parent="User not found"):
        if db.get(User, user_id) is None:
            raise NotFoundError("User not found")
        key = ApiKey(token=generate_api_key(), user_id=user_id)
        db.add(key)
        db.commit()
        db.refresh(key)

    logger.info("Generated API key id=%s for user id=%s", key.id, user_id)
    return KeyGenerateResponse(
        message=KEY_GENERATED_MESSAGE,
        data=GeneratedKey(
            id=key.id,
            token=key.token,
            user_id=key.user_id,
            requests=key.requests,
        ),
    )


def list_keys(db: Session) -> list[KeyListItem]:
    with store_call(db, "Failed to list keys"):
        keys = db.query(ApiKey).options(joinedload(ApiKey.user)).order_by(ApiKey.id).all()
    return [KeyListItem.model_validate(k) for k in keys]


def delete_key(db: Session, key_id: int) -> None:
    with store_call(db, "Failed to revoke key"):
        deleted = (
            db.query(ApiKey)
            .filter(ApiKey.id == key_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    if deleted == 0:
        raise NotFoundError("Key not found")
    logger.info("Revoked API key id=%s", key_id)
