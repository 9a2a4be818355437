"""API key routes. Generation is public; listing and revocation need a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.auth import AUTH_GATE_RESPONSES, CurrentUser
from app.core.database import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.keys import KeyGenerateRequest, KeyGenerateResponse, KeysListResponse
from app.services import keys as keys_service

router = APIRouter()


@router.post(
    "/generate",
    response_model=KeyGenerateResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "user_id missing"},
        404: {"model": ErrorResponse, "description": "User not found"},
    },
)
def generate_key(
    body: KeyGenerateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> KeyGenerateResponse:
    """Generate a new API key for a user. The key value is only returned here."""
    return keys_service.generate_key(db, body.user_id)


@router.get("", response_model=KeysListResponse, responses=AUTH_GATE_RESPONSES)
def list_keys(
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> KeysListResponse:
    return KeysListResponse(data=keys_service.list_keys(db))


@router.delete(
    "/{key_id}",
    response_model=MessageResponse,
    responses={
        **AUTH_GATE_RESPONSES,
        404: {"model": ErrorResponse, "description": "Key not found"},
    },
)
def delete_key(
    key_id: int,
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Revoke (delete) an API key."""
    keys_service.delete_key(db, key_id)
    return MessageResponse(message="Key revoked")
