"""Users resource routes (bearer-protected)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.auth import AUTH_GATE_RESPONSES, CurrentUser
from app.core.database import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.users import (
    UserCreateRequest,
    UserDetailResponse,
    UserResponse,
    UsersListResponse,
    UserUpdateRequest,
)
from app.services import users as users_service

router = APIRouter(responses=AUTH_GATE_RESPONSES)

NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}


@router.get("", response_model=UsersListResponse)
def list_users(
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> UsersListResponse:
    """List all users with their keys and products."""
    return UsersListResponse(data=users_service.list_users(db))


@router.get("/{user_id}", response_model=UserDetailResponse, responses=NOT_FOUND)
def get_user(
    user_id: int,
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserDetailResponse:
    return UserDetailResponse(data=users_service.get_user(db, user_id))


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Required fields missing"},
        409: {"model": ErrorResponse, "description": "Email already exists"},
    },
)
def create_user(
    body: UserCreateRequest,
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Create a user directly (no token is issued)."""
    return UserResponse(data=users_service.create_user(db, body))


@router.put("/{user_id}", response_model=UserResponse, responses=NOT_FOUND)
def update_user(
    user_id: int,
    body: UserUpdateRequest,
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Rename a user."""
    return UserResponse(data=users_service.update_user(db, user_id, body))


@router.delete("/{user_id}", response_model=MessageResponse, responses=NOT_FOUND)
def delete_user(
    user_id: int,
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a user; their keys and products are removed by the database cascade."""
    users_service.delete_user(db, user_id)
    return MessageResponse(message="User deleted (keys and products removed too)")
