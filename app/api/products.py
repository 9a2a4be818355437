"""Products resource routes (bearer-protected; new products belong to the caller)."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.auth import AUTH_GATE_RESPONSES, CurrentUser
from app.core.database import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.products import (
    ProductCreateRequest,
    ProductDetailResponse,
    ProductResponse,
    ProductsListResponse,
    ProductUpdateRequest,
)
from app.services import products as products_service

router = APIRouter(responses=AUTH_GATE_RESPONSES)

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}


@router.get("", response_model=ProductsListResponse)
def list_products(
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> ProductsListResponse:
    """List all products with their owner's id and name."""
    return ProductsListResponse(data=products_service.list_products(db))


@router.get("/{product_id}", response_model=ProductDetailResponse, responses=NOT_FOUND)
def get_product(
    product_id: int,
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> ProductDetailResponse:
    return ProductDetailResponse(data=products_service.get_product(db, product_id))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing fields or unknown type"},
        409: {"model": ErrorResponse, "description": "Serial number already exists"},
    },
)
def create_product(
    body: ProductCreateRequest,
    current_user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    """
    Create a product owned by the authenticated user.

    type must be one of: Electronics, Furniture, Clothing, Food, Other.
    """
    product = products_service.create_product(db, current_user.user_id, body)
    return ProductResponse(data=product)


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        **NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Unknown type"},
        409: {"model": ErrorResponse, "description": "Serial number already exists"},
    },
)
def update_product(
    product_id: int,
    body: ProductUpdateRequest,
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> ProductResponse:
    """Update any of type, name, serial_number; omitted or blank fields are left as they are."""
    return ProductResponse(data=products_service.update_product(db, product_id, body))


@router.delete("/{product_id}", response_model=MessageResponse, responses=NOT_FOUND)
def delete_product(
    product_id: int,
    _user: CurrentUser,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    products_service.delete_product(db, product_id)
    return MessageResponse(message="Product deleted")
