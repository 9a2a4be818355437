"""Schemas for the products resource."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

ProductType = Literal["Electronics", "Furniture", "Clothing", "Food", "Other"]

PRODUCT_TYPES: tuple[str, ...] = ("Electronics", "Furniture", "Clothing", "Food", "Other")


class ProductCreateRequest(BaseModel):
    """Type is checked against PRODUCT_TYPES by the service so the error names the allowed values."""

    type: str | None = None
    name: str | None = Field(default=None, max_length=255)
    serial_number: str | None = Field(default=None, max_length=255)


class ProductUpdateRequest(BaseModel):
    type: str | None = None
    name: str | None = Field(default=None, max_length=255)
    serial_number: str | None = Field(default=None, max_length=255)


class ProductOwner(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str


class ProductOut(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    type: ProductType
    name: str
    serial_number: str
    user_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductDetail(ProductOut):
    user: ProductOwner


class ProductResponse(BaseModel):
    success: bool = True
    data: ProductOut


class ProductDetailResponse(BaseModel):
    success: bool = True
    data: ProductDetail


class ProductsListResponse(BaseModel):
    success: bool = True
    data: list[ProductDetail]
