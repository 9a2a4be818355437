"""Products resource: CRUD over user-owned products with a closed type set."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session, joinedload

from app.core.errors import NotFoundError, RequestValidationFailed
from app.models import Product, User
from app.schemas.products import (
    PRODUCT_TYPES,
    ProductCreateRequest,
    ProductDetail,
    ProductOut,
    ProductUpdateRequest,
)
from app.services.store import store_call
from app.services.validation import is_blank

logger = logging.getLogger(__name__)

SERIAL_TAKEN_MESSAGE = "Serial number already exists"


def _validate_type(product_type: str) -> None:
    if product_type not in PRODUCT_TYPES:
        raise RequestValidationFailed(
            f"Invalid type. Allowed values: {', '.join(PRODUCT_TYPES)}"
        )


def list_products(db: Session) -> list[ProductDetail]:
    with store_call(db, "Failed to list products"):
        products = (
            db.query(Product).options(joinedload(Product.user)).order_by(Product.id).all()
        )
    return [ProductDetail.model_validate(p) for p in products]


def get_product(db: Session, product_id: int) -> ProductDetail:
    with store_call(db, "Failed to get product"):
        product = (
            db.query(Product)
            .options(joinedload(Product.user))
            .filter(Product.id == product_id)
            .first()
        )
    if product is None:
        raise NotFoundError("Product not found")
    return ProductDetail.model_validate(product)


def create_product(db: Session, owner_id: int, body: ProductCreateRequest) -> ProductOut:
    """Create a product owned by owner_id (the authenticated caller)."""
    if is_blank(body.type) or is_blank(body.name) or is_blank(body.serial_number):
        raise RequestValidationFailed("Required fields: type, name, serial_number")
    _validate_type(body.type)

    # Token may outlive its user; report that instead of a foreign key failure,
    # including when the owner is deleted between the lookup and the insert.
    with store_call(
        db,
        "Failed to create product",
        conflict=SERIAL_TAKEN_MESSAGE,
        missing_parent="User not found",
    ):
        if db.get(User, owner_id) is None:
            raise NotFoundError("User not found")
        product = Product(
            type=body.type,
            name=body.name,
            serial_number=body.serial_number,
            user_id=owner_id,
        )
        db.add(product)
        db.commit()
        db.refresh(product)
    logger.info("Created product id=%s for user id=%s", product.id, owner_id)
    return ProductOut.model_validate(product)


def update_product(db: Session, product_id: int, body: ProductUpdateRequest) -> ProductOut:
    """Apply the non-blank fields of body; type must still be one of PRODUCT_TYPES."""
    if not is_blank(body.type):
        _validate_type(body.type)

    with store_call(db, "Failed to update product", conflict=SERIAL_TAKEN_MESSAGE):
        product = db.get(Product, product_id)
        if product is None:
            raise NotFoundError("Product not found")
        if not is_blank(body.type):
            product.type = body.type
        if not is_blank(body.name):
            product.name = body.name
        if not is_blank(body.serial_number):
            product.serial_number = body.serial_number
        product.updated_at = datetime.now(UTC)
        db.commit()
        db.refresh(product)
    return ProductOut.model_validate(product)


def delete_product(db: Session, product_id: int) -> None:
    with store_call(db, "Failed to delete product"):
        deleted = (
            db.query(Product)
            .filter(Product.id == product_id)
            .delete(synchronize_session=False)
        )
        db.commit()
    if deleted == 0:
        raise NotFoundError("Product not found")
    logger.info("Deleted product id=%s", product_id)
