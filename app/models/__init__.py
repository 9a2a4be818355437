"""SQLAlchemy ORM models."""

from app.models.api_key import ApiKey
from app.models.base import Base
from app.models.product import Product
from app.models.user import User

__all__ = ["ApiKey", "Base", "Product", "User"]
