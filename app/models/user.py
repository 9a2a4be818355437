"""ORM model for application users (identities)."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class User(Base):
    """
    Identity for JWT authentication; owns API keys and products.

    role: 'admin' or 'user' (stored, carried in tokens, not enforced).
    Deleting a user removes its keys and products through ON DELETE CASCADE.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user", server_default="user")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    keys = relationship(
        "ApiKey",
        back_populates="user",
        passive_deletes=True,
        order_by="ApiKey.id",
    )
    products = relationship(
        "Product",
        back_populates="user",
        passive_deletes=True,
        order_by="Product.id",
    )
