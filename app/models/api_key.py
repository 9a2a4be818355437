"""ORM model for legacy API keys."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class ApiKey(Base):
    """Random opaque key owned by a user, with a usage counter. Not accepted by the auth gate."""

    __tablename__ = "keys"

    id = Column(Integer, primary_key=True, autoincrement=True)
    token = Column(String(128), nullable=False, unique=True)
    requests = Column(Integer, nullable=False, default=0, server_default="0")
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
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

    user = relationship("User", back_populates="keys")
