"""Liveness endpoint reporting environment and database reachability."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app import __version__
from app.core.config import get_settings
from app.core.database import check_db_connected, get_db
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def get_health(db: Annotated[Session, Depends(get_db)]) -> HealthResponse:
    """Public; does not require a token."""
    return HealthResponse(
        environment=get_settings().APP_ENV,
        version=__version__,
        database="connected" if check_db_connected(db) else "disconnected",
    )
