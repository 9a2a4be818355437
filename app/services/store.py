"""Map store failures onto the application error taxonomy."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import ConflictError, InternalError, NotFoundError

logger = logging.getLogger(__name__)

# SQLSTATE codes reported by psycopg2 as orig.pgcode
PG_UNIQUE_VIOLATION = "23505"
PG_FOREIGN_KEY_VIOLATION = "23503"


def _describe(exc: SQLAlchemyError) -> str:
    return str(getattr(exc, "orig", None) or exc)


def is_unique_violation(exc: IntegrityError) -> bool:
    """True for duplicate-key errors from SQLite or PostgreSQL."""
    if getattr(exc.orig, "pgcode", None) == PG_UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(exc.orig)


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    """True when a referenced parent row is missing."""
    if getattr(exc.orig, "pgcode", None) == PG_FOREIGN_KEY_VIOLATION:
        return True
    return "FOREIGN KEY constraint failed" in str(exc.orig)


@contextmanager
def store_call(
    db: Session,
    failure: str,
    conflict: str | None = None,
    missing_parent: str | None = None,
) -> Iterator[None]:
    """
    Run store statements; roll back and translate SQLAlchemy errors on the way out.

    A unique violation becomes ConflictError(conflict) when a conflict message is given; the unique
    constraint is the authority on duplicates, so callers pass one wherever a unique column is written.
    A foreign key violation becomes NotFoundError(missing_parent) when that message is given.
    Everything else becomes InternalError(failure). AppErrors raised inside pass through untouched.
    """
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        if conflict is not None and is_unique_violation(e):
            logger.info("%s: unique violation (%s)", failure, _describe(e))
            raise ConflictError(conflict) from e
        if missing_parent is not None and is_foreign_key_violation(e):
            logger.info("%s: foreign key violation (%s)", failure, _describe(e))
            raise NotFoundError(missing_parent) from e
        logger.error("%s: %s", failure, _describe(e))
        raise InternalError(failure, error=_describe(e)) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("%s: %s", failure, _describe(e))
        raise InternalError(failure, error=_describe(e)) from e
