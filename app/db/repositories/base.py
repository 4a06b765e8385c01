"""
Shared write path for repositories.

Every insert/update goes through :func:`persist` so that database
failures leave the session usable (rolled back) and surface as tagged
store errors instead of raw SQLAlchemy exceptions.
"""

import logging
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel

from app.core.errors import ConflictError, UnexpectedStoreError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)

# SQLSTATE for unique_violation (postgres)
_PG_UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """``True`` if *error* comes from a unique constraint, not NOT NULL, FK or CHECK."""
    sqlstate = getattr(error.orig, "pgcode", None) or getattr(error.orig, "sqlstate", None)
    if sqlstate == _PG_UNIQUE_VIOLATION:
        return True
    # sqlite3 only carries the message
    return "UNIQUE constraint failed" in str(error.orig)


def persist(session: Session, entity: ModelT) -> ModelT:
    """Add, commit and refresh *entity*.

    Raises:
        ConflictError: a unique constraint rejected the row.
        UnexpectedStoreError: any other database failure.
    """
    try:
        session.add(entity)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        if is_unique_violation(e):
            raise ConflictError(f"{type(entity).__name__} violates a uniqueness constraint") from e
        logger.warning("Integrity error for %s: %s", type(entity).__name__, e.orig)
        raise UnexpectedStoreError(f"Could not save {type(entity).__name__}") from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.warning("Database write failed for %s: %s", type(entity).__name__, e)
        raise UnexpectedStoreError(f"Could not save {type(entity).__name__}") from e
    session.refresh(entity)
    return entity


def remove(session: Session, entity: SQLModel) -> None:
    """Delete *entity* and commit."""
    try:
        session.delete(entity)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.warning("Database delete failed for %s: %s", type(entity).__name__, e)
        raise UnexpectedStoreError(f"Could not delete {type(entity).__name__}") from e
