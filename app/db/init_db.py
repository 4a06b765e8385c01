"""
Database initialization.

Creates all tables for a fresh database.  Alembic migrations are the
normal path for existing databases.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """
    Initialize database schema.

    Imports every model so ``SQLModel.metadata`` knows all tables, then
    creates whatever is missing.
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    from app.core.logging import setup_logging

    setup_logging()
    init_db()
