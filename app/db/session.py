"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for *url*.

    SQLite gets ``check_same_thread=False`` (FastAPI runs sync endpoints in
    a threadpool); server databases get a small pre-pinged pool.
    """
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,   # Verify connections before using
        pool_size=5,          # Connection pool size
        max_overflow=10       # Max connections beyond pool_size
    )


# Create database engine
DATABASE_URL: str = settings.sqlalchemy_url

engine = build_engine(DATABASE_URL, echo=settings.DEBUG)  # Log SQL queries in debug mode


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance

    Example:
        @app.get("/items")
        def get_items(db: Session = Depends(get_db)):
            return db.exec(select(Item)).all()
    """
    with Session(engine) as session:
        yield session
