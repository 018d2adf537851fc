"""
Database session management.

One engine per process, one session per request.  Report generation
commits explicitly; a session that leaves a request with pending changes
is rolled back on close.
"""

from typing import Generator

from sqlmodel import Session, create_engine

from app.core.config import settings

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    pool_pre_ping=True,
    pool_size=settings.DATABASE_POOL_SIZE,
    max_overflow=settings.DATABASE_MAX_OVERFLOW
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get a database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
