"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
databases are migrated with Alembic instead.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine
from app.db import base  # noqa: F401  (registers every table on the metadata)

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create every table that does not exist yet."""
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    from app.core.logging import setup_logging

    setup_logging()
    init_db()
