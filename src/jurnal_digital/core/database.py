"""Database connection and session management.

The application factory builds one ``Database`` at startup, keeps it on
``app.state`` and disposes it at shutdown. Requests obtain their own
SQLAlchemy session through the ``get_db`` dependency.
"""

import logging
from pathlib import Path
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from jurnal_digital.models.base import Base
# Import models to ensure they are registered with Base.metadata
from jurnal_digital import models  # noqa: F401

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine and session factory for one database URL."""

    def __init__(self, url: str):
        """Initialize Database.

        Args:
            url: SQLAlchemy database URL.
        """
        self.url = url
        parsed = make_url(url)
        engine_kwargs = {"future": True, "pool_pre_ping": True}
        if parsed.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if parsed.database in (None, "", ":memory:"):
                # one shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(bind=self.engine, autoflush=False, autocommit=False)

    def init_db(self) -> None:
        """Create tables and unique indexes if they do not exist."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database ready: %s", self.engine.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()
        logger.info("Database connection closed")


def get_db(request: Request) -> Iterator[Session]:
    """Dependency for getting a database session."""
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
