"""
Database access.
One `Database` is built per process in the app lifespan and handed to
request handlers through the `get_db` dependency.
"""

from typing import Generator

import structlog
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import Settings

logger = structlog.get_logger(__name__)

Base = declarative_base()


def build_database_url(settings: Settings):
    """Resolve the SQLAlchemy URL, applying DB_NAME when configured."""
    url = make_url(settings.DATABASE_URL)
    if settings.DB_NAME and url.get_backend_name() != "sqlite":
        url = url.set(database=settings.DB_NAME)
    return url


class Database:
    """Engine plus session factory for the lifetime of the process."""

    def __init__(self, url, **engine_kwargs):
        url = make_url(url)
        if url.get_backend_name() == "sqlite":
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
        self.url = url
        self.engine = create_engine(url, pool_pre_ping=True, **engine_kwargs)
        self.session_factory = sessionmaker(bind=self.engine, autoflush=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(build_database_url(settings))

    def create_all(self) -> None:
        # Register every model on Base.metadata before creating tables
        from app.domain.models import admin, ip_data, user  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created/verified", database=self.url.database)

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connection closed")


def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
