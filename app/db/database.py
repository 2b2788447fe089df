# /app/db/database.py

import logging
from typing import Optional, Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import ArgumentError
from sqlalchemy.orm import sessionmaker, Session

logger = logging.getLogger(__name__)

# Heroku-style URLs; SQLAlchemy only registers the "postgresql" dialect name.
LEGACY_POSTGRES_SCHEME = "postgres://"


def normalize_database_url(database_url: str) -> str:
    url = (database_url or "").strip()
    if url.startswith(LEGACY_POSTGRES_SCHEME):
        return "postgresql://" + url[len(LEGACY_POSTGRES_SCHEME):]
    return url


class DatabaseHandle:
    """
    The explicitly constructed connection to the store.

    Built once at startup from the settings and stored on `app.state`. When no
    DATABASE_URL is configured the handle still exists, but `is_configured` is
    False and `new_session()` returns None; callers treat that as the
    "not configured" state instead of failing on import.
    """

    def __init__(self, database_url: str):
        self.database_url = normalize_database_url(database_url)
        self.engine: Optional[Engine] = None
        self._session_factory = None

        if self.database_url:
            # The 'check_same_thread' argument is only needed for SQLite.
            engine_args = {"connect_args": {"check_same_thread": False}} if self.database_url.startswith("sqlite") else {}
            try:
                self.engine = create_engine(self.database_url, pool_pre_ping=True, **engine_args)
            except (ArgumentError, ImportError):
                # An unusable URL or a missing driver leaves the handle unconfigured.
                logger.exception("Could not create a database engine from DATABASE_URL")
                return
            self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @property
    def is_configured(self) -> bool:
        return self.engine is not None

    def new_session(self) -> Optional[Session]:
        if not self.is_configured:
            return None
        return self._session_factory()

    def create_schema(self):
        """Creates any missing tables. Used for local SQLite and tests; production runs Alembic."""
        from .base import Base
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        if self.engine is not None:
            self.engine.dispose()


# Dependency to get a DB session. This will be used in our API routers.
def get_db(request: Request) -> Generator[Optional[Session], None, None]:
    handle: DatabaseHandle = request.app.state.db_handle
    db = handle.new_session()
    try:
        yield db
    finally:
        if db is not None:
            db.close()
