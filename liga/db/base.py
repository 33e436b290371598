"""Database engine and session helpers."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from liga.core.config import DB_CONNECTION_TIMEOUT_SECONDS
from liga.core.config import get_settings
from liga.db.models import Base

DATABASE_URL = get_settings().database_url


def _engine_options(database_url: str) -> dict[str, Any]:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty database.
            options["poolclass"] = StaticPool
        return options
    return {
        "pool_pre_ping": True,
        "connect_args": {"connect_timeout": DB_CONNECTION_TIMEOUT_SECONDS},
    }


engine = create_engine(DATABASE_URL, **_engine_options(DATABASE_URL))

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    expire_on_commit=False,
    class_=Session,
)


def get_db_session() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def init_db() -> None:
    """Create any missing tables."""
    Base.metadata.create_all(engine)


def check_database(session: Session) -> bool:
    """Return whether a trivial query succeeds on ``session``."""
    try:
        session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        session.rollback()
        return False
    return True
