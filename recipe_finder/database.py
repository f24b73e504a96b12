"""Database connection and session management."""

from collections.abc import Generator
from functools import lru_cache
from typing import Any

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from recipe_finder.config import get_settings

Base: Any = declarative_base()


@lru_cache
def get_engine() -> Engine:
    """Create the process-wide engine on first use and reuse it afterwards."""
    database_url = get_settings().database_url
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
        )
    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


@lru_cache
def get_session_factory() -> sessionmaker:
    """Get the session factory bound to the shared engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def get_db() -> Generator[Session, None, None]:
    """Dependency that provides a database session."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def connect() -> Engine:
    """Return the shared engine once the database has answered a round-trip.

    Connection errors are not caught here; callers turn them into 500s.
    """
    engine = get_engine()
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    return engine


def init_db() -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from recipe_finder import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
