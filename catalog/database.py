"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the catalog.

The catalog store is whatever database `DATABASE_URL` points at: PostgreSQL
in deployment, SQLite for local runs and tests. We use synchronous
SQLAlchemy; every catalog operation is a short request/response call.

Session Management Pattern
==========================
We use the "session per request" pattern:
1. Request arrives -> create a new session
2. Use session for all database operations in that request
3. Services commit on success; errors propagate and the session is discarded
4. Close session when request ends

This is implemented using FastAPI's dependency injection (get_db).
"""

import sqlite3
from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from catalog.config import get_settings

settings = get_settings()


# =============================================================================
# SQLite Unicode Case Folding
# =============================================================================
# SQLite's built-in lower() only folds ASCII, so "Лев" and "лев" would be
# different names there while PostgreSQL treats them as equal. Every SQLite
# connection gets lower() replaced by Python's str.lower, the same folding
# the stores apply to search text.

def _unicode_lower(value: str | None) -> str | None:
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _register_sqlite_functions(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        dbapi_connection.create_function(
            "lower", 1, _unicode_lower, deterministic=True
        )


# =============================================================================
# Database Engine
# =============================================================================
# pool_size / max_overflow only make sense for server databases; SQLite
# connections must also be usable from the threadpool FastAPI runs sync
# routes on.

def _engine_options() -> dict[str, Any]:
    options: dict[str, Any] = {"echo": settings.debug}
    if settings.is_sqlite:
        options["connect_args"] = {"check_same_thread": False}
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=True,  # Verify connections are alive before using
        )
    return options


engine = create_engine(settings.database_url, **_engine_options())


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: services decide when to commit
# - autoflush=False: don't auto-flush before queries (more predictable behavior)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    All catalog models inherit from this class:

        class Genre(Base):
            __tablename__ = "genres"
            ...
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Creates a session, yields it to the route handler and closes it when the
    request ends, even if the handler raised.

    Usage in Routes:
        @router.get("/books/")
        def list_books(db: Session = Depends(get_db)):
            ...

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Called on application startup and by the seed script. Existing tables
    are left untouched.
    """
    # Models must be registered on Base.metadata before create_all runs
    import catalog.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only used by the seed script's --clear
    flag and by tests.
    """
    import catalog.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
