"""
Database Configuration Module

SQLAlchemy 2.0 setup for the Bookstore API.

The engine (and its connection pool) is created once at import time and
shared by every request. Each request gets its own Session through the
get_db() dependency ("session per request"):

1. Request arrives -> create a new session
2. Repositories run their lookups and writes on that session
3. Repositories commit on success, roll back on failure
4. The session is closed when the request ends

PostgreSQL (psycopg2) is the production target. SQLite URLs are accepted for
local development and tests; foreign keys are switched on for every SQLite
connection so the ON DELETE CASCADE rule behaves the same way.
"""

import logging
from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from bookstore_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


def engine_options(database_url: str) -> dict[str, Any]:
    """
    Build create_engine() keyword arguments for a database URL.

    SQLite pools do not accept pool_size/max_overflow, and the sqlite3
    driver refuses cross-thread use unless told otherwise. FastAPI runs sync
    endpoints in a thread pool, so check_same_thread is turned off.

    Args:
        database_url: SQLAlchemy URL the engine will connect to

    Returns:
        Keyword arguments for create_engine()
    """
    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": settings.debug,
    }
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
    else:
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return options


def enable_sqlite_foreign_keys(target: Engine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ships with foreign keys disabled per connection. Must be called
    before the engine opens its first connection.
    """

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# =============================================================================
# Database Engine
# =============================================================================
engine = create_engine(settings.database_url, **engine_options(settings.database_url))

if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)


# =============================================================================
# Session Factory
# =============================================================================
# autoflush=False: repositories decide when statements hit the database
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

    Alembic reads Base.metadata to know which tables exist.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Usage in Routes:
        @router.get("/authors")
        def list_authors(db: DbSession):
            ...

    Yields:
        SQLAlchemy Session instance, closed when the request ends
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def ping_database(db: Session) -> bool:
    """
    Check that the database answers a trivial query.

    Used by the health endpoint. Connection failures are reported as False
    rather than raised.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"Database ping failed: {exc}")
        db.rollback()
        return False
    return True


def create_tables(bind: Engine | None = None) -> None:
    """
    Create all database tables.

    Meant for development against SQLite and for tests. Deployed databases
    are created with Alembic (alembic upgrade head).

    Args:
        bind: Engine to create the tables on (defaults to the app engine)
    """
    # Registers the models on Base.metadata
    import bookstore_api.models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


def drop_tables(bind: Engine | None = None) -> None:
    """
    Drop all database tables.

    Deletes all data. Development and tests only.
    """
    Base.metadata.drop_all(bind=bind or engine)
