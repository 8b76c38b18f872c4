"""Database configuration and session management."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from quotebook.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def configure_sqlite_engine(engine: Engine) -> None:
    """
    Make SQLite behave like the production database for this application.

    Enables foreign key enforcement (needed for ON DELETE CASCADE) and takes
    transaction control away from pysqlite so that SAVEPOINTs work, which the
    repositories rely on to recover from unique constraint violations.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection: Any, _connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn: Connection) -> None:
        conn.exec_driver_sql("BEGIN")


def create_app_engine(database_url: str) -> Engine:
    """Create an engine with pool settings appropriate for the backend."""
    if database_url.startswith("sqlite"):
        # An in-memory database lives only as long as its single connection
        pool_options = {"poolclass": StaticPool} if ":memory:" in database_url else {}
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            **pool_options,
        )
        configure_sqlite_engine(engine)
        return engine

    return create_engine(
        database_url,
        pool_size=20,
        max_overflow=30,
        pool_pre_ping=True,  # Verify connections before use
        pool_recycle=3600,
    )


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory; called from the app lifespan."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = create_app_engine(settings.DATABASE_URL)
    _session_factory = sessionmaker(bind=_engine, autoflush=False)


def dispose_engine() -> None:
    """Close pooled connections; called when the app shuts down."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Return the session factory, initializing lazily outside the lifespan (scripts, tests)."""
    if _session_factory is None:
        initialize_database(settings)
    if _session_factory is None:
        raise RuntimeError("Session factory could not be created")
    return _session_factory


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """One session per request, closed when the response is sent."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
