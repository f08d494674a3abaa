"""Database engine construction and request-scoped session management."""

from collections.abc import Generator
from typing import TYPE_CHECKING

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from taskapi.models import Base

if TYPE_CHECKING:
    from taskapi.core.context import AppContext


def _is_in_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite+pysqlite://") or ":memory:" in url


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> Engine:
    """Create an engine for url. SQLite gets foreign keys enabled and, in memory, a single shared connection."""
    if not url.startswith("sqlite"):
        return create_engine(url, pool_pre_ping=True, echo=echo)

    kwargs: dict = {"connect_args": {"check_same_thread": False}, "echo": echo}
    if _is_in_memory_sqlite(url):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create any missing tables for the registered models."""
    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that yields a DB session from the app context and closes it when done."""
    context: "AppContext" = request.app.state.context
    db = context.session_factory()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False
