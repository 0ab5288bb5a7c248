"""Engine and session handling for the resume store.

The engine is built on first use from ``DB_URL`` (falling back to a
``database.db`` file at the project root) and the resume tables are created
at the same moment. SQLite connections get ``PRAGMA foreign_keys = ON`` so
entry rows follow their profile on delete.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """Declarative base shared by the resume models."""


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_database_url() -> str:
    """Return ``DB_URL`` if set, else a SQLite file next to the project."""
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url

    db_path = Path(__file__).resolve().parents[3] / "database.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def _get_engine() -> Engine:
    global _engine
    if _engine is None:
        engine = create_engine(get_database_url(), echo=False)
        if engine.dialect.name == "sqlite":
            event.listen(engine, "connect", _enable_sqlite_foreign_keys)
        _create_tables(engine)
        _engine = engine
    return _engine


def _create_tables(engine: Engine) -> None:
    # Registers the resume tables on Base.metadata
    from resume_layout.data.models import resume  # noqa: F401

    Base.metadata.create_all(bind=engine)


def _get_session_factory() -> sessionmaker[Session]:
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=_get_engine(), autoflush=False, expire_on_commit=False)
    return _SessionLocal


def init_db() -> None:
    """Build the engine and create the resume tables now rather than on first query."""
    _get_engine()


def dispose_db() -> None:
    """Close pooled connections and forget the engine.

    The next session rebuilds it from the current ``DB_URL``.
    """
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    session = _get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
