"""Engine and session plumbing for the SQL-backed world state."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from car_ledger.infra.config import database_url

_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Engine for DATABASE_URL, created on first use.

    Importing the HTTP app with the in-memory backend never touches the database.
    The pool is sized for one world_state transaction per in-flight request.
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """
    One transaction around a ledger invocation.

    SqlAlchemyWorldState commits each batch into a SAVEPOINT; the outer
    transaction is committed here when the request finishes, or rolled back
    together with every batch if the request raises.
    """
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
