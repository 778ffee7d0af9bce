"""Database wiring for the role definition store (SQLAlchemy 2.0 style).

Only the server side keeps roles in a database; clients get them over the
wire and never import this module.
"""
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from .config import get_settings


class Base(DeclarativeBase):
    """Base declarative class for all ORM models."""


def get_engine(url: str | None = None, echo: bool | None = None):
    """Engine for `url`, falling back to DATABASE_URL."""
    settings = get_settings()
    return create_engine(
        url or settings.database_url,
        echo=echo if echo is not None else settings.echo_sql,
    )


SessionLocal = sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, expire_on_commit=False)


def create_schema(session: Session) -> None:
    """Create any missing tables on the session's bind.

    Fresh SQLite files have no tables; migrations cover long-lived databases.
    """
    from . import models  # noqa: F401  registers RoleRow on Base.metadata

    Base.metadata.create_all(session.get_bind(), checkfirst=True)


@contextmanager
def session_scope() -> Iterator[Session]:
    """Commit on success, roll back on error.

    A role import replaces the whole table, so a failure part-way must not
    leave it half-written.
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
