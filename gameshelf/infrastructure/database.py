"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager
import logging

from sqlalchemy import create_engine
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from gameshelf.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _engine_options(settings: Settings) -> dict[str, object]:
    """Return ``create_engine`` keyword arguments suited to the configured backend."""

    options: dict[str, object] = {"pool_pre_ping": True}
    if settings.database_url.startswith("sqlite"):
        # Route handlers run in a threadpool; SQLite connections must be shareable.
        options["connect_args"] = {"check_same_thread": False}
    return options


engine = create_engine(settings.database_url, **_engine_options(settings))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from gameshelf.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database schema ready on %s", engine.url.render_as_string(hide_password=True))


def get_db() -> Generator:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(session: Session) -> Iterator[Session]:
    """Run the enclosed statements as one transaction.

    Commits when the block exits normally and rolls back on any exception,
    which is then re-raised. Repositories only flush, so every multi-step
    mutation issued inside the block succeeds or fails as a whole.
    """

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


_INSERT_BUILDERS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def insert_ignoring_conflicts(
    session: Session, model: type[Base], values: dict[str, object]
) -> bool:
    """Insert one row unless it violates a unique constraint or index.

    Returns ``True`` when the row was written. Only SQLite and PostgreSQL
    support ``ON CONFLICT DO NOTHING`` without naming the conflict target.
    """

    dialect = session.get_bind().dialect.name
    builder = _INSERT_BUILDERS.get(dialect)
    if builder is None:
        msg = f"Conflict-free inserts are not supported on '{dialect}'"
        raise NotImplementedError(msg)

    result = session.execute(builder(model).values(**values).on_conflict_do_nothing())
    return bool(result.rowcount)
