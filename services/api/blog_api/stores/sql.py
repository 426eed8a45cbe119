"""SQL store with SQLAlchemy.

Handles:
- Engine and session management
- The kv_entries table used as a durable key-value store

Defaults to a local SQLite file. Any SQLAlchemy URL with an installed
driver works; the schema is a single table managed by alembic.
"""

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


def create_sql_engine(database_url: str, *, echo: bool = False) -> Engine:
    """Create an engine, making sure the SQLite parent directory exists."""
    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        db_path = database_url.split("///", 1)[-1]
        if db_path and db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        # Uvicorn may hand requests to worker threads.
        connect_args["check_same_thread"] = False

    engine = create_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=True,
    )

    if database_url.startswith("sqlite"):

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine


def create_tables(engine: Engine) -> None:
    """Create all tables (for development/testing only)."""
    # Register models on Base.metadata
    from blog_api.models import KvEntry  # noqa: F401

    Base.metadata.create_all(engine)


def drop_tables(engine: Engine) -> None:
    """Drop all tables (for testing only)."""
    from blog_api.models import KvEntry  # noqa: F401

    Base.metadata.drop_all(engine)


class SqlStorage:
    """Key-value storage on top of the kv_entries table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_factory = sessionmaker(engine, expire_on_commit=False)

    @classmethod
    def from_url(cls, database_url: str, *, echo: bool = False) -> "SqlStorage":
        return cls(create_sql_engine(database_url, echo=echo))

    @property
    def engine(self) -> Engine:
        return self._engine

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Get database session context manager.

        Usage:
            with storage.session() as session:
                session.get(KvEntry, key)
        """
        with self._session_factory() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    def get(self, key: str) -> str | None:
        from blog_api.models import KvEntry

        with self.session() as session:
            entry = session.get(KvEntry, key)
            return entry.value if entry is not None else None

    def set(self, key: str, value: str) -> None:
        from blog_api.models import KvEntry

        with self.session() as session:
            entry = session.get(KvEntry, key)
            if entry is None:
                session.add(KvEntry(key=key, value=value))
            else:
                entry.value = value

    def delete(self, key: str) -> None:
        from blog_api.models import KvEntry

        with self.session() as session:
            entry = session.get(KvEntry, key)
            if entry is not None:
                session.delete(entry)

    def close(self) -> None:
        self._engine.dispose()
