"""Process-wide storage lifecycle.

The backend is chosen from settings on startup and shared by every request.
Tests swap it with `set_storage(MemoryStorage())`.
"""

import logging

from blog_api.settings import get_settings
from blog_api.stores.base import KeyValueStorage, MemoryStorage
from blog_api.stores.redis import RedisStorage
from blog_api.stores.sql import SqlStorage, create_tables

# Storage backend (initialized on startup)
_storage: KeyValueStorage | None = None
logger = logging.getLogger("uvicorn.error")


def init_storage() -> KeyValueStorage:
    """Initialize the configured storage backend."""
    global _storage
    settings = get_settings()
    backend = settings.storage_backend

    if backend == "memory":
        _storage = MemoryStorage()
    elif backend == "redis":
        _storage = RedisStorage.from_url(settings.redis_url)
    elif backend == "sql":
        sql_storage = SqlStorage.from_url(settings.database_url, echo=settings.debug)
        if settings.create_tables_on_startup:
            create_tables(sql_storage.engine)
        _storage = sql_storage
        logger.info(f"SQL storage ready ({sql_storage.engine.url.get_backend_name()})")
    else:
        raise RuntimeError(f"Unknown storage backend: {backend}")

    return _storage


def close_storage() -> None:
    """Close the storage backend."""
    global _storage
    if _storage is not None:
        _storage.close()
        _storage = None


def set_storage(storage: KeyValueStorage | None) -> None:
    """Replace the process-wide backend (tests, scripts)."""
    global _storage
    _storage = storage


def get_storage() -> KeyValueStorage:
    """Get storage backend instance."""
    if _storage is None:
        raise RuntimeError("Storage not initialized. Call init_storage() first.")
    return _storage
