"""SQLAlchemy ORM models.

Models represent database tables:
- kv_entries: durable key-value pairs (the serialized post list lives here)
"""

from blog_api.models.kv_entry import KvEntry

__all__ = ["KvEntry"]
