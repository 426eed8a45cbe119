"""Data stores for persistence.

Stores handle:
- Key-value backends (SQL table, Redis, in-memory) holding serialized blobs
- Backend selection and process-wide lifecycle

No blog logic in stores - that belongs in services.
"""
