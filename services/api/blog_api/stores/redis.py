"""Redis store for the serialized post blob.

Handles:
- Plain GET/SET/DEL on string keys
- No TTL: keys live until explicitly deleted

The client is synchronous on purpose. Each store operation is a single
load -> compute -> store round trip with no await points in between.
"""

import logging

import redis

logger = logging.getLogger("uvicorn.error")


class RedisStorage:
    """Key-value storage backed by a Redis database."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, redis_url: str) -> "RedisStorage":
        client = redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
        )
        # Validate connectivity early (especially for `rediss://` in production).
        client.ping()
        logger.info("Redis connected")
        return cls(client)

    def get(self, key: str) -> str | None:
        value = self._client.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        self._client.set(key, value)

    def delete(self, key: str) -> None:
        self._client.delete(key)

    def close(self) -> None:
        self._client.close()
