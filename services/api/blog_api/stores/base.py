"""Key-value storage contract shared by all backends."""

from typing import Protocol


class KeyValueStorage(Protocol):
    """Synchronous text key-value store.

    `get` returns None for an absent key. Absent is not the same as empty.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...

    def close(self) -> None: ...


class MemoryStorage:
    """Dict-backed storage for tests and throwaway local runs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def close(self) -> None:
        pass
