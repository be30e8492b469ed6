"""Cache port - interface for caching translation results."""

from __future__ import annotations

from typing import Hashable, Protocol, runtime_checkable


@runtime_checkable
class Cache(Protocol):
    """Port for caching operations."""

    def get(self, key: Hashable) -> object | None:
        """Get value from cache."""
        ...

    def set(self, key: Hashable, value: object) -> None:
        """Set value in cache."""
        ...

    def clear(self) -> None:
        """Clear all cached values."""
        ...

    def __len__(self) -> int:
        ...


class MemoryCache:
    """In-memory cache, unbounded unless ``max_size`` is given."""

    def __init__(self, max_size: int | None = None):
        self._data: dict[Hashable, object] = {}
        self._max_size = max_size

    def get(self, key: Hashable) -> object | None:
        return self._data.get(key)

    def set(self, key: Hashable, value: object) -> None:
        # At capacity: drop the oldest insertion
        if self._max_size is not None and len(self._data) >= self._max_size and key not in self._data:
            self._data.pop(next(iter(self._data)))
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
