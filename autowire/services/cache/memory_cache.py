from __future__ import annotations

import copy
import time
from typing import Any

from autowire.services.cache.interface import CacheInterface


class MemoryCache(CacheInterface):
    """In-process cache with TTL support. Values are deep-copied on the way in
    and out so callers never share state with the store."""

    def __init__(self) -> None:
        # key -> (value, expiry_timestamp_or_none)
        self._data: dict[str, tuple[Any, float | None]] = {}

    def get(self, key: str) -> Any | None:
        entry = self._data.get(key)
        if entry is None:
            return None
        value, expiry = entry
        if expiry is not None and time.monotonic() >= expiry:
            self._data.pop(key, None)
            return None
        return copy.deepcopy(value)

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        expiry = time.monotonic() + ttl if ttl is not None else None
        self._data[key] = (copy.deepcopy(value), expiry)

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        return self.get(key) is not None

    def delete_prefix(self, prefix: str) -> int:
        doomed = [key for key in self._data if key.startswith(prefix)]
        for key in doomed:
            del self._data[key]
        return len(doomed)

    def flush(self) -> None:
        self._data.clear()

    def health_check(self) -> bool:
        return True

    def keys(self) -> list[str]:
        """Keys currently stored, expired entries included until next read."""
        return list(self._data)
