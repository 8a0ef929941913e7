from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class CacheItem:
    """A single cache entry as returned by :meth:`CacheInterface.get_item`."""

    key: str
    value: Any = None
    hit: bool = False
    ttl: int | None = field(default=None, repr=False)

    def is_hit(self) -> bool:
        return self.hit

    def get(self) -> Any:
        return self.value if self.hit else None

    def set(self, value: Any) -> CacheItem:
        self.value = value
        return self

    def expires_after(self, ttl: int | None) -> CacheItem:
        """Set the TTL in seconds applied on save (``None`` = no expiry)."""
        self.ttl = ttl
        return self


class CacheInterface(ABC):
    """Key-value caching with TTL support.

    ``None`` is reserved as the miss marker, so it cannot be stored.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None: ...

    @abstractmethod
    def set(self, key: str, value: Any, ttl: int | None = None) -> None: ...

    @abstractmethod
    def delete(self, key: str) -> bool: ...

    @abstractmethod
    def exists(self, key: str) -> bool: ...

    @abstractmethod
    def delete_prefix(self, prefix: str) -> int:
        """Delete every key starting with *prefix*; returns the number removed."""
        ...

    @abstractmethod
    def flush(self) -> None: ...

    @abstractmethod
    def health_check(self) -> bool: ...

    def get_item(self, key: str) -> CacheItem:
        """Return an item for *key*; ``is_hit()`` tells whether it was stored."""
        value = self.get(key)
        return CacheItem(key=key, value=value, hit=value is not None)

    def save_item(self, item: CacheItem) -> None:
        if item.value is None:
            raise ValueError(f"Cannot cache None for key '{item.key}'")
        self.set(item.key, item.value, ttl=item.ttl)
        item.hit = True

    def delete_item(self, key: str) -> bool:
        return self.delete(key)
