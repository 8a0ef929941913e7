"""Redis-backed cache implementation using redis-py.

Values are stored as JSON so parameter mappings survive process restarts and
can be shared between processes using the same namespace.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import redis

from autowire.config.context import PlatformConfig
from autowire.services.cache.interface import CacheInterface

_DEFAULT_URL = "redis://localhost:6379/0"


class RedisCache(CacheInterface):
    def __init__(self, config: PlatformConfig) -> None:
        self._url = config.get("CACHE_REDIS_URL", _DEFAULT_URL)
        self._client: redis.Redis | None = None  # type: ignore[type-arg]

    @property
    def url(self) -> str:
        return self._url

    def connect(self) -> None:
        import redis

        self._client = redis.Redis.from_url(self._url, decode_responses=False)

    def disconnect(self) -> None:
        if self._client:
            self._client.close()
            self._client = None

    def _ensure_connected(self) -> redis.Redis:  # type: ignore[type-arg]
        if self._client is None:
            self.connect()
        return self._client  # type: ignore[return-value]

    def get(self, key: str) -> Any | None:
        raw = self._ensure_connected().get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: Any, ttl: int | None = None) -> None:
        raw = json.dumps(value).encode("utf-8")
        client = self._ensure_connected()
        if ttl is not None:
            client.setex(key, ttl, raw)
        else:
            client.set(key, raw)

    def delete(self, key: str) -> bool:
        return self._ensure_connected().delete(key) > 0

    def delete_prefix(self, prefix: str) -> int:
        client = self._ensure_connected()
        removed = 0
        for key in client.scan_iter(match=f"{_escape_glob(prefix)}*"):
            removed += client.delete(key)
        return removed

    def exists(self, key: str) -> bool:
        return self._ensure_connected().exists(key) > 0

    def flush(self) -> None:
        self._ensure_connected().flushdb()

    def health_check(self) -> bool:
        try:
            return bool(self._ensure_connected().ping())
        except Exception:
            return False


def _escape_glob(text: str) -> str:
    for ch in ("\\", "*", "?", "[", "]"):
        text = text.replace(ch, "\\" + ch)
    return text
