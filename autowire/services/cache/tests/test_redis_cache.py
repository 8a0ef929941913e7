import json
from unittest.mock import MagicMock

from autowire.config.context import PlatformConfig
from autowire.services.cache.redis_cache import RedisCache


def _cache() -> tuple[RedisCache, MagicMock]:
    cache = RedisCache(PlatformConfig({"CACHE_REDIS_URL": "redis://test:6379/1"}))
    client = MagicMock()
    cache._client = client
    return cache, client


def test_default_url():
    cache = RedisCache(PlatformConfig({}))
    assert cache.url.startswith("redis://")


def test_get_decodes_json():
    cache, client = _cache()
    client.get.return_value = json.dumps([{"name": "foo", "service": "foo"}]).encode()

    assert cache.get("key") == [{"name": "foo", "service": "foo"}]
    client.get.assert_called_once_with("key")


def test_get_missing():
    cache, client = _cache()
    client.get.return_value = None
    assert cache.get("key") is None
    assert not cache.get_item("key").is_hit()


def test_set_without_ttl():
    cache, client = _cache()
    cache.set("key", [])
    client.set.assert_called_once_with("key", b"[]")


def test_set_with_ttl():
    cache, client = _cache()
    cache.set("key", {"a": 1}, ttl=30)
    client.setex.assert_called_once_with("key", 30, b'{"a": 1}')


def test_delete_and_exists():
    cache, client = _cache()
    client.delete.return_value = 1
    client.exists.return_value = 0
    assert cache.delete("key") is True
    assert cache.exists("key") is False


def test_delete_prefix_escapes_pattern():
    cache, client = _cache()
    client.scan_iter.return_value = [b"ns*:a", b"ns*:b"]
    client.delete.return_value = 1

    assert cache.delete_prefix("ns*:") == 2
    client.scan_iter.assert_called_once_with(match="ns\\*:*")


def test_health_check_failure():
    cache, client = _cache()
    client.ping.side_effect = ConnectionError("down")
    assert cache.health_check() is False


def test_disconnect_closes_client():
    cache, client = _cache()
    cache.disconnect()
    client.close.assert_called_once()
    assert cache._client is None
