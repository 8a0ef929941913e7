import pytest

from autowire.services.registry import REGISTRY, resolve_class, resolve_implementation


def test_resolve_memory_cache():
    from autowire.services.cache.memory_cache import MemoryCache

    assert resolve_implementation("cache", "memory") is MemoryCache


def test_resolve_redis_cache():
    from autowire.services.cache.redis_cache import RedisCache

    assert resolve_implementation("cache", "redis") is RedisCache


def test_unknown_interface():
    with pytest.raises(ValueError, match="Unknown interface: queue"):
        resolve_implementation("queue", "memory")


def test_unknown_implementation():
    with pytest.raises(ValueError, match=r"available: memory, redis"):
        resolve_implementation("cache", "disk")


@pytest.mark.parametrize("path", [p for impls in REGISTRY.values() for p in impls.values()])
def test_every_registered_path_resolves(path):
    assert resolve_class(path).__name__ == path.rsplit(".", 1)[1]
