"""Root-level pytest fixtures: a testcontainer-backed Redis for integration tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(scope="session")
def redis_url():
    """URL of a Redis server for the test session.

    Uses AUTOWIRE_TEST_REDIS_URL when set (e.g. a docker-compose service),
    otherwise starts a throwaway container.
    """
    pytest.importorskip("redis")
    url = os.environ.get("AUTOWIRE_TEST_REDIS_URL")
    if url:
        yield url
        return

    redis_containers = pytest.importorskip("testcontainers.redis")
    try:
        redis = redis_containers.RedisContainer("redis:7").start()
    except Exception as exc:
        pytest.skip(f"Cannot start redis container: {exc}")

    try:
        host = redis.get_container_host_ip()
        port = redis.get_exposed_port(6379)
        yield f"redis://{host}:{port}/0"
    finally:
        redis.stop()
