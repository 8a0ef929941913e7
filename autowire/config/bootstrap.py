"""Assemble an ObjectBuilder from environment configuration.

Recognised settings:
  AUTOWIRE_CACHE        cache implementation: memory, redis [default: memory]
  AUTOWIRE_CACHE_TTL    seconds before a cached mapping expires [default: never]
  AUTOWIRE_NAMESPACE    cache key namespace [default: builder class path]
  AUTOWIRE_CHECK_TYPES  verify resolved services against annotations [default: false]
  CACHE_REDIS_URL       redis connection URL (redis cache only)
  LOG_IMPL              logger implementation: pretty, memory [default: pretty]
  LOG_LEVEL             minimum level for the pretty logger [default: INFO]
"""

from __future__ import annotations

from pathlib import Path

from autowire.builder.object_builder import ObjectBuilder
from autowire.config.container import ServiceContainer
from autowire.config.context import PlatformConfig
from autowire.config.env_loader import load_env_file
from autowire.services.cache.interface import CacheInterface
from autowire.services.cache.memory_cache import MemoryCache
from autowire.services.logger.factory import LoggerFactory
from autowire.services.logger.memory_logger import MemoryLogger
from autowire.services.registry import resolve_implementation

BUILDER_KEY = "object_builder"


def build_cache(config: PlatformConfig) -> CacheInterface:
    """Instantiate the cache implementation selected by AUTOWIRE_CACHE."""
    impl_cls = resolve_implementation("cache", config.get("AUTOWIRE_CACHE", "memory"))
    # Cache implementations are wired from settings alone, so a throwaway
    # builder over a config-only container is enough
    wiring = ObjectBuilder(ServiceContainer({"config": config}), MemoryCache(), logger=MemoryLogger())
    return wiring.get_object(impl_cls, required_type=CacheInterface)


def build_object_builder(
    container: ServiceContainer | None = None,
    env_overrides: dict[str, str] | None = None,
    env_file: str | None = None,
    project_root: Path | None = None,
) -> ObjectBuilder:
    """Build an ObjectBuilder and register it (with its collaborators) in the container."""
    container = container if container is not None else ServiceContainer()

    # File vars are lower priority, explicit overrides win
    overrides: dict[str, str] = {}
    if env_file:
        overrides.update(load_env_file(env_file, project_root=project_root))
    overrides.update(env_overrides or {})
    config = PlatformConfig(overrides=overrides)

    logger_factory = LoggerFactory(
        default_impl=config.get("LOG_IMPL", "pretty"),
        level=config.get("LOG_LEVEL", "INFO"),
    )
    cache = build_cache(config)

    builder = ObjectBuilder(
        container,
        cache,
        logger=logger_factory.create(),
        namespace=config.get("AUTOWIRE_NAMESPACE") or None,
        check_types=config.get_bool("AUTOWIRE_CHECK_TYPES"),
        ttl=config.get_int("AUTOWIRE_CACHE_TTL"),
    )

    container.set("config", config)
    container.set("logger_factory", logger_factory)
    container.set("cache", cache)
    container.set(BUILDER_KEY, builder)
    return builder
