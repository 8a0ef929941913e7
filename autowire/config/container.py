from typing import Any, Callable

from autowire.interfaces.container import ContainerInterface, ServiceNotFoundError


class ServiceContainer(ContainerInterface):
    """String-keyed service registry. Stores pre-built services, or factories
    that are invoked once on first lookup."""

    def __init__(self, services: dict[str, Any] | None = None) -> None:
        self._registry: dict[str, Any] = dict(services or {})
        self._factories: dict[str, Callable[[], Any]] = {}

    def set(self, key: str, instance: Any) -> None:
        """Register a pre-built service under *key*."""
        self._factories.pop(key, None)
        self._registry[key] = instance

    def set_factory(self, key: str, factory: Callable[[], Any]) -> None:
        """Register a closure producing the service; called lazily, result kept."""
        self._registry.pop(key, None)
        self._factories[key] = factory

    def has(self, key: str) -> bool:
        return key in self._registry or key in self._factories

    def get(self, key: str) -> Any:
        if key in self._registry:
            return self._registry[key]
        factory = self._factories.get(key)
        if factory is None:
            raise ServiceNotFoundError(f"No service registered for key '{key}'")
        instance = factory()
        self._registry[key] = instance
        self._factories.pop(key, None)
        return instance

    def keys(self) -> list[str]:
        return sorted(self._registry.keys() | self._factories.keys())
