from abc import ABC, abstractmethod
from typing import Any


class ServiceNotFoundError(KeyError):
    """Raised by ``get`` when no service is registered under the key."""


class ContainerInterface(ABC):
    """Lookup of already-constructed services by string key."""

    @abstractmethod
    def has(self, key: str) -> bool: ...

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the service registered under *key*; raises ServiceNotFoundError."""
        ...
