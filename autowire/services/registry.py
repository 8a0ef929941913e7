"""Central registry mapping (interface_name, impl_name) to concrete class paths.

Uses string paths for lazy imports, so importing the registry doesn't pull in
redis unless that implementation is selected.
"""

import importlib
from typing import Any

REGISTRY: dict[str, dict[str, str]] = {
    "cache": {
        "memory": "autowire.services.cache.memory_cache.MemoryCache",
        "redis": "autowire.services.cache.redis_cache.RedisCache",
    },
}


def resolve_class(dotted_path: str) -> type[Any]:
    """Import and return a class from a dotted module.ClassName path."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)


def resolve_implementation(interface_name: str, impl_name: str) -> type[Any]:
    """Look up the concrete class for a given interface and implementation name."""
    impls = REGISTRY.get(interface_name)
    if impls is None:
        raise ValueError(f"Unknown interface: {interface_name}")
    dotted = impls.get(impl_name)
    if dotted is None:
        available = ", ".join(impls.keys())
        raise ValueError(
            f"Unknown implementation '{impl_name}' for {interface_name} "
            f"(available: {available})"
        )
    return resolve_class(dotted)
