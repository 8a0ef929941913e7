"""Reflection-driven object builder.

Builds instances of application classes by resolving each constructor
parameter to a service in the container, keyed by a name derived from the
parameter (``fooBar`` -> ``foo_bar``). The per-class parameter mapping is
computed once and stored in the cache.

Cached mappings are never re-validated against the class. If a constructor
signature changes, the cached mapping goes stale until it is evicted, so
deployments that change constructor shapes must flush the namespace
(:meth:`ObjectBuilder.invalidate_all`) or switch to a new one.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Sequence, TypeVar

from autowire.builder.errors import (
    DefinitionError,
    DependencyTypeError,
    InstanceMismatchError,
    InvalidArgumentError,
    MissingDependencyError,
)
from autowire.builder.mapping import ParameterDescriptor, ParameterMapping
from autowire.builder.reflection import (
    class_identifier,
    constructor_parameters,
    load_class,
    resolve_path,
)
from autowire.interfaces.container import ContainerInterface
from autowire.services.cache.interface import CacheInterface
from autowire.services.logger.factory import LoggerFactory
from autowire.services.logger.interface import LoggingInterface

T = TypeVar("T")


class ObjectBuilder:
    """Constructs fully-wired instances from container services."""

    def __init__(
        self,
        container: ContainerInterface,
        cache: CacheInterface,
        logger: LoggingInterface | None = None,
        namespace: str | None = None,
        check_types: bool = False,
        ttl: int | None = None,
    ) -> None:
        self._container = container
        self._cache = cache
        self._log = logger or LoggerFactory().create()
        self._namespace = namespace or class_identifier(type(self))
        self._check_types = check_types
        self._ttl = ttl

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def check_types(self) -> bool:
        return self._check_types

    @property
    def ttl(self) -> int | None:
        return self._ttl

    def cache_key(self, class_id: str) -> str:
        return f"{self._namespace}:{class_id}"

    def get_object(
        self,
        class_ref: str | type[T],
        explicit_args: Sequence[Any] = (),
        required_type: str | type | None = None,
    ) -> T:
        """Build an instance of *class_ref* (a class or its dotted identifier).

        *explicit_args* bind the leading constructor parameters in declared
        order (passed by name, so keyword-only parameters accept them too);
        the rest come from the container. If *required_type* is given, the
        built instance must be an instance of it.
        """
        expected = _required_type(required_type) if required_type is not None else None

        cls = load_class(class_ref)
        class_id = class_identifier(cls)
        mapping = self._mapping(cls, class_id)

        if len(explicit_args) > len(mapping.parameters):
            raise InvalidArgumentError(
                f"{class_id} takes {len(mapping.parameters)} constructor parameter(s), "
                f"{len(explicit_args)} explicit argument(s) given"
            )

        instance = cls(**self._resolve(mapping, explicit_args))

        if expected is not None and not isinstance(instance, expected):
            raise InstanceMismatchError(instance, expected)
        return instance

    def mapping_for(self, class_ref: str | type) -> ParameterMapping:
        """Return the (possibly cached) parameter mapping for a class."""
        cls = load_class(class_ref)
        return self._mapping(cls, class_identifier(cls))

    def invalidate(self, class_ref: str | type) -> bool:
        """Drop the cached mapping for one class. Returns True if one was cached."""
        try:
            class_id = class_identifier(load_class(class_ref))
        except DefinitionError:
            # The class is gone, so the caller can only know it by its old path
            if not isinstance(class_ref, str):
                raise
            class_id = class_ref
        removed = self._cache.delete_item(self.cache_key(class_id))
        self._log.debug("Parameter mapping invalidated", class_id=class_id, removed=removed)
        return removed

    def invalidate_all(self) -> int:
        """Drop every mapping cached under this builder's namespace."""
        removed = self._cache.delete_prefix(f"{self._namespace}:")
        self._log.info("Parameter mappings invalidated", namespace=self._namespace, removed=removed)
        return removed

    # ── Internal ──────────────────────────────────────────────────────────

    def _mapping(self, cls: type, class_id: str) -> ParameterMapping:
        item = self._cache.get_item(self.cache_key(class_id))
        if item.is_hit():
            return ParameterMapping.from_cache(class_id, item.get())

        mapping = ParameterMapping.from_parameters(class_id, constructor_parameters(cls))
        self._cache.save_item(item.set(mapping.to_cache()).expires_after(self._ttl))
        self._log.debug(
            "Parameter mapping computed",
            class_id=class_id,
            services=mapping.service_keys(),
        )
        return mapping

    def _resolve(
        self, mapping: ParameterMapping, explicit_args: Sequence[Any]
    ) -> dict[str, Any]:
        leading = mapping.parameters[: len(explicit_args)]
        kwargs: dict[str, Any] = {p.name: value for p, value in zip(leading, explicit_args)}
        for param in mapping.parameters[len(explicit_args):]:
            if self._container.has(param.service):
                service = self._container.get(param.service)
                if self._check_types:
                    _check_type(mapping.class_id, param, service)
                kwargs[param.name] = service
            elif param.optional:
                # Nullable without a default still needs a value
                if not param.has_default:
                    kwargs[param.name] = None
            else:
                self._log.error(
                    "Missing dependency",
                    class_id=mapping.class_id,
                    parameter=param.name,
                    service=param.service,
                )
                raise MissingDependencyError(mapping.class_id, param.name, param.service)
        return kwargs


def _required_type(required_type: str | type) -> type:
    if isinstance(required_type, type):
        return required_type
    if isinstance(required_type, str):
        try:
            target = resolve_path(required_type)
        except DefinitionError as exc:
            raise InvalidArgumentError(f"Required type '{required_type}' does not exist") from exc
        if isinstance(target, type):
            return target
    raise InvalidArgumentError(f"Required type {required_type!r} is not a class")


@lru_cache(maxsize=256)
def _declared_type(path: str) -> type | None:
    try:
        target = resolve_path(path)
    except DefinitionError:
        return None
    return target if isinstance(target, type) else None


def _check_type(class_id: str, param: ParameterDescriptor, service: Any) -> None:
    if param.declared_type is None:
        return
    expected = _declared_type(param.declared_type)
    if expected is not None and not isinstance(service, expected):
        raise DependencyTypeError(class_id, param.name, param.declared_type, service)
