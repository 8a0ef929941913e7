from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from autowire.builder.errors import DefinitionError
from autowire.builder.naming import service_key
from autowire.builder.reflection import ConstructorParameter, type_path


@dataclass(frozen=True)
class ParameterDescriptor:
    """How a single constructor parameter is resolved."""

    name: str
    service: str
    optional: bool = False
    has_default: bool = False
    declared_type: str | None = None

    @classmethod
    def from_parameter(cls, param: ConstructorParameter) -> ParameterDescriptor:
        return cls(
            name=param.name,
            service=service_key(param.name),
            optional=param.optional,
            has_default=param.has_default,
            declared_type=type_path(param.annotation),
        )


@dataclass(frozen=True)
class ParameterMapping:
    """Ordered wiring plan for one class.

    Descriptor order is the constructor's declared order; explicit arguments
    are matched against it by index.
    """

    class_id: str
    parameters: tuple[ParameterDescriptor, ...] = ()

    @classmethod
    def from_parameters(
        cls, class_id: str, params: list[ConstructorParameter]
    ) -> ParameterMapping:
        return cls(class_id, tuple(ParameterDescriptor.from_parameter(p) for p in params))

    @classmethod
    def from_cache(cls, class_id: str, raw: Any) -> ParameterMapping:
        """Rebuild a mapping from its cached form (see :meth:`to_cache`)."""
        if not isinstance(raw, list):
            raise DefinitionError(class_id, f"cached parameter mapping is malformed: {raw!r}")
        try:
            params = tuple(_descriptor(entry) for entry in raw)
        except (KeyError, TypeError, AttributeError) as exc:
            raise DefinitionError(
                class_id, f"cached parameter mapping is malformed: {raw!r}"
            ) from exc
        return cls(class_id, params)

    def to_cache(self) -> list[dict[str, Any]]:
        """JSON-safe representation stored in the cache."""
        return [
            {
                "name": p.name,
                "service": p.service,
                "optional": p.optional,
                "has_default": p.has_default,
                "type": p.declared_type,
            }
            for p in self.parameters
        ]

    def service_keys(self) -> list[dict[str, str]]:
        """``[{parameter_name: service_key}, ...]`` in declared order."""
        return [{p.name: p.service} for p in self.parameters]


def _descriptor(entry: dict[str, Any]) -> ParameterDescriptor:
    optional = bool(entry.get("optional", False))
    return ParameterDescriptor(
        name=entry["name"],
        service=entry["service"],
        optional=optional,
        # Entries written without the flag fall back to keeping the default
        has_default=bool(entry.get("has_default", optional)),
        declared_type=entry.get("type"),
    )
