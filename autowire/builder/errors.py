"""Error taxonomy raised by the object builder.

Every failure is deterministic for a given (class, container, cache) triple,
so none of these are retried.
"""

from __future__ import annotations

from typing import Any


class ObjectBuilderError(Exception):
    """Base class for all object builder errors."""


class DefinitionError(ObjectBuilderError):
    """The class identifier does not resolve to a buildable class, or the
    class cannot be introspected."""

    def __init__(self, class_id: str, reason: str) -> None:
        super().__init__(f"Cannot build '{class_id}': {reason}")
        self.class_id = class_id
        self.reason = reason


class MissingDependencyError(ObjectBuilderError):
    """A required constructor parameter has no explicit argument and its
    service key is not registered in the container."""

    def __init__(self, class_id: str, parameter: str, service: str) -> None:
        super().__init__(
            f"No service '{service}' registered for parameter '{parameter}' "
            f"of {class_id}"
        )
        self.class_id = class_id
        self.parameter = parameter
        self.service = service


class InvalidArgumentError(ObjectBuilderError, ValueError):
    """A caller-supplied argument is malformed (raised before construction)."""


class InstanceMismatchError(ObjectBuilderError, TypeError):
    """The constructed instance is not compatible with the required type."""

    def __init__(self, instance: Any, required_type: type) -> None:
        super().__init__(
            f"{type(instance).__qualname__} is not an instance of "
            f"{required_type.__qualname__}"
        )
        self.instance = instance
        self.required_type = required_type


class DependencyTypeError(ObjectBuilderError, TypeError):
    """A resolved service does not match the parameter's declared type.

    Only raised when the builder runs with ``check_types=True``.
    """

    def __init__(self, class_id: str, parameter: str, expected: str, actual: Any) -> None:
        super().__init__(
            f"Service for parameter '{parameter}' of {class_id} is "
            f"{type(actual).__qualname__}, expected {expected}"
        )
        self.class_id = class_id
        self.parameter = parameter
        self.expected = expected
