"""Class metadata facility: load classes by identifier and enumerate their
constructor parameters."""

from __future__ import annotations

import importlib
import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any, Union, get_type_hints

from autowire.builder.errors import DefinitionError

_NONE_TYPE = type(None)


@dataclass(frozen=True)
class ConstructorParameter:
    name: str
    annotation: Any
    has_default: bool = False
    nullable: bool = False

    @property
    def optional(self) -> bool:
        return self.has_default or self.nullable


def class_identifier(cls: type) -> str:
    """Return the dotted ``module.qualname`` identifier for a class."""
    return f"{cls.__module__}.{cls.__qualname__}"


def type_path(annotation: Any) -> str | None:
    """Dotted path of a plain-class annotation, ``None`` for anything else."""
    if isinstance(annotation, type) and annotation.__module__ != "typing":
        return class_identifier(annotation)
    return None


def resolve_path(dotted_path: str) -> Any:
    """Import and return the object at a dotted path.

    The longest importable module prefix wins; the remainder is walked as
    attributes, which supports nested classes (``pkg.mod.Outer.Inner``).
    """
    parts = dotted_path.split(".")
    for split in range(len(parts) - 1, 0, -1):
        module_path = ".".join(parts[:split])
        try:
            target: Any = importlib.import_module(module_path)
        except ModuleNotFoundError as exc:
            # Only skip when the prefix itself is missing, not one of its imports
            if exc.name is not None and (
                module_path == exc.name or module_path.startswith(exc.name + ".")
            ):
                continue
            raise DefinitionError(dotted_path, f"import of '{module_path}' failed: {exc}") from exc
        try:
            for attr in parts[split:]:
                target = getattr(target, attr)
        except AttributeError as exc:
            raise DefinitionError(dotted_path, f"'{module_path}' has no attribute '{attr}'") from exc
        return target
    raise DefinitionError(dotted_path, "no importable module in path")


def load_class(identifier: str | type) -> type:
    """Resolve *identifier* to a concrete, instantiable class."""
    if isinstance(identifier, str):
        cls = resolve_path(identifier)
        class_id = identifier
    else:
        cls = identifier
        class_id = class_identifier(identifier) if isinstance(identifier, type) else repr(identifier)

    if not isinstance(cls, type):
        raise DefinitionError(class_id, f"{cls!r} is not a class")
    if inspect.isabstract(cls):
        raise DefinitionError(class_id, "abstract classes cannot be instantiated")
    return cls


def constructor_parameters(cls: type) -> list[ConstructorParameter]:
    """Enumerate the constructor parameters of *cls* in declared order."""
    class_id = class_identifier(cls)
    try:
        sig = inspect.signature(cls)
    except (TypeError, ValueError) as exc:
        # Builtin bases (dict, Exception) carry no signature; with no
        # Python-level constructor above them there is nothing to resolve
        if not _declares_constructor(cls):
            return []
        raise DefinitionError(class_id, f"cannot read constructor signature: {exc}") from exc

    if not sig.parameters:
        return []

    init = cls.__init__
    try:
        hints = get_type_hints(init) if hasattr(init, "__annotations__") else {}
    except Exception as exc:
        raise DefinitionError(class_id, f"cannot read type hints: {exc}") from exc
    hints.pop("return", None)

    params: list[ConstructorParameter] = []
    for name, param in sig.parameters.items():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.kind is param.POSITIONAL_ONLY:
            raise DefinitionError(
                class_id, f"positional-only parameter '{name}' cannot be resolved by name"
            )
        annotation = hints.get(name)
        params.append(
            ConstructorParameter(
                name=name,
                annotation=annotation,
                has_default=param.default is not param.empty,
                nullable=is_nullable(annotation),
            )
        )
    return params


def is_nullable(annotation: Any) -> bool:
    """True for ``Optional[X]``, ``X | None`` and unions containing ``None``."""
    if annotation is _NONE_TYPE:
        return True
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return _NONE_TYPE in typing.get_args(annotation)
    return False


def _declares_constructor(cls: type) -> bool:
    """True if any class in the MRO defines ``__init__``/``__new__`` in Python."""
    for klass in cls.__mro__:
        namespace = vars(klass)
        if inspect.isfunction(namespace.get("__init__")):
            return True
        if isinstance(namespace.get("__new__"), staticmethod):
            return True
    return False
