from typing import Optional, Union

import pytest

from autowire.builder.errors import DefinitionError
from autowire.builder.reflection import (
    class_identifier,
    constructor_parameters,
    is_nullable,
    load_class,
    resolve_path,
    type_path,
)

from playground import (
    ClockService,
    DictDerived,
    FooServiceWithProperty,
    InitOverBuiltin,
    NoConstructor,
    NullableService,
    Outer,
)


def test_class_identifier():
    assert class_identifier(Outer.Inner) == "playground.Outer.Inner"


def test_load_class_from_identifier():
    assert load_class("playground.Outer.Inner") is Outer.Inner


def test_load_class_passes_classes_through():
    assert load_class(NoConstructor) is NoConstructor


def test_load_class_rejects_instances():
    with pytest.raises(DefinitionError, match="is not a class"):
        load_class(NoConstructor())


def test_resolve_path_missing_module():
    with pytest.raises(DefinitionError, match="no importable module"):
        resolve_path("definitely_not_a_module_xyz")


def test_constructor_parameters_in_declared_order():
    params = constructor_parameters(FooServiceWithProperty)

    assert [p.name for p in params] == ["foo", "fooBar", "property"]
    assert [p.optional for p in params] == [False, False, True]
    assert params[2].has_default
    assert params[2].nullable


def test_nullable_without_default():
    cache_param = constructor_parameters(NullableService)[1]
    assert cache_param.nullable
    assert not cache_param.has_default
    assert cache_param.optional


def test_no_constructor_has_no_parameters():
    assert constructor_parameters(NoConstructor) == []


def test_builtin_subclass_without_constructor_has_no_parameters():
    assert constructor_parameters(DictDerived) == []


def test_builtin_subclass_with_constructor_is_introspected():
    assert [p.name for p in constructor_parameters(InitOverBuiltin)] == ["foo"]


@pytest.mark.parametrize(
    "annotation,expected",
    [
        (Optional[int], True),
        (int | None, True),
        (Union[int, str, None], True),
        (Union[int, str], False),
        (int, False),
        (type(None), True),
        (None, False),
    ],
)
def test_is_nullable(annotation, expected):
    assert is_nullable(annotation) is expected


def test_type_path():
    annotation = constructor_parameters(ClockService)[0].annotation
    assert type_path(annotation) == "datetime.datetime"
    assert type_path(Optional[int]) is None
    assert type_path(None) is None
