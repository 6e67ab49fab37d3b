# tests/unit/core/test_accessors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest


def _holder(gateway=None, **declarations):
    """Build a plain class carrying accessors, without ValueObject."""
    from shallow_attrs.core.accessors import AttributeAccessor
    from shallow_attrs.core.declaration import AttributeDeclaration

    namespace = {"__coercion_gateway__": gateway}
    for name, (declared_type, options) in declarations.items():
        namespace[name] = AttributeAccessor(AttributeDeclaration.build(name, declared_type, **options))

    def __init__(self):
        self.__dict__["_attributes"] = {}

    namespace["__init__"] = __init__
    return type("Holder", (), namespace)


def test_getter_on_class_returns_descriptor():
    from shallow_attrs.core.accessors import AttributeAccessor

    Holder = _holder(name=(str, {}))
    assert isinstance(Holder.name, AttributeAccessor)
    assert Holder.name.name == "name"
    assert Holder.name.declaration.type is str


def test_getter_before_assignment_is_none():
    Holder = _holder(name=(str, {}))
    assert Holder().name is None


def test_fast_path_skips_gateway(recording_gateway):
    Holder = _holder(gateway=recording_gateway, name=(str, {}))
    h = Holder()
    value = "Anton"

    h.name = value

    recording_gateway.coerce.assert_not_called()
    assert h.name is value
    assert h._attributes["name"] is value


def test_mismatch_goes_through_gateway(recording_gateway):
    Holder = _holder(gateway=recording_gateway, age=(int, {"allow_nil": True}))
    h = Holder()

    h.age = "42"

    recording_gateway.coerce.assert_called_once()
    declared_type, value, options = recording_gateway.coerce.call_args.args
    assert declared_type is int
    assert value == "42"
    assert options.allow_nil is True
    assert h.age == "coerced"
    assert h._attributes["age"] == "coerced"


def test_sequence_always_goes_through_gateway(recording_gateway):
    Holder = _holder(gateway=recording_gateway, tags=(list, {"of": str}))
    h = Holder()

    h.tags = ["already", "a", "list"]

    recording_gateway.coerce.assert_called_once()
    assert recording_gateway.coerce.call_args.args[2].element_type is str
    assert h.tags == "coerced"


def test_options_forwarded_without_default_or_present(recording_gateway):
    Holder = _holder(
        gateway=recording_gateway,
        size=(int, {"default": 5, "present": True, "allow_nil": True, "unit": "cm"}),
    )
    h = Holder()

    h.size = "7"

    options = recording_gateway.coerce.call_args.args[2]
    assert options.allow_nil is True
    assert dict(options.extra) == {"unit": "cm"}
    assert not hasattr(options, "default")
    assert not hasattr(options, "present")


def test_slot_and_map_hold_same_object(gateway):
    Holder = _holder(gateway=gateway, tags=(list, {"of": int}))
    h = Holder()

    h.tags = ("1", 2)

    assert h.tags == [1, 2]
    assert h.__dict__["tags"] is h._attributes["tags"]


def test_gateway_errors_propagate(gateway):
    from shallow_attrs.core.errors import CoercionError

    Holder = _holder(gateway=gateway, age=(int, {}))
    h = Holder()
    h.age = 3

    with pytest.raises(CoercionError):
        h.age = "not a number"
    assert h.age == 3
    assert h._attributes["age"] == 3


def test_non_type_declaration_uses_gateway(recording_gateway):
    Holder = _holder(gateway=recording_gateway, thing=("NotAType", {}))
    h = Holder()

    h.thing = "value"

    recording_gateway.coerce.assert_called_once_with("NotAType", "value", Holder.thing.declaration.options.coercion)
