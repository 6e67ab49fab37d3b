# tests/unit/types/test_gateway.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging

import pytest


def test_none_requires_allow_nil(gateway):
    from shallow_attrs.core.errors import CoercionError
    from shallow_attrs.core.options import CoercionOptions

    assert gateway.coerce(int, None, CoercionOptions(allow_nil=True)) is None
    with pytest.raises(CoercionError) as exc:
        gateway.coerce(int, None)
    assert exc.value.target is int
    assert exc.value.value is None


def test_allow_nil_skips_type_resolution(gateway):
    from shallow_attrs.core.options import CoercionOptions

    assert gateway.coerce(object, None, CoercionOptions(allow_nil=True)) is None


def test_matching_value_returned_unchanged(gateway):
    value = {"a": 1}
    assert gateway.coerce(dict, value) is value


def test_unsupported_type(gateway):
    from shallow_attrs.core.errors import CoercionError

    with pytest.raises(CoercionError):
        gateway.coerce(tuple, (1, 2))


def test_custom_coercer_overrides_kind():
    from shallow_attrs.types.gateway import CoercionGateway
    from shallow_attrs.types.kinds import TargetKind

    def shouting(value, target, options, gateway):
        return str(value).upper()

    gw = CoercionGateway(coercers={TargetKind.STRING: shouting})
    assert gw.coerce(str, 12) == "12"
    assert gw.coerce(str, ["a"]) == "['A']"
    assert gw.coerce(str, "as given") == "as given"
    assert gw.coerce(int, "5") == 5


def test_failure_is_logged(gateway, caplog):
    from shallow_attrs.core.errors import CoercionError

    with caplog.at_level(logging.DEBUG, logger="shallow_attrs.types.gateway"):
        with pytest.raises(CoercionError):
            gateway.coerce(int, "abc")

    assert any("failed" in r.getMessage() for r in caplog.records)


def test_default_gateway_configuration():
    from shallow_attrs.types.gateway import (
        CoercionGateway,
        gateway_for,
        get_default_gateway,
        set_default_gateway,
    )

    custom = CoercionGateway()
    set_default_gateway(custom)
    assert get_default_gateway() is custom
    assert gateway_for(object) is custom

    set_default_gateway(None)
    assert isinstance(get_default_gateway(), CoercionGateway)
    assert get_default_gateway() is not custom


def test_set_default_gateway_rejects_non_gateways():
    from shallow_attrs.types.gateway import set_default_gateway

    with pytest.raises(TypeError):
        set_default_gateway(object())


def test_gateway_for_class_override(recording_gateway):
    from shallow_attrs.types.gateway import gateway_for, get_default_gateway

    class Configured:
        __coercion_gateway__ = recording_gateway

    class Unconfigured:
        __coercion_gateway__ = None

    assert gateway_for(Configured) is recording_gateway
    assert gateway_for(Unconfigured) is get_default_gateway()


def test_gateway_satisfies_protocol(gateway):
    from shallow_attrs.interfaces.protocols import CoercionGatewayProtocol

    assert isinstance(gateway, CoercionGatewayProtocol)
