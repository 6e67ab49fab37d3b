# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from unittest.mock import MagicMock

import pytest


@pytest.fixture(autouse=True)
def restore_default_gateway():
    """Put a stock gateway back after tests that replace the process default."""
    from shallow_attrs.types.gateway import get_default_gateway, set_default_gateway

    original = get_default_gateway()
    yield
    set_default_gateway(original)


@pytest.fixture
def gateway():
    """A fresh gateway with the built-in coercers."""
    from shallow_attrs.types.gateway import CoercionGateway

    return CoercionGateway()


@pytest.fixture
def recording_gateway():
    """A gateway mock that records calls and returns a marker value."""
    gw = MagicMock()
    gw.coerce = MagicMock(return_value="coerced")
    return gw


@pytest.fixture
def base_and_child():
    """Base declares a present ``name``; Child adds ``age``."""
    from shallow_attrs import Attr, ValueObject

    class Base(ValueObject):
        name = Attr(str, default="x", present=True)

    class Child(Base):
        age = Attr(int, default=0)

    return Base, Child


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from shallow_attrs.core.errors import (
        CoercionError,
        MissingAttributeError,
        ShallowAttrsError,
        UnknownAttributeError,
    )

    return (ShallowAttrsError, CoercionError, MissingAttributeError, UnknownAttributeError)
