# shallow_attrs/core/accessors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Optional

from shallow_attrs.core.declaration import AttributeDeclaration, matches_type
from shallow_attrs.types.gateway import gateway_for


class AttributeAccessor:
    """
    Data descriptor giving one declared attribute its getter and setter.

    The value lives in two places on the instance: the dedicated slot (the
    instance ``__dict__`` entry of the same name, which this descriptor shadows)
    and the generic ``_attributes`` map. The setter writes both with the same
    object.
    """

    def __init__(self, declaration: AttributeDeclaration) -> None:
        self._declaration = declaration

    @property
    def declaration(self) -> AttributeDeclaration:
        return self._declaration

    @property
    def name(self) -> str:
        return self._declaration.name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        """
        Store ``value`` unchanged when it already has the declared type and the
        type is not the sequence type; otherwise store what the gateway returns.

        :raises CoercionError: Propagated from the gateway.
        """
        declaration = self._declaration
        if matches_type(value, declaration.type) and not declaration.is_sequence:
            stored = value
        else:
            gateway = gateway_for(type(instance))
            stored = gateway.coerce(declaration.type, value, declaration.options.coercion)
        store_value(instance, self.name, stored)

    def __repr__(self) -> str:
        return f"<AttributeAccessor {self.name}: {self._declaration.type!r}>"


def store_value(instance: Any, name: str, value: Any) -> None:
    """Write ``value`` to both the dedicated slot and the generic map."""
    instance.__dict__[name] = value
    instance.__dict__["_attributes"][name] = value
