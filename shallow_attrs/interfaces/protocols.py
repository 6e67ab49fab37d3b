# shallow_attrs/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from shallow_attrs.core.options import CoercionOptions


@runtime_checkable
class CoercionGatewayProtocol(Protocol):
    """
    Coercion gateway protocol for type checking.

    Methods:
        coerce(declared_type, value, options): Returns ``value`` converted to
        ``declared_type``.

    Runtime Invariants:
    - ``options`` never carries an attribute's default or presence flag.
    - ``None`` is returned unchanged only when ``options.allow_nil`` is true.

    Error Handling:
    - Conversion failures are raised as CoercionError and reach the caller of
      the attribute setter unmodified.
    """

    def coerce(self, declared_type: Any, value: Any, options: "CoercionOptions") -> Any:
        """Convert a raw value to the declared type."""
        ...
