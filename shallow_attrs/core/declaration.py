# shallow_attrs/core/declaration.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shallow_attrs.core.options import AttributeOptions


def is_sequence_type(declared_type: Any) -> bool:
    """Return True when ``declared_type`` is the sequence type (``list`` or a subclass)."""
    return isinstance(declared_type, type) and issubclass(declared_type, list)


def matches_type(value: Any, declared_type: Any) -> bool:
    """
    Return True when ``value`` can be stored for ``declared_type`` without coercion.

    A ``bool`` only matches ``bool`` (or a subclass), never ``int``.
    """
    if not isinstance(declared_type, type) or not isinstance(value, declared_type):
        return False
    return not isinstance(value, bool) or issubclass(declared_type, bool)


@dataclass(frozen=True)
class AttributeDeclaration:
    """
    A single registration of an attribute: its name, declared type and options.

    Declarations are immutable. Declaring the same name again produces a new
    declaration that replaces this one in the class registry.
    """

    name: str
    type: Any
    options: AttributeOptions = field(default_factory=AttributeOptions)

    @classmethod
    def build(cls, name: str, declared_type: Any, **options: Any) -> "AttributeDeclaration":
        return cls(name=name, type=declared_type, options=AttributeOptions.from_kwargs(**options))

    @property
    def is_sequence(self) -> bool:
        return is_sequence_type(self.type)

    @property
    def default(self) -> Any:
        """
        The default recorded for this attribute.

        An absent default on a sequence-typed attribute becomes a fresh empty
        list; any other absent default is ``None``.
        """
        if self.options.has_default:
            return self.options.default
        if self.is_sequence:
            return []
        return None
