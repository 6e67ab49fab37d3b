# shallow_attrs/types/kinds.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Closed set of coercion targets.

A declared Python type is mapped once to a TargetKind tag, and the gateway
dispatches on that tag. Types outside the set are rejected with CoercionError
when a coercion is attempted.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from typing import Any, Tuple

from shallow_attrs.core.errors import CoercionError


class TargetKind(Enum):
    """Defines the kinds of values an attribute can be coerced to."""

    INTEGER = auto()
    FLOAT = auto()
    BOOLEAN = auto()
    STRING = auto()
    SYMBOL = auto()
    DATETIME = auto()
    SEQUENCE = auto()  # list, optionally with an element type
    MAPPING = auto()  # dict
    NESTED = auto()  # another value object class


class Symbol(str):
    """An identifier-like string, kept distinct from free text."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


@dataclass(frozen=True)
class TargetType:
    kind: TargetKind
    python_type: type


# Subclasses first: bool is an int, Symbol is a str.
_BUILTIN_KINDS: Tuple[Tuple[type, TargetKind], ...] = (
    (bool, TargetKind.BOOLEAN),
    (int, TargetKind.INTEGER),
    (float, TargetKind.FLOAT),
    (Symbol, TargetKind.SYMBOL),
    (str, TargetKind.STRING),
    (datetime, TargetKind.DATETIME),
    (list, TargetKind.SEQUENCE),
    (dict, TargetKind.MAPPING),
)


def resolve_target(declared_type: Any) -> TargetType:
    """
    Map a declared type to its tagged target.

    :param declared_type: The type given in an attribute declaration.
    :raises CoercionError: If the type is not one of the supported kinds.
    """
    from shallow_attrs.core.value_object import ValueObject

    if isinstance(declared_type, type):
        if issubclass(declared_type, ValueObject):
            return TargetType(TargetKind.NESTED, declared_type)
        for python_type, kind in _BUILTIN_KINDS:
            if issubclass(declared_type, python_type):
                return TargetType(kind, declared_type)
    raise CoercionError(f"Unsupported attribute type: {declared_type!r}", target=declared_type)
