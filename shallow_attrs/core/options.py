# shallow_attrs/core/options.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional


class _Missing:
    """Sentinel type marking an option that was never supplied."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@dataclass(frozen=True)
class CoercionOptions:
    """
    Options forwarded to the coercion gateway on every coercing assignment.

    Only gateway concerns live here. The declaration-only keys (default and
    present) have no field on this class and can never reach the gateway.
    """

    element_type: Optional[type] = None
    allow_nil: bool = False
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a type-specific pass-through option."""
        return self.extra.get(key, default)

    def for_elements(self) -> "CoercionOptions":
        """Options used when coercing the members of a sequence."""
        return replace(self, element_type=None)


@dataclass(frozen=True)
class AttributeOptions:
    """
    Explicit per-attribute configuration collected from a declaration.

    :param default: Value assigned when an instance is built without this attribute.
    :param present: Whether the declaring class requires this attribute.
    :param coercion: Options handed to the coercion gateway.
    """

    default: Any = MISSING
    present: bool = False
    coercion: CoercionOptions = field(default_factory=CoercionOptions)

    @property
    def has_default(self) -> bool:
        return self.default is not MISSING

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> "AttributeOptions":
        """
        Split a keyword options bag into the known fields and the pass-through map.

        ``of`` and ``element_type`` are aliases; ``of`` wins if both are given.
        """
        default = kwargs.pop("default", MISSING)
        present = bool(kwargs.pop("present", False))
        element_type = kwargs.pop("element_type", None)
        element_type = kwargs.pop("of", element_type)
        allow_nil = bool(kwargs.pop("allow_nil", False))
        coercion = CoercionOptions(
            element_type=element_type,
            allow_nil=allow_nil,
            extra=MappingProxyType(dict(kwargs)),
        )
        return cls(default=default, present=present, coercion=coercion)
