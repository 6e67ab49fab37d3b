# shallow_attrs/core/merger.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Inheritance merge for class registries.

Every function here walks the ``parent`` links of a registry and builds a fresh
result on each call. Nothing is cached and the stored registries are never
modified, so the outcome does not depend on call order.

Ordering is parent-first: names inherited from an ancestor keep the ancestor's
declaration order (an overridden name keeps the ancestor's position) and names
first declared by the subclass follow in their own declaration order.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from shallow_attrs.core.declaration import AttributeDeclaration
from shallow_attrs.core.registry import ClassRegistry


def effective_defaults(registry: Optional[ClassRegistry]) -> Dict[str, Any]:
    """
    Merge a registry's own defaults over its ancestors' effective defaults.

    :param registry: Registry to resolve, or None for a class with no attributes.
    :return: A new name -> default map; own values win on name collision.
    """
    if registry is None:
        return {}
    merged = effective_defaults(registry.parent)
    merged.update(registry.own_defaults())
    return merged


def effective_declarations(registry: Optional[ClassRegistry]) -> Dict[str, AttributeDeclaration]:
    """Declarations visible on the class, merged with the same precedence and order."""
    if registry is None:
        return {}
    merged = effective_declarations(registry.parent)
    merged.update(registry.own_declarations())
    return merged


def attribute_names(registry: Optional[ClassRegistry]) -> List[str]:
    return list(effective_defaults(registry))


def present_names(registry: Optional[ClassRegistry]) -> List[str]:
    """Names the registry's own class marks present. Ancestors are not consulted."""
    if registry is None:
        return []
    return registry.present_names()
