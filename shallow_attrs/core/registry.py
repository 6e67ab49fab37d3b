# shallow_attrs/core/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from shallow_attrs.core.declaration import AttributeDeclaration

logger = logging.getLogger(__name__)


class ClassRegistry:
    """
    Per-class table of attribute declarations, own defaults and presence marks.

    A registry only knows what its own class declared. Inherited attributes are
    reached through the explicit ``parent`` link, which points at the registry
    of the nearest attribute-bearing ancestor or is ``None`` at the root.
    """

    def __init__(self, owner: type, parent: Optional["ClassRegistry"] = None) -> None:
        """
        :param owner: The class this registry belongs to.
        :param parent: Registry of the nearest ancestor that carries attributes.
        """
        self._owner = owner
        self._parent = parent
        self._own_defaults: Dict[str, Any] = {}
        self._present_names: List[str] = []
        self._declarations: Dict[str, AttributeDeclaration] = {}

    @property
    def owner(self) -> type:
        return self._owner

    @property
    def parent(self) -> Optional["ClassRegistry"]:
        return self._parent

    def declare(self, declaration: AttributeDeclaration) -> None:
        """
        Record a declaration, replacing any earlier one with the same name.

        A replaced name keeps its original position. A presence mark, once set,
        is not removed by a later declaration without ``present``.
        """
        name = declaration.name
        if name in self._declarations:
            logger.debug("Redeclaring attribute %s.%s", self._owner.__name__, name)
        else:
            logger.debug(
                "Declaring attribute %s.%s of type %r", self._owner.__name__, name, declaration.type
            )

        self._declarations[name] = declaration
        self._own_defaults[name] = declaration.default
        if declaration.options.present and name not in self._present_names:
            self._present_names.append(name)

    def own_attribute_names(self) -> List[str]:
        return list(self._own_defaults)

    def own_defaults(self) -> Dict[str, Any]:
        """A copy of the defaults declared directly on the owning class."""
        return dict(self._own_defaults)

    def own_declarations(self) -> Dict[str, AttributeDeclaration]:
        return dict(self._declarations)

    def present_names(self) -> List[str]:
        return list(self._present_names)

    def __repr__(self) -> str:
        return f"<ClassRegistry {self._owner.__name__} {self.own_attribute_names()}>"
