# shallow_attrs/core/value_object.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional

from shallow_attrs.core.accessors import AttributeAccessor, store_value
from shallow_attrs.core.declaration import AttributeDeclaration
from shallow_attrs.core.errors import MissingAttributeError, UnknownAttributeError
from shallow_attrs.core.merger import attribute_names, effective_declarations, effective_defaults, present_names
from shallow_attrs.core.registry import ClassRegistry

logger = logging.getLogger(__name__)


class Attr:
    """
    Placeholder for declaring an attribute in a class body.

    Example:
        class User(ValueObject):
            name = Attr(str, default="Anton", present=True)
            tags = Attr(list, of=str)

    Each placeholder is replaced by a ``ValueObject.attribute`` call, in class
    body order, when the class is created.
    """

    def __init__(self, declared_type: Any, **options: Any) -> None:
        self.type = declared_type
        self.options = options

    def __repr__(self) -> str:
        return f"Attr({self.type!r}, {self.options!r})"


def _nearest_registry(cls: type) -> Optional[ClassRegistry]:
    for base in cls.__mro__[1:]:
        registry = base.__dict__.get("__attribute_registry__")
        if registry is not None:
            return registry
    return None


class ValueObject:
    """
    Base class for value objects with declared, typed attributes.

    Subclasses declare attributes with ``Attr`` placeholders or with the
    ``attribute`` class method. Every subclass gets its own ClassRegistry whose
    parent is the registry of the nearest ValueObject ancestor.

    Attribute names must not reuse the members of this class (see
    ``RESERVED_NAMES``); such a declaration replaces the member and is logged
    as a warning.

    Configuration:
        ``__coercion_gateway__`` selects the gateway used by this class's
        setters. None falls back to the process-wide default gateway.
    """

    __coercion_gateway__: Any = None
    __attribute_registry__: Optional[ClassRegistry] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__attribute_registry__ = ClassRegistry(cls, parent=_nearest_registry(cls))
        placeholders = [(name, value) for name, value in cls.__dict__.items() if isinstance(value, Attr)]
        for name, placeholder in placeholders:
            cls.attribute(name, placeholder.type, **placeholder.options)

    @classmethod
    def attribute(cls, name: str, declared_type: Any, **options: Any) -> None:
        """
        Declare an attribute on this class and install its accessor.

        :param name: Attribute name.
        :param declared_type: Target type for assignments.
        :param options: ``default``, ``present``, ``of``/``element_type``,
            ``allow_nil``; any other key is passed through to the gateway.
        """
        if name in RESERVED_NAMES:
            logger.warning("Attribute %s.%s shadows the ValueObject member of the same name", cls.__name__, name)
        declaration = AttributeDeclaration.build(name, declared_type, **options)
        cls.__dict__["__attribute_registry__"].declare(declaration)
        setattr(cls, name, AttributeAccessor(declaration))

    @classmethod
    def attributes(cls) -> List[str]:
        """All attribute names, inherited first, in declaration order."""
        return attribute_names(cls.__attribute_registry__)

    @classmethod
    def default_values(cls) -> Dict[str, Any]:
        return effective_defaults(cls.__attribute_registry__)

    @classmethod
    def present_attributes(cls) -> List[str]:
        """Names this class itself marks present. Not inherited."""
        return present_names(cls.__attribute_registry__)

    @classmethod
    def attribute_declarations(cls) -> Dict[str, AttributeDeclaration]:
        return effective_declarations(cls.__attribute_registry__)

    def __init__(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """
        Build an instance from a mapping and/or keyword arguments.

        Provided values go through the attribute setters. Attributes not
        provided receive their default: a callable default (other than a class)
        is called as ``default(instance, name)``, any other default is deep
        copied so instances never share it.

        :raises MissingAttributeError: If an attribute this class marks present
            is missing or None.
        :raises CoercionError: If a provided value cannot be coerced.
        """
        self.__dict__["_attributes"] = {}
        provided = dict(values or {}, **kwargs)
        cls = type(self)

        for name in cls.present_attributes():
            if provided.get(name) is None:
                raise MissingAttributeError(name)

        defaults = cls.default_values()
        for name, default in defaults.items():
            if name in provided:
                setattr(self, name, provided[name])
            else:
                self._apply_default(name, default)

        ignored = [key for key in provided if key not in defaults]
        if ignored:
            logger.debug("Ignoring unknown attributes for %s: %s", cls.__name__, ignored)

    def _apply_default(self, name: str, default: Any) -> None:
        if callable(default) and not isinstance(default, type):
            value = default(self, name)
        else:
            value = copy.deepcopy(default)
        # None means "no value"; it is stored without coercion.
        if value is None:
            store_value(self, name, None)
        else:
            setattr(self, name, value)

    @property
    def attribute_values(self) -> Dict[str, Any]:
        """A copy of the name -> value map for this instance."""
        return dict(self._attributes)

    def assign_attributes(self, values: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> None:
        """Assign several attributes through their setters. Unknown names are ignored."""
        known = set(type(self).attributes())
        for name, value in dict(values or {}, **kwargs).items():
            if name in known:
                setattr(self, name, value)
            else:
                logger.debug("Ignoring unknown attribute %s for %s", name, type(self).__name__)

    def reset_attribute(self, name: str) -> None:
        """
        Re-apply the effective default for ``name``.

        :raises UnknownAttributeError: If the class has no such attribute.
        """
        defaults = type(self).default_values()
        if name not in defaults:
            raise UnknownAttributeError(f"{type(self).__name__} has no attribute {name!r}")
        self._apply_default(name, defaults[name])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValueObject):
            return NotImplemented
        return type(self) is type(other) and self._attributes == other._attributes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self._attributes.items())
        return f"{type(self).__name__}({fields})"


ValueObject.__attribute_registry__ = ClassRegistry(ValueObject)

RESERVED_NAMES = frozenset(
    {name for name in vars(ValueObject) if not (name.startswith("__") and name.endswith("__"))} | {"_attributes"}
)
