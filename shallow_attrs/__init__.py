"""shallow_attrs: declared, typed attributes for Python value objects

A value-object class declares its attributes once, with a type and options.
Each declaration records a default in the class's registry and installs an
accessor whose setter stores matching values unchanged and coerces the rest.

Example:
    class User(ValueObject):
        name = Attr(str, default="Anton", present=True)
        age = Attr(int, default=0)
        tags = Attr(list, of=Symbol)

    User.attributes()       # ['name', 'age', 'tags']
    User(name="Ben", age="42").age  # 42

Responsibilities:
    - Attribute declaration and per-class registries
    - Inheritance-aware defaults
    - Type coercion on assignment

Cross-cutting Concerns:
    Error Handling:
        - ShallowAttrsError is the base of every library error
        - Coercion failures raise CoercionError from the setter

    Logging:
        - Standard logging under the ``shallow_attrs`` logger
        - DEBUG for declarations and coercion, WARNING for reserved names
        - No handlers are installed
"""

from shallow_attrs.core import (
    MISSING,
    Attr,
    AttributeDeclaration,
    AttributeOptions,
    ClassRegistry,
    CoercionError,
    CoercionOptions,
    MissingAttributeError,
    ShallowAttrsError,
    UnknownAttributeError,
    ValueObject,
)
from shallow_attrs.types import CoercionGateway, Symbol, TargetKind, get_default_gateway, set_default_gateway

__version__ = "0.1.0"

__all__ = [
    "MISSING",
    "Attr",
    "AttributeDeclaration",
    "AttributeOptions",
    "ClassRegistry",
    "CoercionError",
    "CoercionOptions",
    "MissingAttributeError",
    "ShallowAttrsError",
    "UnknownAttributeError",
    "ValueObject",
    "CoercionGateway",
    "Symbol",
    "TargetKind",
    "get_default_gateway",
    "set_default_gateway",
]
