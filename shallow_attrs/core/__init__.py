"""
Core package: attribute declarations, class registries and accessors.

Architecture:
- A declaration is recorded in the owning class's registry
- The registry links to the nearest ancestor registry
- Effective defaults are merged on demand, never stored
- Each declaration installs one data descriptor on the class

Cross-cutting:
- Errors raised by the coercion gateway propagate unchanged
- Declarations are logged at DEBUG level
"""

# Import order matters to avoid circular dependencies
from .errors import CoercionError, MissingAttributeError, ShallowAttrsError, UnknownAttributeError
from .options import MISSING, AttributeOptions, CoercionOptions
from .declaration import AttributeDeclaration
from .registry import ClassRegistry
from .value_object import RESERVED_NAMES, Attr, ValueObject

__all__ = [
    # Errors
    "ShallowAttrsError",
    "CoercionError",
    "MissingAttributeError",
    "UnknownAttributeError",
    # Declarations
    "MISSING",
    "AttributeOptions",
    "CoercionOptions",
    "AttributeDeclaration",
    "ClassRegistry",
    # Value objects
    "RESERVED_NAMES",
    "Attr",
    "ValueObject",
]
