"""
Types package: coercion targets and the coercion gateway.

Architecture:
- Declared Python types map to a closed set of target kinds
- One coercer per kind performs the conversion
- The gateway dispatches on the kind and handles None
"""

from .kinds import Symbol, TargetKind, TargetType, resolve_target
from .gateway import CoercionGateway, get_default_gateway, set_default_gateway

__all__ = [
    "Symbol",
    "TargetKind",
    "TargetType",
    "resolve_target",
    "CoercionGateway",
    "get_default_gateway",
    "set_default_gateway",
]
