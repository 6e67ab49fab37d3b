# shallow_attrs/types/gateway.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from shallow_attrs.core.declaration import matches_type
from shallow_attrs.core.errors import CoercionError
from shallow_attrs.core.options import CoercionOptions
from shallow_attrs.interfaces.protocols import CoercionGatewayProtocol
from shallow_attrs.types.coercers import DEFAULT_COERCERS, Coercer
from shallow_attrs.types.kinds import TargetKind, resolve_target

logger = logging.getLogger(__name__)


class CoercionGateway:
    """
    Converts arbitrary input values to a declared attribute type.

    The declared type is resolved to a TargetKind and the matching coercer is
    run. ``allow_nil`` lets ``None`` through unchanged; without it ``None``
    is a coercion failure.
    """

    def __init__(self, coercers: Optional[Dict[TargetKind, Coercer]] = None) -> None:
        """
        :param coercers: Replacement algorithms for some or all target kinds.
        """
        self._coercers: Dict[TargetKind, Coercer] = dict(DEFAULT_COERCERS)
        if coercers:
            self._coercers.update(coercers)

    def coerce(self, declared_type: Any, value: Any, options: Optional[CoercionOptions] = None) -> Any:
        """
        Convert ``value`` to ``declared_type``.

        :param declared_type: The type given in the attribute declaration.
        :param value: The raw input value.
        :param options: Element type, nil tolerance and type-specific options.
        :raises CoercionError: If the value cannot be converted.
        """
        options = options if options is not None else CoercionOptions()

        if value is None:
            if options.allow_nil:
                return None
            raise CoercionError(f"Cannot coerce None to {declared_type!r}", target=declared_type, value=None)

        target = resolve_target(declared_type)
        if target.kind is not TargetKind.SEQUENCE and matches_type(value, target.python_type):
            return value

        logger.debug("Coercing %r to %s", value, target.kind.name)
        try:
            return self._coercers[target.kind](value, target, options, self)
        except CoercionError as exc:
            logger.debug("Coercion to %s failed: %s", target.kind.name, exc)
            raise


_default_gateway: CoercionGatewayProtocol = CoercionGateway()


def get_default_gateway() -> CoercionGatewayProtocol:
    return _default_gateway


def set_default_gateway(gateway: Optional[CoercionGatewayProtocol]) -> None:
    """
    Replace the process-wide gateway. Passing None restores a stock CoercionGateway.

    :raises TypeError: If ``gateway`` has no ``coerce`` method.
    """
    global _default_gateway
    if gateway is None:
        gateway = CoercionGateway()
    elif not isinstance(gateway, CoercionGatewayProtocol):
        raise TypeError(f"{gateway!r} does not implement coerce(type, value, options)")
    _default_gateway = gateway


def gateway_for(cls: type) -> CoercionGatewayProtocol:
    """The gateway configured on ``cls`` through ``__coercion_gateway__``, else the default."""
    gateway = getattr(cls, "__coercion_gateway__", None)
    return gateway if gateway is not None else _default_gateway
