# shallow_attrs/types/coercers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""
Conversion algorithms, one per TargetKind.

Each coercer takes ``(value, target, options, gateway)`` and either returns a
value of the target type or raises CoercionError. ``None`` never reaches a
coercer; the gateway handles it before dispatch.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict

from shallow_attrs.core.declaration import is_sequence_type, matches_type
from shallow_attrs.core.errors import CoercionError, MissingAttributeError
from shallow_attrs.core.options import CoercionOptions
from shallow_attrs.types.kinds import Symbol, TargetKind, TargetType

if TYPE_CHECKING:
    from shallow_attrs.types.gateway import CoercionGateway

Coercer = Callable[[Any, TargetType, CoercionOptions, "CoercionGateway"], Any]

TRUE_VALUES = frozenset({"1", "t", "true", "y", "yes", "on"})
FALSE_VALUES = frozenset({"0", "f", "false", "n", "no", "off"})


def _fail(value: Any, target: TargetType, reason: str = "") -> CoercionError:
    message = f"Cannot coerce {value!r} to {target.python_type.__name__}"
    if reason:
        message = f"{message}: {reason}"
    return CoercionError(message, target=target.python_type, value=value)


def coerce_integer(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> int:
    if isinstance(value, (bool, int, float, Decimal)):
        try:
            return int(value)
        except (OverflowError, ValueError) as exc:
            raise _fail(value, target, str(exc)) from exc
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text, 10)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError as exc:
            raise _fail(value, target) from exc
        if not number.is_integer():
            raise _fail(value, target, "not an integral number")
        return int(number)
    raise _fail(value, target)


def coerce_float(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> float:
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (bool, int, float, Decimal)):
        raise _fail(value, target)
    try:
        number = float(value)
    except (OverflowError, ValueError) as exc:
        raise _fail(value, target, str(exc)) from exc
    if not math.isfinite(number):
        raise _fail(value, target, "not a finite number")
    return number


def coerce_boolean(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> bool:
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_VALUES:
            return True
        if text in FALSE_VALUES:
            return False
    raise _fail(value, target)


def coerce_string(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> str:
    if isinstance(value, (bytes, bytearray)):
        try:
            text = bytes(value).decode(options.get("encoding", "utf-8"))
        except UnicodeDecodeError as exc:
            raise _fail(value, target, str(exc)) from exc
    elif isinstance(value, Enum):
        text = str(value.value)
    else:
        text = str(value)
    if options.get("strip", False):
        text = text.strip()
    return text


def coerce_symbol(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> Symbol:
    if isinstance(value, Enum):
        return Symbol(value.name)
    if isinstance(value, str):
        if not value:
            raise _fail(value, target, "empty symbol")
        return Symbol(value)
    raise _fail(value, target)


def _as_utc(moment: datetime) -> datetime:
    # naive input is read as UTC
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def coerce_datetime(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> datetime:
    """Coerced datetimes are always timezone-aware and in UTC."""
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise _fail(value, target, str(exc)) from exc
    if isinstance(value, str):
        fmt = options.get("format")
        try:
            if fmt:
                return _as_utc(datetime.strptime(value, fmt))
            return _as_utc(datetime.fromisoformat(value.strip()))
        except ValueError as exc:
            raise _fail(value, target, str(exc)) from exc
    raise _fail(value, target)


def coerce_sequence(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> list:
    if isinstance(value, (str, bytes, bytearray, Mapping)) or not isinstance(value, Iterable):
        raise _fail(value, target)

    element_type = options.element_type
    if element_type is None:
        return list(value)

    element_options = options.for_elements()
    result = []
    for element in value:
        if matches_type(element, element_type) and not is_sequence_type(element_type):
            result.append(element)
        else:
            result.append(gateway.coerce(element_type, element, element_options))
    return result


def coerce_mapping(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> dict:
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Iterable):
        raise _fail(value, target)
    try:
        return dict(value)
    except (TypeError, ValueError) as exc:
        raise _fail(value, target, "expected key/value pairs") from exc


def coerce_nested(value: Any, target: TargetType, options: CoercionOptions, gateway: "CoercionGateway") -> Any:
    if isinstance(value, Mapping):
        try:
            return target.python_type(value)
        except MissingAttributeError as exc:
            raise _fail(value, target, str(exc)) from exc
    raise _fail(value, target, "expected a mapping of attributes")


DEFAULT_COERCERS: Dict[TargetKind, Coercer] = {
    TargetKind.INTEGER: coerce_integer,
    TargetKind.FLOAT: coerce_float,
    TargetKind.BOOLEAN: coerce_boolean,
    TargetKind.STRING: coerce_string,
    TargetKind.SYMBOL: coerce_symbol,
    TargetKind.DATETIME: coerce_datetime,
    TargetKind.SEQUENCE: coerce_sequence,
    TargetKind.MAPPING: coerce_mapping,
    TargetKind.NESTED: coerce_nested,
}
