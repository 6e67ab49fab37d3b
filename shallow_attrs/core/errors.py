# shallow_attrs/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Optional


class ShallowAttrsError(Exception):
    """
    Base exception class for errors raised by the shallow_attrs library.
    """


class CoercionError(ShallowAttrsError, ValueError):
    """
    Raised when a value cannot be converted to an attribute's declared type.
    """

    def __init__(self, message: str = "", target: Optional[type] = None, value: Any = None) -> None:
        super().__init__(message)
        self.target = target
        self.value = value


class MissingAttributeError(ShallowAttrsError):
    """
    Raised when a value object is built without an attribute its class marks present.
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(f'Mandatory attribute "{name}" was not provided' if name else "")
        self.name = name


class UnknownAttributeError(ShallowAttrsError, AttributeError):
    """
    Raised when an operation names an attribute the class never declared.
    """
