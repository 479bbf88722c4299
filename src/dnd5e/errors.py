"""Exceptions raised by dnd5e value types and codecs."""

from enum import StrEnum
from typing import Any


class Bound(StrEnum):
    """Which end of a closed range a value fell outside of."""

    LOWER = "lower"
    UPPER = "upper"


class Dnd5eError(ValueError):
    """Base class for all dnd5e errors."""

    pass


class OutOfRangeError(Dnd5eError):
    """Raised when a strict scalar constructor receives a value outside its range."""

    def __init__(self, type_name: str, bound: Bound, message: str) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.bound = bound
        self.message = message


class UnknownNameError(Dnd5eError):
    """Raised when text or a discriminant matches no Ability or Skill."""

    def __init__(self, type_name: str, text: object) -> None:
        super().__init__(f"Unknown {type_name.lower()}: {text!r}")
        self.type_name = type_name
        self.text = text


class MalformedEncodingError(Dnd5eError):
    """Raised when structured data cannot be decoded into a dnd5e value."""

    def __init__(
        self,
        type_name: str,
        message: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(f"Cannot decode {type_name}: {message}")
        self.type_name = type_name
        self.errors = errors or []
