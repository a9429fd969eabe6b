"""Exceptions raised while configuring or sampling fields."""
from __future__ import annotations


class FieldError(Exception):
    """Base class for every failure raised by a field."""


class InvalidParameterError(FieldError, ValueError):
    """A configuration value falls outside its accepted domain."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        super().__init__(f"invalid {name}={value!r}: {reason}")
        self.name = name
        self.value = value


class InvertedBoundsError(FieldError, ValueError):
    """A clamp was evaluated with its lower bound above its upper bound."""

    def __init__(self, lower: float, upper: float) -> None:
        super().__init__(f"lower bound {lower!r} exceeds upper bound {upper!r}")
        self.lower = lower
        self.upper = upper
