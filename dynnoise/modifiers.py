"""Fields that reshape the output of a base field."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .field import Combine2Field, Field, ModifierField


def _ieee_pow(base: float, exponent: float) -> float:
    # base is non-negative here, so both failures mean +inf.
    try:
        return base ** exponent
    except (ZeroDivisionError, OverflowError):
        return math.inf


@dataclass(frozen=True)
class Abs(ModifierField):
    """Absolute value of ``source``."""

    source: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        return abs(self.source.evaluate(x, y, z))


@dataclass(frozen=True)
class Exp(Combine2Field):
    """Power curve applied to a signal nominally in ``[-1, 1]``.

    The base value is remapped to ``[0, 1]``, raised to the exponent
    field's value, and mapped back. Exponents above one push the signal
    towards its troughs, exponents below one towards its peaks. A zero
    base with a negative exponent gives ``inf`` rather than an error.
    """

    base: Field
    exponent: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = self.base.evaluate(x, y, z)
        exponent = self.exponent.evaluate(x, y, z)
        return _ieee_pow(abs((value + 1.0) / 2.0), exponent) * 2.0 - 1.0
