"""Fields combining the outputs of two, three or four children.

Children are always evaluated left to right at the query point. An
exception raised by a child propagates untouched and the remaining
children are not evaluated.
"""
from __future__ import annotations

from dataclasses import dataclass

from .errors import InvertedBoundsError
from .field import Combine2Field, Combine3Field, Combine4Field, Field
from .noise import linear_interp


# -- Arithmetic -----------------------------------------------------------

@dataclass(frozen=True)
class Add(Combine2Field):
    first: Field
    second: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.first.evaluate(x, y, z) + self.second.evaluate(x, y, z)


@dataclass(frozen=True)
class Subtract(Combine2Field):
    first: Field
    second: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.first.evaluate(x, y, z) - self.second.evaluate(x, y, z)


@dataclass(frozen=True)
class Multiply(Combine2Field):
    first: Field
    second: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.first.evaluate(x, y, z) * self.second.evaluate(x, y, z)


@dataclass(frozen=True)
class Min(Combine2Field):
    """Pointwise minimum.

    Follows Python's ``min``: the second value only wins when it compares
    strictly less, so a NaN from ``first`` propagates while a NaN from
    ``second`` is ignored.
    """

    first: Field
    second: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        return min(self.first.evaluate(x, y, z), self.second.evaluate(x, y, z))


@dataclass(frozen=True)
class Max(Combine2Field):
    """Pointwise maximum, with the same NaN asymmetry as :class:`Min`."""

    first: Field
    second: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        return max(self.first.evaluate(x, y, z), self.second.evaluate(x, y, z))


# -- Selection ------------------------------------------------------------

@dataclass(frozen=True)
class Blend(Combine3Field):
    """Linear interpolation between ``first`` and ``second``.

    ``control`` is mapped from ``[-1, 1]`` to a weight in ``[0, 1]``: a
    control of -1 yields ``first`` and +1 yields ``second``. The weight is
    not clamped, so control values outside that range extrapolate.

    The weight is ``(control + 1) / 2``, centred on zero: a control of 0
    gives the midpoint. A ``(control - 1) / 2`` weight would instead put
    ``first`` at +1 and extrapolate away from ``second`` below that.
    """

    control: Field
    first: Field
    second: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        control = self.control.evaluate(x, y, z)
        first = self.first.evaluate(x, y, z)
        second = self.second.evaluate(x, y, z)
        return linear_interp(first, second, (control + 1.0) / 2.0)


@dataclass(frozen=True)
class Clamped(Combine3Field):
    """Clamp ``value`` into the closed range ``[lower, upper]``.

    Both bounds are fields sampled at the same point. A lower bound above
    the upper bound raises :class:`~dynnoise.errors.InvertedBoundsError`.
    """

    value: Field
    lower: Field
    upper: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        value = self.value.evaluate(x, y, z)
        lower = self.lower.evaluate(x, y, z)
        upper = self.upper.evaluate(x, y, z)
        if lower > upper:
            raise InvertedBoundsError(lower, upper)
        if value < lower:
            return lower
        if value > upper:
            return upper
        return value


# -- Warping --------------------------------------------------------------

@dataclass(frozen=True)
class Displace(Combine4Field):
    """Sample ``base`` at coordinates produced by three other fields.

    ``dx``, ``dy`` and ``dz`` are sampled at the query point and their
    values replace the x, y and z coordinates outright; they are not
    offsets added to the original point.
    """

    base: Field
    dx: Field
    dy: Field
    dz: Field

    def evaluate(self, x: float, y: float, z: float) -> float:
        new_x = self.dx.evaluate(x, y, z)
        new_y = self.dy.evaluate(x, y, z)
        new_z = self.dz.evaluate(x, y, z)
        return self.base.evaluate(new_x, new_y, new_z)
