"""The field capability shared by every node, plus the chaining surface.

A field is a scalar function of 3D position. Nodes are frozen dataclasses
that own their children, so a tree is immutable once built and two trees
with the same shape and parameters compare equal. Builder methods accept
three kinds of operand:

- another :class:`Field`, used as-is;
- a zero-argument factory returning a field, called immediately;
- an ``int`` or ``float`` literal, wrapped in a ``Constant``.

Example::

    field = Constant(25).max(lambda: Constant(15).add(3).multiply(3).subtract(20)).subtract(5)
    field.evaluate(0.0, 0.0, 0.0)  # 29.0
"""
from __future__ import annotations

import dataclasses
import numbers
from abc import ABC, abstractmethod
from typing import Callable, Tuple, Union

from .vector import Point3, to_cartesian

Operand = Union["Field", float, int, Callable[[], "Field"]]


class Field(ABC):
    """Anything that can be sampled at a 3D point."""

    @abstractmethod
    def evaluate(self, x: float, y: float, z: float) -> float:
        """Return the field value at ``(x, y, z)``.

        Raises a :class:`~dynnoise.errors.FieldError` when the node (or one
        of its children) cannot produce a value.
        """

    def __getitem__(self, point: Tuple[float, float, float]) -> float:
        x, y, z = point
        return self.evaluate(x, y, z)

    def evaluate_point(self, point: Point3) -> float:
        return self.evaluate(point.x, point.y, point.z)

    def evaluate_spherical(self, lat: float, lon: float) -> float:
        """Sample the field on the unit sphere, angles in degrees."""

        return self.evaluate_point(to_cartesian(lat, lon))

    # -- Combinators ------------------------------------------------------

    def add(self, other: Operand) -> "Field":
        return combiners.Add(self, as_field(other))

    def subtract(self, other: Operand) -> "Field":
        return combiners.Subtract(self, as_field(other))

    def multiply(self, other: Operand) -> "Field":
        return combiners.Multiply(self, as_field(other))

    def min(self, other: Operand) -> "Field":
        """Pointwise minimum of this field and ``other``."""

        return combiners.Min(self, as_field(other))

    def max(self, other: Operand) -> "Field":
        """Pointwise maximum of this field and ``other``."""

        return combiners.Max(self, as_field(other))

    def pow(self, exponent: Operand) -> "Field":
        """Power-remap this field: ``|(v + 1) / 2| ** e * 2 - 1``."""

        return modifiers.Exp(self, as_field(exponent))

    def abs(self) -> "Field":
        return modifiers.Abs(self)

    absolute_value = abs

    def blend(
        self,
        first: Operand = None,
        second: Operand = None,
        *,
        control: Operand = None,
    ) -> "Field":
        """Interpolate between two fields.

        ``blend(a, b)`` uses this field as the control signal. With
        ``control`` given, this field fills whichever of ``first`` or
        ``second`` was left out.
        """

        if control is None:
            if first is None or second is None:
                raise TypeError("blend() needs both first and second when no control is given")
            return combiners.Blend(self, as_field(first), as_field(second))
        if first is not None and second is None:
            return combiners.Blend(as_field(control), as_field(first), self)
        if second is not None and first is None:
            return combiners.Blend(as_field(control), self, as_field(second))
        raise TypeError("blend() with control takes exactly one of first or second")

    def clamp(
        self,
        lower: Union[Operand, Tuple[float, float]] = None,
        upper: Operand = None,
        *,
        value: Operand = None,
    ) -> "Field":
        """Clamp a field into the range given by two bound fields.

        ``clamp(lo, hi)`` or ``clamp((lo, hi))`` clamps this field. With
        ``value`` given, this field becomes whichever bound was left out.
        """

        if value is None:
            if upper is None and isinstance(lower, tuple):
                if len(lower) != 2:
                    raise TypeError("clamp() bounds must be a (lower, upper) pair")
                lower, upper = lower
            if lower is None or upper is None:
                raise TypeError("clamp() needs both lower and upper bounds")
            return combiners.Clamped(self, as_field(lower), as_field(upper))
        if lower is not None and upper is None:
            return combiners.Clamped(as_field(value), as_field(lower), self)
        if upper is not None and lower is None:
            return combiners.Clamped(as_field(value), self, as_field(upper))
        raise TypeError("clamp() with value takes exactly one of lower or upper")

    def displace(self, dx: Operand, dy: Operand, dz: Operand) -> "Field":
        """Sample this field at the coordinates produced by ``dx``, ``dy``, ``dz``."""

        return combiners.Displace(self, as_field(dx), as_field(dy), as_field(dz))

    # -- Operators --------------------------------------------------------

    def __add__(self, other: Operand) -> "Field":
        return self.add(other)

    def __radd__(self, other: Operand) -> "Field":
        return combiners.Add(as_field(other), self)

    def __sub__(self, other: Operand) -> "Field":
        return self.subtract(other)

    def __rsub__(self, other: Operand) -> "Field":
        return combiners.Subtract(as_field(other), self)

    def __mul__(self, other: Operand) -> "Field":
        return self.multiply(other)

    def __rmul__(self, other: Operand) -> "Field":
        return combiners.Multiply(as_field(other), self)

    def __neg__(self) -> "Field":
        return self.multiply(-1.0)

    def __abs__(self) -> "Field":
        return self.abs()


class SourceField(Field):
    """A leaf field that depends on nothing but the point."""


class CompositeField(Field):
    """A field whose dataclass attributes are all child fields, in order."""

    arity = 0

    @property
    def children(self) -> Tuple[Field, ...]:
        return tuple(getattr(self, item.name) for item in dataclasses.fields(self))


class ModifierField(CompositeField):
    """A field transforming the output of a single child."""

    arity = 1


class Combine2Field(CompositeField):
    arity = 2


class Combine3Field(CompositeField):
    arity = 3


class Combine4Field(CompositeField):
    arity = 4


def as_field(operand: Operand) -> Field:
    """Coerce a builder operand into a field.

    Factories are invoked once, right away. ``bool`` is rejected even
    though it is an ``int`` subclass.
    """

    if isinstance(operand, Field):
        return operand
    if isinstance(operand, numbers.Real) and not isinstance(operand, bool):
        return sources.Constant(float(operand))
    if callable(operand):
        built = operand()
        if not isinstance(built, Field):
            raise TypeError(f"field factory returned {type(built).__name__}, expected a Field")
        return built
    raise TypeError(f"cannot use {type(operand).__name__} as a field operand")


# Node modules subclass Field, so they load once it is defined.
from . import combiners, modifiers, sources  # noqa: E402
