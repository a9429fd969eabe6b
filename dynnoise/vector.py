"""Small immutable point type used by the noise kernel.

Fields take plain ``x, y, z`` floats on their public surface; the point
type exists so the fractal sources can scale and clamp coordinates as a
unit without juggling three loose variables.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


def clamp_to_32_bits(value: float) -> float:
    """Clamp ``value`` into the range representable by a signed 32-bit int."""

    if value > INT32_MAX:
        return float(INT32_MAX)
    if value < INT32_MIN:
        return float(INT32_MIN)
    return value


@dataclass(frozen=True)
class Point3:
    """Immutable 3D point with the handful of helpers the kernel needs."""

    x: float
    y: float
    z: float

    def __mul__(self, scalar: float) -> "Point3":
        return Point3(self.x * scalar, self.y * scalar, self.z * scalar)

    def clamped(self) -> "Point3":
        """Return the point with every component clamped to 32-bit range."""

        return Point3(clamp_to_32_bits(self.x), clamp_to_32_bits(self.y), clamp_to_32_bits(self.z))


def to_cartesian(lat: float, lon: float) -> Point3:
    """Project a latitude/longitude pair in degrees onto the unit sphere.

    Latitude runs along ``y``; longitude zero points down the ``+x`` axis
    and increases towards ``+z``.
    """

    lat_rad = math.radians(lat)
    lon_rad = math.radians(lon)
    r = math.cos(lat_rad)
    return Point3(r * math.cos(lon_rad), math.sin(lat_rad), r * math.sin(lon_rad))
