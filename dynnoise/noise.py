"""Deterministic coherent gradient noise used by the fractal sources."""
from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Dict, Tuple, Union

import numpy as np

from .errors import InvalidParameterError

_TABLE_SIZE = 256
_TABLE_SEED = 0x5EED
# Stretches the lattice response so most samples fall in [-1, 1]; peaks reach about 1.4.
_GRADIENT_SCALE = 2.12


class Quality(Enum):
    """Interpolation fidelity of the coherent-noise kernel."""

    FAST = "fast"
    STANDARD = "standard"
    BEST = "best"

    @classmethod
    def parse(cls, value: Union["Quality", str]) -> "Quality":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidParameterError(
                "quality", value, "expected one of fast, standard, best"
            ) from None


# -- Interpolation helpers ------------------------------------------------

def linear_interp(n0: float, n1: float, a: float) -> float:
    """Blend ``n0`` towards ``n1`` by ``a``; ``a`` is not clamped."""

    return (1.0 - a) * n0 + a * n1


def s_curve3(a: float) -> float:
    return a * a * (3.0 - 2.0 * a)


def s_curve5(a: float) -> float:
    a3 = a * a * a
    return a3 * (a * (a * 6.0 - 15.0) + 10.0)


def _linear_curve(a: float) -> float:
    return a


_CURVES: Dict[Quality, Callable[[float], float]] = {
    Quality.FAST: _linear_curve,
    Quality.STANDARD: s_curve3,
    Quality.BEST: s_curve5,
}


# -- Hash helpers ---------------------------------------------------------

def _build_gradient_table(size: int, seed: int) -> Tuple[Tuple[float, float, float], ...]:
    rng = np.random.default_rng(seed)
    # Uniform height and azimuth give directions uniformly spread over the sphere.
    heights = rng.random(size) * 2.0 - 1.0
    angles = rng.random(size) * 2.0 * np.pi
    radii = np.sqrt(1.0 - heights * heights)
    table = np.stack([radii * np.cos(angles), radii * np.sin(angles), heights], axis=-1)
    return tuple((float(gx), float(gy), float(gz)) for gx, gy, gz in table.tolist())


_GRADIENTS = _build_gradient_table(_TABLE_SIZE, _TABLE_SEED)


def _hash3(seed: int, x: int, y: int, z: int) -> int:
    value = seed ^ (x * 374761393) ^ (y * 668265263) ^ (z * 2147483647)
    value = (value ^ (value >> 13)) * 1274126177
    value = value ^ (value >> 16)
    return value & 0xFFFFFFFF


def _corner(x: float, y: float, z: float, ix: int, iy: int, iz: int, seed: int) -> float:
    gx, gy, gz = _GRADIENTS[_hash3(seed, ix, iy, iz) & (_TABLE_SIZE - 1)]
    return (gx * (x - ix) + gy * (y - iy) + gz * (z - iz)) * _GRADIENT_SCALE


# -- Noise evaluators -----------------------------------------------------

def gradient_coherent_noise3(
    x: float,
    y: float,
    z: float,
    seed: int = 0,
    quality: Quality = Quality.STANDARD,
) -> float:
    """Gradient noise at ``(x, y, z)``.

    Most samples fall in ``[-1, 1]``; rare peaks reach roughly ``±1.4``, so
    callers needing a hard range should clamp.

    The value is zero on every integer lattice point and varies smoothly
    in between; ``quality`` picks the curve used to weight the eight
    surrounding corners. Coordinates are expected to fit a signed 32-bit
    integer once floored; non-finite coordinates yield NaN.
    """

    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(z)):
        return math.nan

    x0 = math.floor(x)
    y0 = math.floor(y)
    z0 = math.floor(z)
    x1 = x0 + 1
    y1 = y0 + 1
    z1 = z0 + 1

    curve = _CURVES[quality]
    xs = curve(x - x0)
    ys = curve(y - y0)
    zs = curve(z - z0)

    ix0 = linear_interp(_corner(x, y, z, x0, y0, z0, seed), _corner(x, y, z, x1, y0, z0, seed), xs)
    ix1 = linear_interp(_corner(x, y, z, x0, y1, z0, seed), _corner(x, y, z, x1, y1, z0, seed), xs)
    iy0 = linear_interp(ix0, ix1, ys)
    ix0 = linear_interp(_corner(x, y, z, x0, y0, z1, seed), _corner(x, y, z, x1, y0, z1, seed), xs)
    ix1 = linear_interp(_corner(x, y, z, x0, y1, z1, seed), _corner(x, y, z, x1, y1, z1, seed), xs)
    iy1 = linear_interp(ix0, ix1, ys)
    return linear_interp(iy0, iy1, zs)
