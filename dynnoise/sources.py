"""Leaf fields: constants and fractal coherent noise."""
from __future__ import annotations

import dataclasses
import logging
import numbers
from dataclasses import dataclass
from typing import Any

from .config import MAX_OCTAVE, BillowSettings, validate_octave_count, validate_seed
from .errors import InvalidParameterError
from .field import SourceField
from .noise import Quality, gradient_coherent_noise3
from .vector import Point3

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Constant(SourceField):
    """A field returning ``value`` everywhere."""

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Real):
            raise InvalidParameterError("value", self.value, "must be a real number")
        object.__setattr__(self, "value", float(self.value))

    def evaluate(self, x: float, y: float, z: float) -> float:
        return self.value


@dataclass(frozen=True)
class Billow(SourceField):
    """Fractal noise built from folded coherent-noise octaves.

    Each octave samples the kernel with ``seed + i``, folds the raw sample
    with ``2 * |s| - 1`` so valleys turn into rounded ridges, and adds it
    weighted by ``persistence ** i``. The frequency grows by ``lacunarity``
    between octaves. The final sum is shifted up by ``0.5``.
    """

    frequency: float = 1.0
    lacunarity: float = 2.0
    persistence: float = 0.5
    seed: int = 0
    octave_count: int = 6
    quality: Quality = Quality.STANDARD

    max_octave = MAX_OCTAVE

    def __post_init__(self) -> None:
        validate_octave_count(self.octave_count)
        validate_seed(self.seed)
        object.__setattr__(self, "quality", Quality.parse(self.quality))

    @classmethod
    def from_settings(cls, settings: BillowSettings) -> "Billow":
        return cls(
            frequency=settings.frequency,
            lacunarity=settings.lacunarity,
            persistence=settings.persistence,
            seed=settings.seed,
            octave_count=settings.octave_count,
            quality=settings.quality,
        )

    def settings(self) -> BillowSettings:
        return BillowSettings(
            frequency=self.frequency,
            lacunarity=self.lacunarity,
            persistence=self.persistence,
            seed=self.seed,
            octave_count=self.octave_count,
            quality=self.quality,
        )

    def with_settings(self, **changes: Any) -> "Billow":
        """Return a copy with ``changes`` applied; validation runs again."""

        return dataclasses.replace(self, **changes)

    def set_octave_count(self, n: int) -> "Billow":
        """Return a copy using ``n`` octaves.

        Raises :class:`~dynnoise.errors.InvalidParameterError` when ``n`` is
        outside ``[1, 30]``. The receiver is left untouched, so a source
        already shared with other threads never changes under them.
        """

        validate_octave_count(n)
        LOGGER.debug("Billow seed=%d octave count %d -> %d", self.seed, self.octave_count, n)
        return dataclasses.replace(self, octave_count=n)

    def evaluate(self, x: float, y: float, z: float) -> float:
        point = Point3(x, y, z) * self.frequency
        value = 0.0
        current_persistence = 1.0
        for octave in range(self.octave_count):
            clamped = point.clamped()
            signal = gradient_coherent_noise3(
                clamped.x, clamped.y, clamped.z, self.seed + octave, self.quality
            )
            signal = 2.0 * abs(signal) - 1.0
            value += signal * current_persistence
            point = point * self.lacunarity
            current_persistence *= self.persistence
        return value + 0.5
