"""Configuration helpers for fractal noise sources."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from .errors import InvalidParameterError
from .noise import Quality

LOGGER = logging.getLogger(__name__)

MIN_OCTAVE = 1
MAX_OCTAVE = 30

_ENV_KEYS = {
    "frequency": "FREQUENCY",
    "lacunarity": "LACUNARITY",
    "persistence": "PERSISTENCE",
    "seed": "SEED",
    "octave_count": "OCTAVE_COUNT",
    "quality": "QUALITY",
}


def validate_octave_count(value: int) -> int:
    """Return ``value`` when it lies in ``[MIN_OCTAVE, MAX_OCTAVE]``."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError("octave_count", value, "must be an integer")
    if not MIN_OCTAVE <= value <= MAX_OCTAVE:
        LOGGER.warning("Rejected octave count %r outside [%d, %d]", value, MIN_OCTAVE, MAX_OCTAVE)
        raise InvalidParameterError(
            "octave_count", value, f"must lie in [{MIN_OCTAVE}, {MAX_OCTAVE}]"
        )
    return value


def validate_seed(value: int) -> int:
    """Return ``value`` when it is a plain integer seed."""

    if isinstance(value, bool) or not isinstance(value, int):
        LOGGER.warning("Rejected non-integer seed %r", value)
        raise InvalidParameterError("seed", value, "must be an integer")
    return value


# //1.- Define dataclass bundling every parameter of a billow source.
@dataclass(frozen=True)
class BillowSettings:
    """Parameters driving a :class:`~dynnoise.sources.Billow` source."""

    frequency: float = 1.0
    lacunarity: float = 2.0
    persistence: float = 0.5
    seed: int = 0
    octave_count: int = 6
    quality: Quality = Quality.STANDARD

    def __post_init__(self) -> None:
        validate_octave_count(self.octave_count)
        validate_seed(self.seed)
        object.__setattr__(self, "quality", Quality.parse(self.quality))

    # //2.- Build settings from a loose mapping, defaulting any missing key.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, Any]] = None) -> "BillowSettings":
        if not payload:
            return cls()
        defaults = cls()
        return cls(
            frequency=_coerce("frequency", payload.get("frequency", defaults.frequency), float),
            lacunarity=_coerce("lacunarity", payload.get("lacunarity", defaults.lacunarity), float),
            persistence=_coerce("persistence", payload.get("persistence", defaults.persistence), float),
            seed=_coerce_int("seed", payload.get("seed", defaults.seed)),
            octave_count=_coerce_int("octave_count", payload.get("octave_count", defaults.octave_count)),
            quality=Quality.parse(payload.get("quality", defaults.quality)),
        )

    # //3.- Allow overriding parameters through environment variables.
    @classmethod
    def from_environment(
        cls,
        prefix: str = "DYNNOISE",
        env: Optional[Mapping[str, str]] = None,
    ) -> "BillowSettings":
        source = env if env is not None else os.environ
        mapping: Dict[str, str] = {}
        for field_name, suffix in _ENV_KEYS.items():
            value = source.get(f"{prefix}_{suffix}")
            if value is not None:
                mapping[field_name] = value
        if mapping:
            LOGGER.debug("Billow settings overridden from environment: %s", sorted(mapping))
        return cls.from_mapping(mapping)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "frequency": self.frequency,
            "lacunarity": self.lacunarity,
            "persistence": self.persistence,
            "seed": self.seed,
            "octave_count": self.octave_count,
            "quality": self.quality.value,
        }


def _coerce(name: str, value: Any, kind: Callable[[Any], Any]) -> Any:
    if isinstance(value, bool):
        raise InvalidParameterError(name, value, "booleans are not numeric settings")
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, value, f"expected {kind.__name__}") from None


def _coerce_int(name: str, value: Any) -> int:
    # Integral floats and integer strings are accepted; fractions are never truncated.
    if isinstance(value, bool):
        raise InvalidParameterError(name, value, "booleans are not numeric settings")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidParameterError(name, value, "expected a whole number")
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidParameterError(name, value, "expected an integer string") from None
    raise InvalidParameterError(name, value, "expected int")


# //4.- Canonical accessor: an explicit mapping wins over the environment.
def load_billow_settings(
    mapping: Optional[Mapping[str, Any]] = None,
    *,
    env_prefix: str = "DYNNOISE",
) -> BillowSettings:
    if mapping is not None:
        return BillowSettings.from_mapping(mapping)
    return BillowSettings.from_environment(prefix=env_prefix)


# //5.- Load settings from a JSON object stored on disk.
def load_billow_settings_file(path: str) -> BillowSettings:
    with open(path, "r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise InvalidParameterError("settings", path, "expected a JSON object")
    LOGGER.debug("Loaded billow settings from %s", path)
    return BillowSettings.from_mapping(payload)
