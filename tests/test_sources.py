"""Tests for constant and billow sources."""
from __future__ import annotations

import dataclasses
import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from dynnoise import (
    MAX_OCTAVE,
    Billow,
    Constant,
    InvalidParameterError,
    Quality,
    gradient_coherent_noise3,
)

SAMPLE_POINTS = [
    (0.0, 0.0, 0.0),
    (0.5, -1.25, 3.75),
    (-12.3, 4.56, 0.001),
    (101.7, -55.5, 23.9),
    (1e6, -1e6, 2.5),
]


@pytest.mark.parametrize("point", SAMPLE_POINTS)
def test_constant_ignores_the_point(point) -> None:
    assert Constant(3.25).evaluate(*point) == 3.25
    assert Constant(-7.0)[point] == -7.0


def test_constant_is_immutable() -> None:
    field = Constant(1.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        field.value = 2.0  # type: ignore[misc]


def test_constant_stores_a_float() -> None:
    field = Constant(25)
    assert field.value == 25.0
    assert isinstance(field.evaluate(0.0, 0.0, 0.0), float)
    assert field == Constant(25.0)


def test_constant_rejects_non_numeric_values() -> None:
    with pytest.raises(InvalidParameterError):
        Constant(True)
    with pytest.raises(InvalidParameterError):
        Constant("1.0")  # type: ignore[arg-type]


def test_billow_defaults() -> None:
    billow = Billow()
    assert billow.frequency == 1.0
    assert billow.lacunarity == 2.0
    assert billow.persistence == 0.5
    assert billow.seed == 0
    assert billow.octave_count == 6
    assert billow.quality is Quality.STANDARD
    assert billow.max_octave == MAX_OCTAVE == 30


def test_billow_on_lattice_sums_folded_troughs() -> None:
    # //1.- Integer points stay on the lattice for every octave, so each raw sample is zero
    # //    and every folded signal is -1.
    billow = Billow()
    expected = -(1.0 + 0.5 + 0.25 + 0.125 + 0.0625 + 0.03125) + 0.5
    assert billow.evaluate(0.0, 0.0, 0.0) == expected
    assert billow.evaluate(3.0, -2.0, 5.0) == expected


def test_billow_single_octave_matches_kernel() -> None:
    billow = Billow(frequency=0.8, seed=11, octave_count=1, quality=Quality.BEST)
    x, y, z = 1.3, -0.4, 2.2
    raw = gradient_coherent_noise3(x * 0.8, y * 0.8, z * 0.8, 11, Quality.BEST)
    assert billow.evaluate(x, y, z) == pytest.approx(2.0 * abs(raw) - 1.0 + 0.5)


def test_billow_two_octaves_follow_lacunarity_and_persistence() -> None:
    billow = Billow(frequency=1.5, lacunarity=3.0, persistence=0.25, seed=4, octave_count=2)
    x, y, z = 0.31, 0.77, -1.9
    first = gradient_coherent_noise3(x * 1.5, y * 1.5, z * 1.5, 4, Quality.STANDARD)
    second = gradient_coherent_noise3(x * 4.5, y * 4.5, z * 4.5, 5, Quality.STANDARD)
    expected = (2.0 * abs(first) - 1.0) + (2.0 * abs(second) - 1.0) * 0.25 + 0.5
    assert billow.evaluate(x, y, z) == pytest.approx(expected)


def test_billow_is_deterministic() -> None:
    a = Billow(frequency=0.7, seed=1234, octave_count=8)
    b = Billow(frequency=0.7, seed=1234, octave_count=8)
    for point in SAMPLE_POINTS:
        assert a.evaluate(*point) == b.evaluate(*point)


def test_billow_seed_changes_output() -> None:
    a = Billow(seed=1)
    b = Billow(seed=2)
    assert any(a.evaluate(*point) != b.evaluate(*point) for point in SAMPLE_POINTS)


def test_billow_clamps_huge_coordinates() -> None:
    billow = Billow(octave_count=30)
    value = billow.evaluate(1e300, -1e300, math.inf)
    assert math.isfinite(value)


def test_billow_propagates_nan() -> None:
    assert math.isnan(Billow().evaluate(math.nan, 0.0, 0.0))


@pytest.mark.parametrize("count", [0, 31, -1, 100])
def test_set_octave_count_rejects_out_of_range(count: int) -> None:
    with pytest.raises(InvalidParameterError):
        Billow().set_octave_count(count)


@pytest.mark.parametrize("count", range(1, 31))
def test_set_octave_count_accepts_valid_range(count: int) -> None:
    assert Billow().set_octave_count(count).octave_count == count


def test_set_octave_count_returns_configured_copy() -> None:
    original = Billow(seed=3)
    configured = original.set_octave_count(2).set_octave_count(9)
    assert configured.octave_count == 9
    assert configured.seed == 3
    assert original.octave_count == 6


def test_set_octave_count_logs_rejection(caplog) -> None:
    with caplog.at_level("WARNING", logger="dynnoise.config"):
        with pytest.raises(InvalidParameterError):
            Billow().set_octave_count(0)
    assert "octave count" in caplog.text


def test_billow_rejects_invalid_octaves_at_construction() -> None:
    with pytest.raises(InvalidParameterError):
        Billow(octave_count=0)
    with pytest.raises(InvalidParameterError):
        Billow(octave_count=2.5)  # type: ignore[arg-type]


def test_billow_rejects_invalid_seeds_at_construction() -> None:
    with pytest.raises(InvalidParameterError) as excinfo:
        Billow(seed=1.5)  # type: ignore[arg-type]
    assert excinfo.value.name == "seed"
    with pytest.raises(InvalidParameterError):
        Billow(seed=True)
    with pytest.raises(InvalidParameterError):
        Billow().with_settings(seed="3")


def test_billow_accepts_quality_names() -> None:
    assert Billow(quality="best").quality is Quality.BEST  # type: ignore[arg-type]
    with pytest.raises(InvalidParameterError):
        Billow(quality="ultra")  # type: ignore[arg-type]


def test_with_settings_revalidates() -> None:
    billow = Billow().with_settings(frequency=2.0, seed=99)
    assert billow.frequency == 2.0 and billow.seed == 99
    with pytest.raises(InvalidParameterError):
        billow.with_settings(octave_count=31)


def test_billow_can_be_sampled_from_many_threads() -> None:
    billow = Billow(seed=21, octave_count=5)
    points = [(i * 0.37, -i * 0.11, i * 0.05) for i in range(64)]
    expected = [billow.evaluate(*point) for point in points]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda point: billow.evaluate(*point), points))
    assert results == expected
