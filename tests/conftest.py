"""Pytest configuration for dynnoise tests."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, List, Tuple

import pytest

# //1.- Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dynnoise import Field, FieldError  # noqa: E402

CallLog = List[Tuple[str, Tuple[float, float, float]]]


class RecordingField(Field):
    """Returns a fixed value and records every point it is sampled at."""

    def __init__(self, value: float, log: CallLog, name: str) -> None:
        self.value = value
        self.log = log
        self.name = name

    def evaluate(self, x: float, y: float, z: float) -> float:
        self.log.append((self.name, (x, y, z)))
        return self.value


class FailingField(Field):
    """Records the sample, then raises the error it was built with."""

    def __init__(self, error: FieldError, log: CallLog, name: str) -> None:
        self.error = error
        self.log = log
        self.name = name

    def evaluate(self, x: float, y: float, z: float) -> float:
        self.log.append((self.name, (x, y, z)))
        raise self.error


@pytest.fixture
def call_log() -> CallLog:
    return []


@pytest.fixture
def recording(call_log: CallLog) -> Callable[[str, float], Field]:
    # //2.- Factory building named fields that share the test's call log.
    def build(name: str, value: float) -> Field:
        return RecordingField(value, call_log, name)

    return build


@pytest.fixture
def failing(call_log: CallLog) -> Callable[[str, FieldError], Field]:
    def build(name: str, error: FieldError) -> Field:
        return FailingField(error, call_log, name)

    return build
