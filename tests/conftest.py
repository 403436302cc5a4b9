"""Shared fixtures: every test starts without process-wide singletons."""

from __future__ import annotations

import pytest

from hypersynergy.systems.coordinator import runtime as coordinator_runtime
from hypersynergy.systems.reinforcement import runtime as reinforcement_runtime


@pytest.fixture(autouse=True)
def _reset_singletons(monkeypatch):
    monkeypatch.setattr(coordinator_runtime, "_coordinator", None)
    monkeypatch.setattr(reinforcement_runtime, "_reinforcement", None)
    yield


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
