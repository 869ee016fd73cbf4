"""Deterministic clock for lifecycle and route tests."""
from datetime import datetime, timedelta

import pytest

from tests.consts import NOW


class TickingClock:
    """Returns `start`, then advances by `step` on every call."""

    def __init__(self, start: datetime = NOW, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current += self.step
        return now


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()
