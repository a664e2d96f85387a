"""Shared fixtures: a controllable clock and an in-memory sink."""

import io

import pytest

from progress_reporter.reporter import ProgressReporter


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Create fake clock starting at 0."""
    return FakeClock()


@pytest.fixture
def sink():
    """Create in-memory output stream."""
    return io.StringIO()


@pytest.fixture
def make_reporter(clock, sink):
    """Create reporters writing to the sink as if it were a terminal."""
    def factory(total: int, description: str = "", console: bool = True) -> ProgressReporter:
        return ProgressReporter(
            total,
            description,
            stream=sink,
            clock=clock,
            console_check=lambda: console,
        )

    return factory

