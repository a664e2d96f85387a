"""Windowed throughput measurement."""

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)

RATE_WINDOW_SECONDS = 30.0
RATE_PRECISION = 3


@dataclass
class RateWindow:
    """
    Units completed since `start`, and the rate derived from them.

    Once the window is older than RATE_WINDOW_SECONDS it is restarted, so
    the rate follows recent throughput instead of the whole-run average.
    The reset happens before the rate is computed: the first reading after
    a long gap is taken over an empty window and reads 0.
    """

    start: float
    count: int = 0
    rate: float = 0.0
    resets: int = 0

    def add(self, units: int = 1) -> None:
        self.count += units

    def elapsed(self, now: float) -> float:
        return now - self.start

    def update(self, now: float) -> float:
        """Recompute the rate at time `now`, restarting a stale window."""
        elapsed = self.elapsed(now)

        if elapsed > RATE_WINDOW_SECONDS:
            logger.debug(
                "Rate window expired after %.1fs with %d units, restarting", elapsed, self.count
            )
            self.start = now
            self.count = 0
            self.resets += 1
            elapsed = 0.0

        self.rate = round(self.count / elapsed, RATE_PRECISION) if elapsed > 0 else 0.0
        return self.rate
