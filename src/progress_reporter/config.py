"""Reporter configuration."""

from dataclasses import dataclass

from progress_reporter.core.throttle import IntervalPolicy
from progress_reporter.core.throttle import ThrottlePolicy
from progress_reporter.core.throttle import TimeoutPolicy
from progress_reporter.utils.errors import InvalidPolicyError


@dataclass
class ReporterConfig:
    """Throttle and output settings for a ProgressReporter.

    A positive `timeout_ms` selects time-based throttling and wins over
    `interval`; 0 keeps the iteration-based policy.
    """

    interval: int = 1
    timeout_ms: float = 0
    cli_only: bool = True

    def policy(self) -> ThrottlePolicy:
        """Return the active throttle policy."""
        if self.timeout_ms < 0:
            raise InvalidPolicyError(f"Update timeout must be >= 0 ms, got {self.timeout_ms}")

        if self.timeout_ms > 0:
            return TimeoutPolicy(self.timeout_ms)

        return IntervalPolicy(self.interval)
