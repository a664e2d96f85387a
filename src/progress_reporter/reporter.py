"""Single-line, self-overwriting progress reporter."""

import logging
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from progress_reporter.config import ReporterConfig
from progress_reporter.core.bar import format_progress
from progress_reporter.core.bar import percent_done
from progress_reporter.core.bar import render_line
from progress_reporter.core.rate import RateWindow
from progress_reporter.core.throttle import IntervalPolicy
from progress_reporter.core.throttle import ThrottlePolicy
from progress_reporter.core.throttle import TimeoutPolicy
from progress_reporter.core.throttle import render_required
from progress_reporter.utils.console import ConsoleCheck
from progress_reporter.utils.console import stream_console_check
from progress_reporter.utils.errors import InvalidPolicyError


logger = logging.getLogger(__name__)

LINE_TERMINATOR = "\n"


@dataclass
class ReporterState:
    """Mutable progress state of one task."""

    total: int
    description: str
    start_time: float
    window: RateWindow
    current: int = 0
    last_render_time: float | None = None


class ProgressReporter:
    """
    Shows a progress bar on a single, continuously rewritten line.

    Usage:
        reporter = ProgressReporter(len(items), "Doing something")
        reporter.set_interval(50)
        for item in items:
            process(item)
            reporter.report()
        reporter.finish()

    Every `report()` counts one unit of work; the line is only redrawn when
    the throttle policy allows it. `finish()` always redraws and ends the
    line. With `cli_only` enabled (the default) nothing is written unless
    the stream is an interactive terminal, but counters keep updating.
    """

    def __init__(
        self,
        total: int,
        description: str = "",
        stream: TextIO | None = None,
        clock: Callable[[], float] = time.monotonic,
        console_check: ConsoleCheck | None = None,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self.clock = clock
        self.console_check = console_check or stream_console_check(self.stream)

        now = clock()
        self.state = ReporterState(
            total=total,
            description=description,
            start_time=now,
            window=RateWindow(start=now),
        )
        self._interval_policy = IntervalPolicy()
        self._policy: ThrottlePolicy = self._interval_policy
        self._cli_only = True

    @classmethod
    def from_config(cls, total: int, description: str, config: ReporterConfig, **kwargs) -> "ProgressReporter":
        """Create a reporter with throttle and output settings taken from config."""
        reporter = cls(total, description, **kwargs)
        reporter.set_interval(config.interval)
        reporter.set_policy(config.policy())
        reporter.set_cli_only(config.cli_only)
        return reporter

    @property
    def total(self) -> int:
        return self.state.total

    @property
    def current(self) -> int:
        return self.state.current

    @property
    def description(self) -> str:
        return self.state.description

    @property
    def rate(self) -> float:
        """Units per second over the current rate window."""
        return self.state.window.rate

    @property
    def elapsed(self) -> float:
        """Seconds since the reporter was created."""
        return self.clock() - self.state.start_time

    @property
    def percent_done(self) -> float:
        return percent_done(self.state.current, self.state.total)

    @property
    def policy(self) -> ThrottlePolicy:
        return self._policy

    @property
    def cli_only(self) -> bool:
        return self._cli_only

    def set_interval(self, units: int) -> None:
        """Redraw every `units` reports. Replaces any time-based policy."""
        self._interval_policy = IntervalPolicy(units)
        self._policy = self._interval_policy
        logger.debug("Throttling every %d units", units)

    def set_timeout(self, milliseconds: float) -> None:
        """Redraw at most once per `milliseconds`; 0 returns to the interval policy."""
        if milliseconds < 0:
            raise InvalidPolicyError(f"Update timeout must be >= 0 ms, got {milliseconds}")

        if milliseconds == 0:
            self._policy = self._interval_policy
            logger.debug("Timeout disabled, throttling every %d units", self._interval_policy.units)
        else:
            self._policy = TimeoutPolicy(milliseconds)
            logger.debug("Throttling every %s ms", milliseconds)

    def set_policy(self, policy: ThrottlePolicy) -> None:
        """Activate a throttle policy. Interval policies are also kept for `set_timeout(0)`."""
        if isinstance(policy, IntervalPolicy):
            self._interval_policy = policy

        self._policy = policy
        logger.debug("Throttle policy set to %s", policy)

    def set_cli_only(self, value: bool = True) -> None:
        """Only render when the stream is an interactive console. True by default."""
        self._cli_only = value

    def report(self, description: str | None = None) -> None:
        """Count one unit of work and redraw if the throttle policy allows it."""
        if description is not None:
            self.state.description = description

        self.state.current += 1
        self.state.window.add()

        now = self._update()
        if render_required(self._policy, self.state.current, now, self.state.last_render_time):
            self._render(now)

    def finish(self) -> None:
        """Render a final time, ignoring the throttle, and end the line."""
        now = self._update()
        self._render(now)

        if self._output_enabled():
            self._write(LINE_TERMINATOR)

        logger.debug(
            "Finished %d/%d units in %.3fs",
            self.state.current,
            self.state.total,
            now - self.state.start_time,
        )

    def progress_text(self) -> str:
        """Current status text, without control sequences or description."""
        return format_progress(self.state.current, self.state.total, self.rate)

    def _update(self) -> float:
        now = self.clock()
        self.state.window.update(now)
        return now

    def _output_enabled(self) -> bool:
        return not self._cli_only or self.console_check()

    def _render(self, now: float) -> None:
        self.state.last_render_time = now

        if not self._output_enabled():
            return

        self._write(render_line(self.progress_text(), self.state.description))

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def __enter__(self) -> "ProgressReporter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()
