"""Redraw throttling policies."""

from dataclasses import dataclass

from progress_reporter.utils.errors import InvalidPolicyError


@dataclass(frozen=True)
class IntervalPolicy:
    """Redraw every `units` reported units."""

    units: int = 1

    def __post_init__(self) -> None:
        if self.units < 1:
            raise InvalidPolicyError(f"Update interval must be >= 1, got {self.units}")


@dataclass(frozen=True)
class TimeoutPolicy:
    """Redraw at most once per `milliseconds`."""

    milliseconds: float

    def __post_init__(self) -> None:
        if self.milliseconds <= 0:
            raise InvalidPolicyError(f"Update timeout must be > 0 ms, got {self.milliseconds}")

    @property
    def seconds(self) -> float:
        return self.milliseconds / 1000


ThrottlePolicy = IntervalPolicy | TimeoutPolicy


def render_required(
    policy: ThrottlePolicy,
    current: int,
    now: float,
    last_render_time: float | None,
) -> bool:
    """
    Decide whether the line should be redrawn.

    Time-based policies redraw when nothing has been drawn yet or the
    timeout has elapsed since the last draw. Interval policies redraw
    whenever `current` is a multiple of the interval, regardless of time.
    """
    if isinstance(policy, TimeoutPolicy):
        if last_render_time is None:
            return True
        return now - last_render_time >= policy.seconds

    return current % policy.units == 0
