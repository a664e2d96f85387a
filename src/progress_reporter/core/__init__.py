"""Throttling, rate and formatting primitives behind the reporter."""

from .bar import format_progress
from .bar import render_line
from .rate import RATE_WINDOW_SECONDS
from .rate import RateWindow
from .throttle import IntervalPolicy
from .throttle import ThrottlePolicy
from .throttle import TimeoutPolicy
from .throttle import render_required


__all__ = [
    "IntervalPolicy",
    "TimeoutPolicy",
    "ThrottlePolicy",
    "RateWindow",
    "RATE_WINDOW_SECONDS",
    "format_progress",
    "render_line",
    "render_required",
]
