"""Console attachment detection."""

from collections.abc import Callable
from typing import TextIO


ConsoleCheck = Callable[[], bool]


def is_interactive(stream: TextIO) -> bool:
    """Return True if stream is attached to an interactive terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False

    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def stream_console_check(stream: TextIO) -> ConsoleCheck:
    """Build a console check bound to a stream."""
    return lambda: is_interactive(stream)
