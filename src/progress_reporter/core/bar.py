"""Status line formatting."""

import math


BAR_WIDTH = 20
FILL_CHAR = "#"
EMPTY_CHAR = "."
INDENT = 4

CLEAR_LINE = "\033[K"
CARRIAGE_RETURN = "\r"

SECONDS_PER_DAY = 24 * 60 * 60


def percent_done(current: int, total: int) -> float:
    """Percentage of work done, rounded to 3 places. Always 0 for total <= 0."""
    if total > 0:
        return round(current * 100 / total, 3)
    return 0.0


def bar_cells(percent: float, width: int = BAR_WIDTH) -> tuple[int, int]:
    """Split the bar into (done, undone) cells; partially filled cells count as done."""
    done = min(width, max(0, math.ceil(percent * width / 100)))
    undone = max(0, width - done)
    return done, undone


def format_bar(current: int, total: int, width: int = BAR_WIDTH) -> str:
    """Bracketed bar, e.g. `[##########..........]`."""
    done, undone = bar_cells(percent_done(current, total), width)
    return f"[{FILL_CHAR * done}{EMPTY_CHAR * undone}]"


def format_rate(rate: float) -> str:
    """Rate without trailing zeros: 10.0 -> `10`, 12.5 -> `12.5`."""
    return f"{rate:.3f}".rstrip("0").rstrip(".")


def eta_seconds(current: int, total: int, rate: float) -> int:
    """Whole seconds left at the given rate. Caller guarantees rate > 0."""
    return max(0, math.ceil((total - current) / rate))


def format_duration(seconds: int) -> str:
    """Format as HH:MM:SS, wrapping at 24 hours like a clock time."""
    minutes, secs = divmod(seconds % SECONDS_PER_DAY, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def format_progress(current: int, total: int, rate: float, width: int = BAR_WIDTH) -> str:
    """
    Build the status text without control sequences.

    Example:
        >>> format_progress(50, 100, 10.0)
        '[##########..........] 50/100@10 ETA: 00:00:05'
    """
    text = f"{format_bar(current, total, width)} {current}/{total}@{format_rate(rate)}"

    if rate > 0 and total > 0:
        text += f" ETA: {format_duration(eta_seconds(current, total, rate))}"

    return text


def clean_description(description: str) -> str:
    """Replace control characters with spaces so the label stays on one line."""
    return "".join(ch if ch.isprintable() else " " for ch in description)


def render_line(progress_text: str, description: str = "") -> str:
    """Wrap status text for in-place redraw: clear line, indent, text, label, CR."""
    line = CLEAR_LINE + " " * INDENT + progress_text

    if description:
        line += f" - {clean_description(description)}"

    return line + CARRIAGE_RETURN
