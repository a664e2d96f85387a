"""Progress reporting helpers built on ProgressReporter."""

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Sized
from typing import Protocol
from typing import runtime_checkable
from typing import TypeVar

from progress_reporter.config import ReporterConfig
from progress_reporter.reporter import ProgressReporter


T = TypeVar("T")


@runtime_checkable
class ProgressCallback(Protocol):
    """Protocol for progress callback functions."""
    def __call__(self, current: int, total: int) -> None: ...


class ReporterCallback:
    """Adapt a ProgressReporter to the (current, total) callback protocol.

    Each call reports the units done since the previous call, one `report()`
    per unit, so it suits callbacks that count items rather than bytes.
    Positions at or behind the reporter's count are ignored; the reporter's
    total is fixed at construction so `total` is not used.
    """

    def __init__(self, reporter: ProgressReporter):
        self.reporter = reporter

    def __call__(self, current: int, total: int) -> None:
        for _ in range(current - self.reporter.current):
            self.reporter.report()


def track(
    iterable: Iterable[T],
    total: int | None = None,
    description: str = "",
    config: ReporterConfig | None = None,
    **reporter_kwargs,
) -> Iterator[T]:
    """
    Yield items from iterable, reporting one unit per item.

    The line is finished when the iterable is exhausted or the loop exits
    early. If total is not given it is taken from len(iterable), or 0 when
    the iterable has no length.
    """
    if total is None:
        total = len(iterable) if isinstance(iterable, Sized) else 0

    reporter = ProgressReporter.from_config(total, description, config or ReporterConfig(), **reporter_kwargs)
    with reporter:
        for item in iterable:
            yield item
            reporter.report()
