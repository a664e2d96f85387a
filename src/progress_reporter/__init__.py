"""Progress Reporter - Self-overwriting terminal progress bar."""

__version__ = "0.1.0"

from progress_reporter.config import ReporterConfig
from progress_reporter.core.throttle import IntervalPolicy
from progress_reporter.core.throttle import TimeoutPolicy
from progress_reporter.reporter import ProgressReporter
from progress_reporter.utils.errors import InvalidPolicyError
from progress_reporter.utils.errors import ProgressReporterError
from progress_reporter.utils.progress import ProgressCallback
from progress_reporter.utils.progress import ReporterCallback
from progress_reporter.utils.progress import track


__all__ = [
    "ProgressReporter",
    "ReporterConfig",
    "IntervalPolicy",
    "TimeoutPolicy",
    "ProgressCallback",
    "ReporterCallback",
    "track",
    "ProgressReporterError",
    "InvalidPolicyError",
    "__version__",
]
