"""Custom exceptions for Progress Reporter."""


class ProgressReporterError(Exception):
    """Base exception for Progress Reporter errors."""
    pass


class InvalidPolicyError(ProgressReporterError, ValueError):
    """Throttle policy value out of range."""
    pass
