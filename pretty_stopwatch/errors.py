"""Exceptions raised by the stopwatch and the unit formatter."""


class StopwatchError(Exception):
    """Base class for pretty_stopwatch errors."""


class IllegalStateError(StopwatchError):
    """Stopwatch was started while running or stopped while stopped."""


class NoMatchingUnitError(StopwatchError, ValueError):
    """No time unit fits the given nanosecond count."""


class MissingCallableError(StopwatchError, TypeError):
    """Stopwatch.time() was called without anything to time."""
