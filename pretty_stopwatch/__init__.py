"""Stopwatch with nanosecond precision and readable formatting."""

from .config import FormatConfig
from .errors import IllegalStateError, MissingCallableError, NoMatchingUnitError, StopwatchError
from .formatter import UNITS, Unit, get_unit, scale_nanos_with_unit
from .stopwatch import Stopwatch

__version__ = "0.1.0"

__all__ = [
    "FormatConfig",
    "IllegalStateError",
    "MissingCallableError",
    "NoMatchingUnitError",
    "Stopwatch",
    "StopwatchError",
    "UNITS",
    "Unit",
    "get_unit",
    "scale_nanos_with_unit",
]
