"""Scale nanosecond counts to a readable value and unit."""

from typing import NamedTuple

from .errors import NoMatchingUnitError


class Unit(NamedTuple):
    """A time unit and how many nanoseconds it holds."""
    name: str
    divisor: int


# Largest first; get_unit() picks the first divisor that fits.
UNITS: tuple[Unit, ...] = (
    Unit("day", 1_000_000_000 * 60 * 60 * 24),
    Unit("hour", 1_000_000_000 * 60 * 60),
    Unit("min", 1_000_000_000 * 60),
    Unit("s", 1_000_000_000),
    Unit("ms", 1_000_000),
    Unit("μs", 1_000),
    Unit("ns", 1),
)

DEFAULT_PRECISION = 3


def get_unit(nanos: int | float) -> Unit:
    """Return the largest unit whose divisor is <= nanos.

    Exact divisor values belong to the larger unit, so 60_000_000_000 is
    "min" rather than "s".
    """
    for unit in UNITS:
        if nanos >= unit.divisor:
            return unit
    raise NoMatchingUnitError(f"No matching unit found for {nanos}")


def format_float(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Round to `precision` places and drop trailing zeros and a bare point."""
    text = f"{round(value, precision):.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def scale_nanos_with_unit(nanos: int | float, precision: int = DEFAULT_PRECISION) -> str:
    """Render nanos as e.g. "1.001 μs" or "59.999 min".

    Anything below one nanosecond is "0 ns". Infinite input, or an integer too
    large for a float, renders as "inf day" instead of raising.
    """
    if nanos < 1:
        return "0 ns"
    unit = get_unit(nanos)
    try:
        value = nanos / unit.divisor
    except OverflowError:
        value = float("inf")
    return f"{format_float(value, precision)} {unit.name}"
