"""A stopwatch with nanosecond precision and readable formatting.

The state-changing methods are not idempotent: starting a running stopwatch
or stopping a stopped one raises IllegalStateError.

    stopwatch = Stopwatch.create_started()
    do_work()
    stopwatch.stop()
    print(stopwatch)  # 100.02 ms

    stopwatch = Stopwatch.time(do_work, name="work")
    print(stopwatch)  # 'work' elapsed: 3.7 μs
"""

import math
import time
from typing import Callable, Optional

from .config import FormatConfig
from .errors import IllegalStateError, MissingCallableError
from .formatter import scale_nanos_with_unit

Clock = Callable[[], int]

_CREATE_KEY = object()


class Stopwatch:
    """Measures time spent running across any number of start/stop cycles.

    Build one with create_started() or create_unstarted(); the constructor
    is private.
    """

    def __init__(self, create_key, name: Optional[str], elapsed_nanos: int, clock: Optional[Clock]):
        if create_key is not _CREATE_KEY:
            raise TypeError("Use Stopwatch.create_started() or Stopwatch.create_unstarted()")
        self._name = name
        self._clock: Clock = clock or time.monotonic_ns
        self._running = False
        self._start_nanos: Optional[int] = None
        self._elapsed_nanos = elapsed_nanos

    @classmethod
    def create_started(
        cls,
        name: Optional[str] = None,
        elapsed_nanos: int = 0,
        clock: Optional[Clock] = None,
    ) -> "Stopwatch":
        """Create a stopwatch and start it.

        Args:
            name: Label shown when the stopwatch is printed
            elapsed_nanos: Time already on the clock (useful for testing)
            clock: Zero-argument callable returning monotonic nanoseconds
        """
        return cls(_CREATE_KEY, name, elapsed_nanos, clock).start()

    @classmethod
    def create_unstarted(
        cls,
        name: Optional[str] = None,
        elapsed_nanos: int = 0,
        clock: Optional[Clock] = None,
    ) -> "Stopwatch":
        """Create a stopwatch without starting it. Arguments as create_started()."""
        return cls(_CREATE_KEY, name, elapsed_nanos, clock)

    @classmethod
    def time(cls, func: Optional[Callable[[], object]] = None, name: Optional[str] = None) -> "Stopwatch":
        """Time one call of `func` and return the stopped stopwatch.

        If `func` raises, the stopwatch is still stopped and the exception
        propagates.
        """
        if func is None:
            raise MissingCallableError("no callable given")
        stopwatch = cls.create_started(name)
        try:
            func()
        finally:
            stopwatch.stop()
        return stopwatch

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def running(self) -> bool:
        return self._running

    def is_running(self) -> bool:
        return self._running

    def is_stopped(self) -> bool:
        return not self._running

    def start(self) -> "Stopwatch":
        """Start the stopwatch."""
        if self._running:
            raise IllegalStateError("Stopwatch is already running")
        self._start_nanos = self._clock()
        self._running = True
        return self

    def stop(self) -> "Stopwatch":
        """Stop the stopwatch, keeping the time of the interval just closed."""
        if not self._running:
            raise IllegalStateError("Stopwatch is already stopped")
        self._elapsed_nanos += self._clock() - self._start_nanos
        self._start_nanos = None
        self._running = False
        return self

    def reset(self) -> "Stopwatch":
        """Stop the stopwatch and zero it. A running interval is discarded."""
        self._running = False
        self._start_nanos = None
        self._elapsed_nanos = 0
        return self

    def elapsed_nanos(self) -> int:
        if self._running:
            return self._elapsed_nanos + (self._clock() - self._start_nanos)
        return self._elapsed_nanos

    def elapsed_millis(self) -> int:
        nanos = self.elapsed_nanos()
        if isinstance(nanos, float) and math.isinf(nanos):
            return nanos
        return nanos // 1_000_000

    def format(self, config: Optional[FormatConfig] = None) -> str:
        """Render the elapsed time, prefixed with the name if there is one."""
        config = config or FormatConfig()
        value = scale_nanos_with_unit(self.elapsed_nanos(), config.precision)
        return config.render(self._name, value)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"Stopwatch(name={self._name!r}, running={self._running}, "
            f"elapsed_nanos={self.elapsed_nanos()})"
        )

    def __enter__(self) -> "Stopwatch":
        if not self._running:
            self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._running:
            self.stop()
