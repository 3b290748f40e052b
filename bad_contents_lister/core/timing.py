"""Human readable rendering of elapsed times expressed in nanoseconds."""

import time
from types import TracebackType

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY = 24 * NANOS_PER_HOUR

# (unit size, abbreviation), largest first
_LARGE_UNITS: tuple[tuple[int, str], ...] = (
    (NANOS_PER_DAY, "d"),
    (NANOS_PER_HOUR, "h"),
    (NANOS_PER_MINUTE, "min"),
    (NANOS_PER_SECOND, "s"),
)


def human_duration(nanos: int) -> str:
    """Render a duration for humans.

    Units from days down to seconds are listed when non zero. Milliseconds
    are only shown when the largest unit is minutes or seconds, or when
    the duration is below one second. Below one millisecond the duration
    is rendered in microseconds, then nanoseconds.

    Args:
        nanos: Duration in nanoseconds

    Returns:
        The rendering, e.g. ``"2h 3min 4s"``, ``"1s 500ms"`` or ``"45μs"``
    """
    nanos = max(0, nanos)
    parts: list[str] = []
    top: str | None = None

    for size, unit in _LARGE_UNITS:
        amount, nanos = divmod(nanos, size)
        if amount > 0:
            parts.append(f"{amount}{unit}")
            if top is None:
                top = unit

    if top is None or top in ("min", "s"):
        millis, nanos = divmod(nanos, NANOS_PER_MILLI)
        if millis > 0:
            parts.append(f"{millis}ms")
            if top is None:
                top = "ms"
        if top is None:
            micros = nanos // NANOS_PER_MICRO
            if micros > 0:
                parts.append(f"{micros}μs")
            else:
                parts.append(f"{nanos}ns")

    return " ".join(parts)


class Stopwatch:
    """Measure elapsed time, usable as a context manager."""

    def __init__(self) -> None:
        self._start: int | None = None
        self._elapsed = 0

    def start(self) -> "Stopwatch":
        self._elapsed = 0
        self._start = time.perf_counter_ns()
        return self

    def stop(self) -> "Stopwatch":
        if self._start is not None:
            self._elapsed = time.perf_counter_ns() - self._start
            self._start = None
        return self

    @property
    def elapsed(self) -> int:
        """Elapsed nanoseconds, up to now while running."""
        if self._start is not None:
            return time.perf_counter_ns() - self._start
        return self._elapsed

    def __enter__(self) -> "Stopwatch":
        return self.start()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def __str__(self) -> str:
        return human_duration(self.elapsed)
