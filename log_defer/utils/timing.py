"""Clock helpers producing microsecond-rounded, non-negative timestamps."""

from __future__ import annotations

import time
from typing import Callable, Optional

PRECISION = 6


def format_time(value: float) -> float:
    """Clamp ``value`` to zero and round it to microsecond precision.

    The result is always a float, never a formatted string.
    """

    if value < 0:
        value = 0.0
    return float(f"{value:.{PRECISION}f}")


class TimeSource:
    """Reads a wall clock and expresses readings relative to a record start."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.time

    def now(self) -> float:
        """Return the absolute time in epoch seconds."""

        return format_time(self._clock())

    def now_offset(self, start: float) -> float:
        """Return the elapsed seconds since ``start``."""

        return format_time(self._clock() - start)
