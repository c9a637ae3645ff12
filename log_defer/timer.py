"""Scoped timers bound to one named track of a record."""

from __future__ import annotations

import logging

from .errors import TimerStoppedError, UsageAfterFlushError
from .guard import Guard, Lease
from .record import Record

LOGGER = logging.getLogger(__name__)


class TimerHandle:
    """Stops its track when the last reference to the handle is released.

    Handles are created by :meth:`log_defer.session.Session.timer`. Use them as
    context managers, call :meth:`stop`, or hand a :meth:`share` lease to other
    continuations; the track is closed once, by whichever reference goes last.
    """

    def __init__(self, record: Record, name: str) -> None:
        self._record = record
        self.name = name
        self.start = record.open_track(name)
        self._guard = Guard(self._close, name=f"timer {name!r}")
        self._lease = self._guard.lease()

    @property
    def closed(self) -> bool:
        return self._guard.fired

    def share(self) -> Lease:
        """Return an additional reference keeping the timer running."""

        if self._record.sealed:
            raise UsageAfterFlushError(f"timer {self.name!r} shared after its session flushed")
        if self.closed:
            raise TimerStoppedError(f"timer {self.name!r} already stopped")
        return self._guard.lease()

    def stop(self) -> None:
        """Release the handle's own reference."""

        self._lease.release()

    def _close(self) -> None:
        if self._record.sealed:
            LOGGER.warning("Timer '%s' released after its session flushed", self.name)
            raise UsageAfterFlushError(
                f"timer {self.name!r} released after its session flushed"
            )
        if self._record.close_track(self.name):
            LOGGER.debug("Timer '%s' stopped at %s", self.name, self._record.timers[self.name][1])

    def __enter__(self) -> "TimerHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"TimerHandle(name={self.name!r}, {state})"
