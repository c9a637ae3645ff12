"""Deferred logger owning one record and its exactly-once flush."""

from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar

from .config import get_settings
from .errors import ConfigurationError, UsageAfterFlushError
from .guard import Guard, Lease, LeasedCoroutine
from .levels import DEBUG, ERROR, INFO, WARN, LevelFilter, LevelSpec
from .record import Record
from .timer import TimerHandle
from .utils.timing import TimeSource

LOGGER = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


async def _awaiting(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


class Session:
    """Buffers logs, timers and data for one transaction.

    The record is handed to ``callback`` exactly once, when the last reference
    to the session is released. The creator holds the first reference and drops
    it with :meth:`release` (or by leaving a ``with`` block); continuations that
    must finish before the record is emitted take their own with
    :meth:`retain` or :meth:`continuation`.

    Timers do not hold the session open. Stop them before the last session
    reference goes away; a timer released afterwards raises
    :class:`~log_defer.errors.UsageAfterFlushError`.
    """

    def __init__(
        self,
        callback: Callable[[Record], Any],
        level: Optional[LevelSpec] = None,
        *,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if callback is None or not callable(callback):
            raise ConfigurationError("must provide a callable callback to Session")
        if level is None:
            level = get_settings().level
        self._filter = LevelFilter.from_level(level)
        self._callback = callback
        self.record = Record(TimeSource(clock))
        self._guard = Guard(self._flush, name="session")
        self._lease = self._guard.lease()

    @property
    def level(self) -> int:
        return self._filter.threshold

    @property
    def flushed(self) -> bool:
        return self._guard.fired

    def error(self, *payload: Any) -> None:
        self._log(ERROR, payload)

    def warn(self, *payload: Any) -> None:
        self._log(WARN, payload)

    def info(self, *payload: Any) -> None:
        self._log(INFO, payload)

    def debug(self, *payload: Any) -> None:
        self._log(DEBUG, payload)

    def timer(self, name: str) -> TimerHandle:
        """Start a timer on a new track called ``name``."""

        self._ensure_active()
        return TimerHandle(self.record, name)

    def data(self) -> Dict[Any, Any]:
        """Return the free-form data mapping of the record."""

        self._ensure_active()
        return self.record.ensure_data()

    def retain(self) -> Lease:
        """Take an extra reference that keeps the record from being emitted."""

        self._ensure_active()
        return self._guard.lease()

    def release(self) -> None:
        """Drop the creator's reference. Calling it again does nothing."""

        self._lease.release()

    def continuation(self, fn: F) -> F:
        """Wrap ``fn`` so the session stays open until the wrapper has run.

        Works for plain callables and for anything returning an awaitable,
        such as coroutine functions. For awaitables the reference is held until
        the awaitable finishes, fails, is cancelled or is discarded; otherwise it
        is dropped once the first call returns or raises.
        """

        lease = self.retain()

        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                result = fn(*args, **kwargs)
            except BaseException:
                lease.release()
                raise
            if inspect.isawaitable(result):
                coro = result if inspect.iscoroutine(result) else _awaiting(result)
                return LeasedCoroutine(coro, lease)
            lease.release()
            return result

        return wrapper  # type: ignore[return-value]

    def _log(self, severity: int, payload: tuple) -> None:
        self._ensure_active()
        if self._filter.allows(severity):
            self.record.append_log(severity, payload)

    def _ensure_active(self) -> None:
        if self._guard.fired:
            raise UsageAfterFlushError("session already flushed")

    def _flush(self) -> None:
        end = self.record.seal()
        LOGGER.debug(
            "Flushing record with %s logs and %s timers after %ss",
            len(self.record.logs),
            len(self.record.timers),
            end,
        )
        self._callback(self.record)

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "flushed" if self.flushed else f"{self._guard.holders} holders"
        return f"Session(level={self.level}, {state})"
