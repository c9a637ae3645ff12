"""The structured accumulator emitted once per transaction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, NamedTuple, Optional, Tuple

from .errors import DuplicateTimerError, UsageAfterFlushError
from .utils.timing import TimeSource

if TYPE_CHECKING:
    from .models import RecordModel

LOGGER = logging.getLogger(__name__)


class LogEntry(NamedTuple):
    offset: float
    severity: int
    payload: Tuple[Any, ...]

    def as_list(self) -> List[Any]:
        return [self.offset, self.severity, *self.payload]


class Record:
    """Holds the logs, timer tracks and free-form data of one transaction.

    ``start`` is absolute epoch seconds; every other time stored here is an
    offset from ``start``. ``end`` stays ``None`` until :meth:`seal` runs.
    """

    def __init__(self, time_source: Optional[TimeSource] = None) -> None:
        self._time = time_source or TimeSource()
        self.start: float = self._time.now()
        self.end: Optional[float] = None
        self.logs: List[LogEntry] = []
        self.timers: Dict[str, List[float]] = {}
        self._data: Optional[Dict[Any, Any]] = None

    @property
    def sealed(self) -> bool:
        return self.end is not None

    @property
    def data(self) -> Optional[Dict[Any, Any]]:
        return self._data

    def now_offset(self) -> float:
        return self._time.now_offset(self.start)

    def append_log(self, severity: int, payload: Iterable[Any]) -> LogEntry:
        """Append a log entry stamped with the current offset."""

        entry = LogEntry(self.now_offset(), severity, tuple(payload))
        self.logs.append(entry)
        return entry

    def ensure_data(self) -> Dict[Any, Any]:
        """Return the data mapping, creating it on first access."""

        if self._data is None:
            self._data = {}
        return self._data

    def open_track(self, name: str) -> float:
        """Create a timer track holding its start offset."""

        if name in self.timers:
            raise DuplicateTimerError(f"timer {name!r} already registered")
        offset = self.now_offset()
        self.timers[name] = [offset]
        return offset

    def close_track(self, name: str, offset: Optional[float] = None) -> bool:
        """Append the closing offset if the track is still open."""

        track = self.timers[name]
        if len(track) != 1:
            return False
        track.append(self.now_offset() if offset is None else offset)
        return True

    def open_tracks(self) -> List[str]:
        return [name for name, track in self.timers.items() if len(track) == 1]

    def seal(self) -> float:
        """Stamp ``end`` and close every track that is still open."""

        if self.sealed:
            raise UsageAfterFlushError("record already sealed")
        end = self.now_offset()
        for name in self.open_tracks():
            LOGGER.debug("Auto-closing timer '%s' at %s", name, end)
            self.close_track(name, end)
        self.end = end
        return end

    def as_dict(self) -> Dict[str, Any]:
        """Return the emitted record shape as plain Python containers."""

        payload: Dict[str, Any] = {
            "start": self.start,
            "end": self.end,
            "logs": [entry.as_list() for entry in self.logs],
            "timers": {name: list(track) for name, track in self.timers.items()},
        }
        if self._data is not None:
            payload["data"] = self._data
        return payload

    def to_model(self) -> "RecordModel":
        """Return a validated pydantic view of the record."""

        from .models import RecordModel

        return RecordModel.model_validate(self.as_dict())

    def __repr__(self) -> str:
        return (
            f"Record(start={self.start}, end={self.end}, logs={len(self.logs)}, "
            f"timers={len(self.timers)})"
        )
