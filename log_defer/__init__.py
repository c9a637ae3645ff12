"""Deferred, structured per-transaction logs and timers."""

from .errors import (
    ConfigurationError,
    DuplicateTimerError,
    LogDeferError,
    TimerStoppedError,
    UsageAfterFlushError,
)
from .guard import Guard, Lease, LeasedCoroutine
from .levels import LEVELS, LevelFilter, resolve_level
from .models import RecordModel
from .record import LogEntry, Record
from .session import Session
from .timer import TimerHandle

__all__ = [
    "ConfigurationError",
    "DuplicateTimerError",
    "Guard",
    "LEVELS",
    "Lease",
    "LeasedCoroutine",
    "LevelFilter",
    "LogDeferError",
    "LogEntry",
    "Record",
    "RecordModel",
    "Session",
    "TimerHandle",
    "TimerStoppedError",
    "UsageAfterFlushError",
    "resolve_level",
]
__version__ = "0.1.0"
