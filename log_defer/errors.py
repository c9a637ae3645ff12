"""Exception hierarchy for deferred logging."""


class LogDeferError(Exception):
    """Base exception for log_defer."""


class ConfigurationError(LogDeferError):
    """Raised for an invalid callback, severity level or settings value."""


class DuplicateTimerError(LogDeferError):
    """Raised when a timer name is already registered on a record."""


class UsageAfterFlushError(LogDeferError):
    """Raised when a session or timer is used after its record was emitted."""


class TimerStoppedError(LogDeferError):
    """Raised when a stopped timer is shared again."""
