"""Severity levels and the per-session threshold check."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Union

from .errors import ConfigurationError

ERROR = 10
WARN = 20
INFO = 30
DEBUG = 40

LEVELS: Mapping[str, int] = MappingProxyType(
    {
        "error": ERROR,
        "warn": WARN,
        "info": INFO,
        "debug": DEBUG,
    }
)

LevelSpec = Union[str, int]


def resolve_level(level: LevelSpec) -> int:
    """Translate a level name or non-negative integer into a numeric threshold."""

    if isinstance(level, bool):
        raise ConfigurationError(f"bad level value {level!r}")
    if isinstance(level, int):
        if level < 0:
            raise ConfigurationError(
                f"bad level value {level!r} (should be an error level name or a non-negative integer)"
            )
        return level
    if isinstance(level, str):
        if level.isascii() and level.isdigit():
            return int(level)
        threshold = LEVELS.get(level)
        if threshold is not None:
            return threshold
    raise ConfigurationError(
        f"bad level value {level!r} (should be one of {', '.join(LEVELS)} or a non-negative integer)"
    )


class LevelFilter:
    """Decides whether a message of a given severity should be recorded."""

    def __init__(self, threshold: int) -> None:
        self.threshold = resolve_level(threshold)

    @classmethod
    def from_level(cls, level: LevelSpec) -> "LevelFilter":
        return cls(resolve_level(level))

    def allows(self, severity: int) -> bool:
        """Return True when ``severity`` is within the configured verbosity."""

        return self.threshold >= severity

    def __repr__(self) -> str:
        return f"LevelFilter(threshold={self.threshold})"
