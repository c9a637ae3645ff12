"""Pydantic model of an emitted record."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RecordModel(BaseModel):
    """Validated view of the structure handed to a session callback."""

    model_config = ConfigDict(frozen=True)

    start: float = Field(..., ge=0.0, description="Absolute epoch seconds the transaction started")
    end: float = Field(..., ge=0.0, description="Elapsed seconds from start to flush")
    logs: List[List[Any]] = Field(
        default_factory=list,
        description="Entries of the form [offset, severity, *payload] in call order",
    )
    timers: Dict[str, List[float]] = Field(
        default_factory=dict,
        description="Mapping of timer name to [start_offset, end_offset]",
    )
    data: Optional[Dict[Any, Any]] = Field(default=None, description="Free-form data, if any was set")

    @field_validator("logs")
    @classmethod
    def ensure_log_entries(cls, value: List[List[Any]]) -> List[List[Any]]:
        """Every entry starts with a non-negative offset and an integer severity."""

        for entry in value:
            if len(entry) < 2:
                raise ValueError(f"log entry {entry!r} lacks offset or severity")
            offset, severity = entry[0], entry[1]
            if not isinstance(offset, (int, float)) or offset < 0:
                raise ValueError(f"invalid log offset {offset!r}")
            if isinstance(severity, bool) or not isinstance(severity, int):
                raise ValueError(f"invalid log severity {severity!r}")
        return value

    @field_validator("timers")
    @classmethod
    def ensure_closed_tracks(cls, value: Dict[str, List[float]]) -> Dict[str, List[float]]:
        """Tracks of an emitted record hold exactly two ordered offsets."""

        for name, track in value.items():
            if len(track) != 2:
                raise ValueError(f"timer '{name}' has {len(track)} offsets, expected 2")
            first, second = track
            if first < 0 or second < first:
                raise ValueError(f"timer '{name}' offsets {track!r} are not ordered")
        return value

    def duration_of(self, name: str) -> float:
        """Return the elapsed seconds measured by timer ``name``."""

        first, second = self.timers[name]
        return round(second - first, 6)
