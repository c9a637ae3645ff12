"""Sink that keeps emitted records in memory."""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Optional

from ..record import Record


class MemorySink:
    """Stores a snapshot of each emitted record for later inspection."""

    def __init__(self) -> None:
        self._records: List[Dict[str, Any]] = []

    def __call__(self, record: Record) -> None:
        self._records.append(deepcopy(record.as_dict()))

    @property
    def records(self) -> List[Dict[str, Any]]:
        """Return copies of every record received so far."""

        return deepcopy(self._records)

    def last(self) -> Optional[Dict[str, Any]]:
        """Return the most recent record if available."""

        return deepcopy(self._records[-1]) if self._records else None

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)
