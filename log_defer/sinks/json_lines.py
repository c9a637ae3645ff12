"""Sinks serialising each record as one compact JSON line."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from ..config import get_settings
from ..record import Record


def encode_record(record: Record, ensure_ascii: Optional[bool] = None) -> str:
    """Return ``record`` as a single line of JSON."""

    if ensure_ascii is None:
        ensure_ascii = get_settings().ensure_ascii
    payload: Dict[str, Any] = record.as_dict()
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=ensure_ascii, default=str)


class JsonLinesSink:
    """Writes one JSON line per record to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None, ensure_ascii: Optional[bool] = None) -> None:
        self.stream = stream
        self.ensure_ascii = ensure_ascii

    def __call__(self, record: Record) -> None:
        stream = self.stream or sys.stdout
        stream.write(encode_record(record, self.ensure_ascii) + "\n")
        stream.flush()


class LoggingSink:
    """Hands each record to a stdlib logger as one JSON line."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO) -> None:
        self.logger = logger or logging.getLogger(get_settings().logger_name)
        self.level = level

    def __call__(self, record: Record) -> None:
        self.logger.log(self.level, "%s", encode_record(record))
