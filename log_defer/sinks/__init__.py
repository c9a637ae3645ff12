"""Ready-made consumer callbacks for sessions."""

from .json_lines import JsonLinesSink, LoggingSink, encode_record
from .memory_sink import MemorySink

__all__ = ["JsonLinesSink", "LoggingSink", "MemorySink", "encode_record"]
