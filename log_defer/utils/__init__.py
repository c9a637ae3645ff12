"""Utility helpers for timing and rendering records."""

from .timing import TimeSource, format_time
from .timeline import render_timeline

__all__ = ["TimeSource", "format_time", "render_timeline"]
