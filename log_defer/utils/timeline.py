"""Plain-text rendering of a record's timer tracks."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping


def render_timeline(record: Any, width: int = 40) -> str:
    """Draw each timer of a Record, or of its dict form, as a bar scaled to ``end``.

    Example output for ``width=10``::

        parse  |====|
        fetch       |====|
               0         0.2

    Tracks are ordered by start offset; open tracks are drawn up to ``end``.
    """

    payload: Mapping[str, Any] = record.as_dict() if hasattr(record, "as_dict") else record
    timers: Dict[str, List[float]] = payload.get("timers") or {}
    if not timers:
        return ""

    end = payload.get("end")
    if end is None:
        end = max(max(track) for track in timers.values())
    label_width = max(len(name) for name in timers) + 2

    rows = []
    for name, track in sorted(timers.items(), key=lambda item: item[1][0]):
        left = _column(track[0], end, width)
        right = _column(track[1] if len(track) > 1 else end, end, width)
        bar = " " * left + "|" + "=" * max(right - left - 1, 0) + "|"
        rows.append(f"{name.ljust(label_width)}{bar}")
    rows.append(f"{' ' * label_width}{'0'.ljust(width)}{end}")
    return "\n".join(rows)


def _column(offset: float, end: float, width: int) -> int:
    if end <= 0:
        return 0
    return max(0, min(width, int(round(offset / end * width))))
