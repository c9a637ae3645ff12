from log_defer import Session
from log_defer.utils import render_timeline


def test_render_timeline_scales_bars():
    chart = render_timeline({"end": 1.0, "timers": {"a": [0.0, 0.5], "b": [0.5, 1.0]}}, width=10)
    assert chart.splitlines() == [
        "a  |====|",
        "b       |====|",
        "   0         1.0",
    ]


def test_render_timeline_orders_by_start():
    payload = {"end": 0.4, "timers": {"late": [0.2, 0.4], "early": [0.0, 0.2]}}
    chart = render_timeline(payload, width=4)
    assert [line.split()[0] for line in chart.splitlines()[:2]] == ["early", "late"]


def test_render_timeline_draws_open_tracks_to_end():
    chart = render_timeline({"end": 1.0, "timers": {"open": [0.5]}}, width=4)
    assert chart.splitlines()[0] == "open    |=|"


def test_render_timeline_without_timers_is_empty(collector):
    with Session(collector):
        pass
    assert render_timeline(collector.records[0]) == ""
