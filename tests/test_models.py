import pytest
from pydantic import ValidationError

from log_defer import RecordModel, Session


def test_flushed_record_validates(clock, collector):
    with Session(collector, clock=clock) as session:
        session.info("hello", {"n": 1})
        session.data()["k"] = "v"
        with session.timer("step"):
            clock.advance_to(0.25)

    model = collector.records[0].to_model()
    assert model.end == 0.25
    assert model.logs == [[0.0, 30, "hello", {"n": 1}]]
    assert model.data == {"k": "v"}
    assert model.duration_of("step") == 0.25


def test_open_track_is_rejected():
    with pytest.raises(ValidationError):
        RecordModel.model_validate({"start": 1.0, "end": 0.5, "timers": {"t": [0.1]}})


def test_unordered_track_is_rejected():
    with pytest.raises(ValidationError):
        RecordModel.model_validate({"start": 1.0, "end": 0.5, "timers": {"t": [0.3, 0.2]}})


def test_negative_offsets_are_rejected():
    with pytest.raises(ValidationError):
        RecordModel.model_validate({"start": 1.0, "end": -0.1})
    with pytest.raises(ValidationError):
        RecordModel.model_validate({"start": 1.0, "end": 0.5, "logs": [[-0.1, 30, "x"]]})


def test_log_entry_needs_integer_severity():
    with pytest.raises(ValidationError):
        RecordModel.model_validate({"start": 1.0, "end": 0.5, "logs": [[0.1, "info", "x"]]})
