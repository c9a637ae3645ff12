import pytest

from log_defer.errors import ConfigurationError
from log_defer.levels import LEVELS, LevelFilter, resolve_level


def test_level_names_map_to_fixed_severities():
    assert dict(LEVELS) == {"error": 10, "warn": 20, "info": 30, "debug": 40}


def test_level_table_is_read_only():
    with pytest.raises(TypeError):
        LEVELS["trace"] = 50  # type: ignore[index]


def test_resolve_level_accepts_integers_and_digit_strings():
    assert resolve_level(0) == 0
    assert resolve_level(25) == 25
    assert resolve_level("35") == 35


@pytest.mark.parametrize("level", ["verbose", "", "INFO", "²", "٣", -1, 2.5, True, None])
def test_resolve_level_rejects_unknown_values(level):
    with pytest.raises(ConfigurationError):
        resolve_level(level)


def test_filter_records_up_to_threshold():
    warn_filter = LevelFilter.from_level("warn")
    assert warn_filter.allows(10)
    assert warn_filter.allows(20)
    assert not warn_filter.allows(30)
    assert not warn_filter.allows(40)
