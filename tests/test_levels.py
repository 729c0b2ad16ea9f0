import pytest
from conlog.core.errors import InvalidSeverityError
from conlog.core.levels import (
    LEVEL_METADATA, LOCATED_LEVELS, RESET, Severity, level_color, level_label,
)


def test_severity_total_order():
    levels = list(Severity)
    assert levels == sorted(levels)
    assert Severity.DEBUG < Severity.INFO < Severity.WARNING < Severity.ERROR < Severity.CRITICAL


def test_metadata_covers_every_severity():
    assert set(LEVEL_METADATA) == set(Severity)
    assert [LEVEL_METADATA[s].label for s in Severity] == ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def test_metadata_colors():
    assert level_color(Severity.DEBUG) == "\033[36m"
    assert level_color(Severity.INFO) == "\033[32m"
    assert level_color(Severity.WARNING) == "\033[33m"
    assert level_color(Severity.ERROR) == "\033[31m"
    assert level_color(Severity.CRITICAL) == "\033[35m"
    assert RESET == "\033[0m"


def test_metadata_is_read_only():
    with pytest.raises(TypeError):
        LEVEL_METADATA[Severity.DEBUG] = ("LOUD", "")  # type: ignore[index]


def test_unknown_level_fallback():
    assert level_label(42) == "UNKNOWN"
    assert level_color(42) == ""
    # plain ints resolve like their enum member
    assert level_label(3) == "ERROR"


def test_located_levels():
    assert LOCATED_LEVELS == {Severity.ERROR, Severity.CRITICAL}


@pytest.mark.parametrize("value,expected", [
    ("debug", Severity.DEBUG),
    (" Info ", Severity.INFO),
    ("WARN", Severity.WARNING),
    ("warning", Severity.WARNING),
    (4, Severity.CRITICAL),
    (Severity.ERROR, Severity.ERROR),
])
def test_parse(value, expected):
    assert Severity.parse(value) is expected


@pytest.mark.parametrize("value", ["loud", "", 9, -1, None, True, 2.0])
def test_parse_rejects(value):
    with pytest.raises(InvalidSeverityError):
        Severity.parse(value)
