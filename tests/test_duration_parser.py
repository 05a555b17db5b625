import logging

import pytest

from srtconv.duration_parser import format_duration, parse_duration
from srtconv.exceptions import InvalidDurationFormat


@pytest.mark.parametrize("spec, expected", [
    ("5:30", 330.0),
    ("0:05", 5.0),
    ("0:0", 0.0),
    ("12:7", 727.0),
    (" 1 : 02 ", 62.0),
    ("90:00", 5400.0),
])
def test_parses_minutes_and_seconds(spec, expected):
    assert parse_duration(spec) == expected


@pytest.mark.parametrize("spec", [
    "",
    "5",
    "5:30:00",
    "abc:10",
    "5:xx",
    ":30",
    "5:",
    "-1:30",
    "1:-5",
    "1.5:00",
    "1:30.5",
])
def test_rejects_malformed_durations(spec):
    with pytest.raises(InvalidDurationFormat):
        parse_duration(spec)


def test_rejects_none():
    with pytest.raises(InvalidDurationFormat):
        parse_duration(None)


def test_seconds_over_sixty_are_not_carried(caplog):
    with caplog.at_level(logging.WARNING, logger="srtconv.duration_parser"):
        assert parse_duration("5:90") == 390.0
    assert "5:90" in caplog.text


def test_strict_seconds_rejects_overflow():
    with pytest.raises(InvalidDurationFormat):
        parse_duration("5:90", strict_seconds=True)
    assert parse_duration("5:59", strict_seconds=True) == 359.0


def test_format_duration():
    assert format_duration(330) == "5:30"
    assert format_duration(5.9) == "0:05"
    assert format_duration(3600) == "60:00"
