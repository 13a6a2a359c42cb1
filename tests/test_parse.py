from datetime import datetime, timedelta, timezone

import pytest

from chartkit.parse import parse_floats, parse_times


def test_parse_floats_strips_commas_and_blanks():
    assert parse_floats("1,000.5", " 2 ", "", "  ") == [1000.5, 2.0]


def test_parse_floats_empty_input():
    assert parse_floats() == []


def test_parse_floats_invalid_raises():
    with pytest.raises(ValueError):
        parse_floats("1.0", "abc")


def test_parse_floats_rejects_underscores():
    with pytest.raises(ValueError):
        parse_floats("1_000")


def test_parse_times_date_layout():
    result = parse_times("2006-01-02", "2020-01-15", "2021-12-31")
    assert result == [
        datetime(2020, 1, 15, tzinfo=timezone.utc),
        datetime(2021, 12, 31, tzinfo=timezone.utc),
    ]


def test_parse_times_with_clock_and_fraction():
    (result,) = parse_times("2006-01-02 15:04:05.000", "2019-03-04 13:14:15.250")
    assert result == datetime(2019, 3, 4, 13, 14, 15, 250000, tzinfo=timezone.utc)


def test_parse_times_with_offset():
    (result,) = parse_times("2006-01-02T15:04:05Z07:00", "2019-03-04T13:14:15+02:00")
    assert result.utcoffset() == timedelta(hours=2)
    assert result.hour == 13


def test_parse_times_month_names():
    (result,) = parse_times("Jan 2 2006", "Mar 7 2018")
    assert (result.year, result.month, result.day) == (2018, 3, 7)


def test_parse_times_invalid_raises():
    with pytest.raises(ValueError):
        parse_times("2006-01-02", "not a date")