from datetime import datetime, timedelta, timezone

import pytest

from chartcore.parse import parse_floats, parse_times


def test_parse_floats_simple():
    assert parse_floats("1", "2.5", "-3") == [1.0, 2.5, -3.0]


def test_parse_floats_removes_commas():
    assert parse_floats("1,000") == [1000.0]


def test_parse_floats_skips_blank_entries():
    assert parse_floats("", "   ", "4") == [4.0]


def test_parse_floats_none_given():
    assert parse_floats() == []


def test_parse_floats_invalid_raises():
    with pytest.raises(ValueError):
        parse_floats("1", "abc")


def test_parse_floats_round_trip():
    values = [0.5, 12.25, -7.125, 1e10]
    assert parse_floats(*(repr(v) for v in values)) == values


def test_parse_times_date_only_is_utc():
    result = parse_times("2006-01-02", "2021-03-04")
    assert result == [datetime(2021, 3, 4, tzinfo=timezone.utc)]


def test_parse_times_with_offset():
    result = parse_times("2006-01-02T15:04:05Z07:00", "2021-03-04T05:06:07+02:00")
    assert result == [datetime(2021, 3, 4, 5, 6, 7, tzinfo=timezone(timedelta(hours=2)))]


def test_parse_times_zulu():
    result = parse_times("2006-01-02T15:04:05Z07:00", "2021-03-04T05:06:07Z")
    assert result[0].utcoffset() == timedelta(0)
    assert result[0].hour == 5


def test_parse_times_month_names():
    result = parse_times("Jan 2, 2006", "Mar 4, 2021")
    assert result == [datetime(2021, 3, 4, tzinfo=timezone.utc)]


def test_parse_times_round_trip():
    moments = [
        datetime(2019, 12, 31, 23, 59, 58, tzinfo=timezone.utc),
        datetime(2000, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
    ]
    texts = [m.strftime("%Y-%m-%d %H:%M:%S") for m in moments]
    assert parse_times("2006-01-02 15:04:05", *texts) == moments


def test_parse_times_fractional_seconds_round_trip():
    moment = datetime(2020, 5, 6, 7, 8, 9, 123000, tzinfo=timezone.utc)
    text = moment.strftime("%Y-%m-%d %H:%M:%S.") + f"{moment.microsecond // 1000:03d}"
    assert parse_times("2006-01-02 15:04:05.000", text) == [moment]


def test_parse_times_mismatch_raises():
    with pytest.raises(ValueError):
        parse_times("2006-01-02", "not a date")