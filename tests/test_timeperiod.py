from datetime import datetime, timedelta, timezone

import pytest

from techan.timeperiod import TimePeriod, TimePeriodParseError, parse


def test_parse_datetime_range():
    period = parse("01/20/2009T12:00:00:01/20/2017T12:00:00")
    start, end = period.start, period.end
    assert (start.year, start.month, start.day) == (2009, 1, 20)
    assert (start.hour, start.minute, start.second) == (12, 0, 0)
    assert (end.year, end.month, end.day) == (2017, 1, 20)
    assert (end.hour, end.minute, end.second) == (12, 0, 0)


def test_parse_datetime_open_ended():
    period = parse("08/15/1991T20:30:00:")
    now = datetime.now(timezone.utc)
    start = period.start
    assert (start.year, start.month, start.day) == (1991, 8, 15)
    assert (start.hour, start.minute, start.second) == (20, 30, 0)
    assert abs(now - period.end) < timedelta(seconds=5)


def test_parse_date_range():
    period = parse("09/01/1773:07/04/1776")
    assert (period.start.year, period.start.month, period.start.day) == (1773, 9, 1)
    assert (period.end.year, period.end.month, period.end.day) == (1776, 7, 4)


def test_parse_date_open_ended():
    period = parse("07/04/1776:")
    now = datetime.now(timezone.utc)
    assert (period.start.year, period.start.month, period.start.day) == (1776, 7, 4)
    assert abs(now - period.end) < timedelta(seconds=5)


def test_parse_invalid_format():
    with pytest.raises(TimePeriodParseError) as info:
        parse("djadk")
    assert str(info.value) == "could not parse timerange string djadk"


def test_parse_invalid_start():
    with pytest.raises(TimePeriodParseError) as info:
        parse("07/04/dksj:")
    assert str(info.value) == "could not parse time string 07/04/dksj"


def test_parse_invalid_end():
    with pytest.raises(TimePeriodParseError) as info:
        parse("07/04/1776:ab/04/1776")
    assert str(info.value) == "could not parse time string ab/04/1776"


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("djadk")


def test_length():
    now = datetime.now(timezone.utc)
    period = TimePeriod(now - timedelta(minutes=10), now)
    assert period.length() == timedelta(minutes=10)


def test_since_zero():
    now = datetime.now(timezone.utc)
    period = TimePeriod(now, now + timedelta(minutes=1))
    previous = TimePeriod(now - timedelta(minutes=1), now)
    assert period.since(previous) == timedelta(0)


def test_since_positive():
    now = datetime.now(timezone.utc)
    period = TimePeriod(now, now + timedelta(minutes=1))
    previous = TimePeriod(now - timedelta(minutes=2), now - timedelta(minutes=1))
    assert period.since(previous) == timedelta(minutes=1)


def test_advance():
    now = datetime.now(timezone.utc)
    period = TimePeriod(now, now + timedelta(minutes=1)).advance(1)
    assert period.start == now + timedelta(minutes=1)
    assert period.end == now + timedelta(minutes=2)


def test_advance_backwards_preserves_length():
    now = datetime.now(timezone.utc)
    original = TimePeriod(now, now + timedelta(hours=1))
    moved = original.advance(-3)
    assert moved.length() == original.length()
    assert moved.start == now - timedelta(hours=3)


def test_spanning():
    start = datetime(2020, 1, 1, tzinfo=timezone.utc)
    period = TimePeriod.spanning(start, timedelta(seconds=1))
    assert period.start == start
    assert period.length() == timedelta(seconds=1)


def test_str_round_trips_through_parse():
    start = datetime(2009, 1, 20, 12, 0, 0, tzinfo=timezone.utc)
    end = datetime(2017, 1, 20, 12, 0, 0, tzinfo=timezone.utc)
    text = str(TimePeriod(start, end))
    parsed = parse(text.replace(" -> ", ":"))
    assert parsed == TimePeriod(start, end)