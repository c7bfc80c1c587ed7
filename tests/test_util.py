"""Tests for point-in-time coercion helpers."""

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from timebound import closed_finite
from timebound.util import DAY, HOUR, parse_timestamp, to_datetime


def test_parse_timestamp_utc():
    dt = parse_timestamp("2022-11-02T01:02:03Z")
    assert dt == datetime(2022, 11, 2, 1, 2, 3, tzinfo=timezone.utc)
    assert dt.utcoffset() == timedelta(0)


def test_parse_timestamp_offset():
    dt = parse_timestamp("2022-11-02T03:02:03+02:00")
    assert dt == datetime(2022, 11, 2, 1, 2, 3, tzinfo=timezone.utc)
    assert dt.utcoffset() == timedelta(hours=2)


def test_parse_timestamp_requires_offset():
    with pytest.raises(ValueError, match="no UTC offset"):
        parse_timestamp("2022-11-02T01:02:03")


def test_parse_timestamp_rejects_garbage():
    with pytest.raises(ValueError, match="Cannot parse timestamp"):
        parse_timestamp("not a timestamp")


def test_to_datetime_passes_aware_datetime_through():
    dt = datetime(2022, 11, 2, 1, 2, 3, tzinfo=timezone.utc)
    assert to_datetime(dt) is dt


def test_to_datetime_rejects_naive_datetime():
    with pytest.raises(TypeError, match="timezone-aware"):
        to_datetime(datetime(2022, 11, 2, 1, 2, 3))


def test_to_datetime_unix_seconds():
    assert to_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert to_datetime(DAY + HOUR) == datetime(1970, 1, 2, 1, tzinfo=timezone.utc)


def test_to_datetime_date_is_midnight_utc():
    assert to_datetime(date(2022, 11, 2)) == datetime(
        2022, 11, 2, tzinfo=timezone.utc
    )


def test_to_datetime_string():
    assert to_datetime("2022-11-02T01:02:03Z") == datetime(
        2022, 11, 2, 1, 2, 3, tzinfo=timezone.utc
    )


@pytest.mark.parametrize("value", [True, 1.5, None, [2022, 11, 2]])
def test_to_datetime_rejects_unsupported_types(value):
    with pytest.raises(TypeError, match="must be int, datetime, date, or str"):
        to_datetime(value)


def test_to_datetime_feeds_endpoints():
    """Coerced values build endpoints that compare by instant."""
    assert closed_finite(to_datetime(1667350923)) == closed_finite(
        to_datetime("2022-11-02T01:02:03Z")
    )


def test_coercion_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="timebound.util")
    to_datetime(0)
    to_datetime(date(2022, 11, 2))
    assert "Unix seconds" in caplog.text
    assert "midnight UTC" in caplog.text


@pytest.mark.parametrize("seconds", [10**20, -(10**20)])
def test_to_datetime_rejects_out_of_range_seconds(seconds):
    with pytest.raises(ValueError, match="out of range"):
        to_datetime(seconds)
