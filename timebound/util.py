"""Utility constants and helpers for timebound.

Time unit constants represent durations in seconds. The coercion helpers
turn the point-in-time representations callers tend to have (Unix seconds,
dates, RFC3339 strings) into the timezone-aware datetimes endpoints hold.
"""

import logging
from datetime import date, datetime, time, timezone

from dateutil.parser import isoparse

logger = logging.getLogger(__name__)

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800


def parse_timestamp(text: str) -> datetime:
    """Parse an RFC3339 timestamp into a timezone-aware datetime.

    Raises:
        ValueError: If the text is not ISO-8601 or carries no UTC offset
    """
    try:
        dt = isoparse(text)
    except (ValueError, OverflowError) as e:
        raise ValueError(
            f"Cannot parse timestamp {text!r}: {e}\n"
            f"Expected RFC3339, e.g. '2022-11-02T01:02:03Z' "
            f"or '2022-11-02T01:02:03+02:00'"
        ) from e
    if dt.tzinfo is None:
        raise ValueError(
            f"Timestamp {text!r} has no UTC offset.\n"
            f"Hint: append 'Z' for UTC or an explicit offset like '+02:00'"
        )
    return dt


def to_datetime(value: object) -> datetime:
    """Convert a point-in-time value to a timezone-aware datetime.

    Accepts:
    - datetime: Must be timezone-aware, returned as-is
    - int: Unix timestamp in seconds, interpreted as UTC
    - date: Midnight UTC of that day
    - str: RFC3339 timestamp, see parse_timestamp()

    Raises:
        TypeError: If value is an unsupported type or naive datetime
        ValueError: If a string cannot be parsed
    """
    # datetime before date: datetime is a date subclass
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"Point in time must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return value
    # bool is an int subclass but never a timestamp
    if isinstance(value, int) and not isinstance(value, bool):
        logger.debug("Coercing Unix seconds %d to UTC datetime", value)
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(
                f"Unix timestamp {value} is out of range: {e}\n"
                f"Hint: pass seconds (not milliseconds) since 1970-01-01 UTC"
            ) from e
    if isinstance(value, date):
        logger.debug("Coercing date %s to midnight UTC", value)
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        logger.debug("Parsing timestamp %r", value)
        return parse_timestamp(value)
    raise TypeError(
        f"Point in time must be int, datetime, date, or str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  to_datetime(1667350923)  # int (Unix seconds)\n"
        f"  to_datetime(datetime(2022,11,2,tzinfo=timezone.utc))  "
        f"# timezone-aware datetime\n"
        f"  to_datetime(date(2022,11,2))  # date object\n"
        f"  to_datetime('2022-11-02T01:02:03Z')  # RFC3339 string"
    )
