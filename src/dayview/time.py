# SPDX-License-Identifier: MIT

import datetime
from typing import Optional

import pendulum

MINUTES_PER_DAY = 24 * 60


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def minutes_since_midnight(instant: datetime.datetime) -> int:
    """Wall-clock minutes elapsed since midnight, in [0, 1440)."""
    return instant.hour * 60 + instant.minute


def end_minutes(
    start: datetime.datetime, end: Optional[datetime.datetime]
) -> Optional[int]:
    """
    Minutes since midnight for the end of an interval.

    An end that falls on midnight is read as the end of the day (1440) when it
    lies after the start or when the start is later in the day. An end equal to
    a midnight start stays 0.
    """
    if end is None:
        return None
    minutes = minutes_since_midnight(end)
    if minutes == 0 and (end > start or minutes_since_midnight(start) > 0):
        return MINUTES_PER_DAY
    return minutes


def to_local(value: datetime.datetime) -> pendulum.DateTime:
    """Wrap a datetime as a local pendulum.DateTime keeping its wall-clock fields."""
    if isinstance(value, pendulum.DateTime):
        return value
    return pendulum.instance(value, tz="local")


def to_date(value: datetime.date) -> pendulum.Date:
    if isinstance(value, datetime.datetime):
        value = value.date()
    return pendulum.Date(value.year, value.month, value.day)


def start_of_day(day: datetime.date) -> pendulum.DateTime:
    date = to_date(day)
    return pendulum.datetime(date.year, date.month, date.day, tz="local")


def datetime_from_str(datetime_str: str) -> pendulum.DateTime:
    """Parse an ISO-ish string as a local wall-clock datetime."""
    parsed = pendulum.parse(datetime_str, tz="local")
    if isinstance(parsed, pendulum.DateTime):
        return parsed
    if isinstance(parsed, pendulum.Date):
        return start_of_day(parsed)
    raise ValueError(f"'{datetime_str}' is not a date or datetime")


def datetime_from_value(value: object) -> pendulum.DateTime:
    """Convert a YAML scalar (string, timestamp or date) to a local datetime."""
    if isinstance(value, datetime.datetime):
        return to_local(value)
    if isinstance(value, datetime.date):
        return start_of_day(value)
    if isinstance(value, str):
        return datetime_from_str(value)
    raise ValueError(f"unsupported datetime value: {value!r}")


def datetime_from_value_optional(value: object) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    return datetime_from_value(value)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def minutes_to_clock_str(minutes: int) -> str:
    """Format minutes since midnight as HH:mm (1440 renders as 24:00)."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"

