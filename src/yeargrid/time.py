# SPDX-License-Identifier: MIT

import datetime as dt
from typing import Any, Iterator, Optional

import pendulum

DATE_KEY_FORMAT = "YYYY-MM-DD"


def date_from_str(date_str: Any) -> Optional[pendulum.Date]:
    """
    Parse a 'YYYY-MM-DD' string to a pendulum.Date, or None if it is not a valid calendar date.

    YAML loaders hand unquoted dates over as date or datetime objects; those
    are accepted as they are. Any other type gives None.
    """
    if isinstance(date_str, dt.datetime):
        return pendulum.instance(date_str).date()
    if isinstance(date_str, dt.date):
        return pendulum.date(date_str.year, date_str.month, date_str.day)
    if not isinstance(date_str, str) or not date_str:
        return None
    try:
        parsed = pendulum.parse(date_str, exact=True)
    except ValueError:
        return None
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if isinstance(parsed, pendulum.Date):
        return parsed
    return None


def datetime_from_str(
    datetime_str: Any, tz: Optional[str] = None
) -> Optional[pendulum.DateTime]:
    """
    Parse an ISO date-time string (or a datetime loaded from YAML).

    When tz is given, a value without an offset is read as wall time in tz
    and one with an offset is converted to tz. Otherwise the wall clock
    written in the value is kept as-is.
    """
    if not isinstance(tz, str):
        tz = None
    try:
        if isinstance(datetime_str, dt.datetime):
            parsed = pendulum.instance(datetime_str, tz=tz or pendulum.UTC)
        elif isinstance(datetime_str, str) and datetime_str:
            parsed = pendulum.parse(datetime_str, exact=True, tz=tz or pendulum.UTC)
        else:
            return None
        if not isinstance(parsed, pendulum.DateTime):
            return None
        if tz is not None:
            parsed = parsed.in_tz(tz)
    except ValueError:
        return None
    return parsed


def date_to_key(date: pendulum.Date) -> str:
    return date.format(DATE_KEY_FORMAT)


def date_key_from_parts(year: int, month: int, day: int) -> str:
    return f"{year:04d}-{month:02d}-{day:02d}"


def shift_date_key(date_str: str, days: int) -> Optional[str]:
    date = date_from_str(date_str)
    if date is None:
        return None
    return date_to_key(date.add(days=days))


def day_span(start_str: str, end_str: str) -> Optional[int]:
    """Signed number of calendar days from start to end, None if either is malformed."""
    start = date_from_str(start_str)
    end = date_from_str(end_str)
    if start is None or end is None:
        return None
    return end.toordinal() - start.toordinal()


def days_in_month(year: int, month_index: int) -> int:
    """Days in a month, month_index is zero-based."""
    return pendulum.date(year, month_index + 1, 1).days_in_month


def iter_dates(start: pendulum.Date, end: pendulum.Date) -> Iterator[pendulum.Date]:
    """Yield every date from start to end inclusive."""
    current = start
    while current <= end:
        yield current
        current = current.add(days=1)


def minutes_from_midnight(datetime: pendulum.DateTime) -> int:
    return datetime.hour * 60 + datetime.minute


def datetime_to_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.format("HH:mm")


def time_str_to_display(time_str: str) -> str:
    """Convert 'HH:MM' (24h) to a display string like '9:00 AM'."""
    hours, minutes = map(int, time_str.split(":"))
    period = "PM" if hours >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{minutes:02d} {period}"


def date_key_to_display(date_str: str) -> str:
    date = date_from_str(date_str)
    if date is None:
        return "Date unavailable"
    return date.format("ddd, MMM D")
