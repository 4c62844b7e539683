"""Date parsing utilities."""

import re
from datetime import datetime, time, timedelta
from typing import Optional

from dateutil import parser as date_parser

from ridelog.domain.period import Period

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def parse_date(date_str: str) -> datetime:
    """Parse a date string into a datetime.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "2024-01-15 14:30", "January 15, 2024", etc.
    - Relative dates: "now", "today", "yesterday", "last month", "this year", etc.

    Relative day names resolve to local midnight; "now" keeps the time of day.

    Args:
        date_str: Date string in various formats

    Returns:
        Naive local datetime

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    now = datetime.now()
    today = Period.DAY.date_range(now).start

    relative_dates = {
        "now": now,
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "last/this/next" + period or weekday
    for prefix in ("last ", "this ", "next "):
        if not date_str.startswith(prefix):
            continue
        name = date_str[len(prefix):]

        if name in WEEKDAYS and prefix == "last ":
            days_ago = (today.weekday() - WEEKDAYS.index(name)) % 7
            if days_ago == 0:
                days_ago = 7
            return today - timedelta(days=days_ago)

        try:
            period = Period(name)
        except ValueError:
            break
        current = period.date_range(now)
        if prefix == "last ":
            return period.previous_range(current).start
        if prefix == "next ":
            return current.end
        return current.start

    # Try parsing as absolute date
    try:
        return date_parser.parse(date_str)
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


TIME_ONLY = re.compile(r"^\d{1,2}(:\d{2}){1,2}(\s*[ap]\.?m\.?)?$|^\d{1,2}\s*[ap]\.?m\.?$")


def parse_time_of_day(time_str: str) -> Optional[time]:
    """Parse a bare time of day such as "22:00" or "7:30pm".

    Returns:
        The time, or None if the string carries a date or is not a time

    Raises:
        ValueError: If the string looks like a time but is not a valid one
    """
    time_str = time_str.strip().lower()
    if not TIME_ONLY.match(time_str):
        return None
    try:
        return date_parser.parse(time_str).time()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse time '{time_str}': {e}")
