"""
Date and time helpers for the Courtside schedule viewer.

Schedule dates are literal ``D.M.YYYY`` strings (not zero padded) and times
are ``HH:MM`` strings. Nothing here knows about time zones: a schedule is
always read in local wall-clock time.
"""
from datetime import date, datetime
from typing import Optional


def now_dt() -> datetime:
    """
    Get the current local wall-clock time.

    Returns:
        Naive datetime for "now"
    """
    return datetime.now()


def format_date(moment) -> str:
    """
    Format a date or datetime in the schedule's ``D.M.YYYY`` form.

    Example:
        >>> format_date(date(2026, 1, 9))
        '9.1.2026'
    """
    return f"{moment.day}.{moment.month}.{moment.year}"


def format_time(moment: datetime) -> str:
    """
    Format a datetime as a zero padded ``HH:MM`` string.

    Example:
        >>> format_time(datetime(2026, 1, 9, 8, 5))
        '08:05'
    """
    return f"{moment.hour:02d}:{moment.minute:02d}"


def fmt_clock(moment: datetime) -> str:
    """Format the header clock, e.g. ``'14:07 (10.1.2026)'``."""
    return f"{format_time(moment)} ({format_date(moment)})"


def minutes_of_day(moment: datetime) -> int:
    """Minutes elapsed since midnight, ignoring seconds."""
    return moment.hour * 60 + moment.minute


def time_to_minutes(value: str) -> Optional[int]:
    """
    Convert an ``HH:MM`` string to minutes since midnight.

    Args:
        value: Time string from a schedule record

    Returns:
        Minutes since midnight, or None when the string cannot be read
    """
    try:
        hours, minutes = value.split(":")
        return int(hours) * 60 + int(minutes)
    except (AttributeError, ValueError):
        return None


def parse_schedule_date(value: str) -> Optional[date]:
    """
    Parse a ``D.M.YYYY`` string into a real date.

    Returns:
        The parsed date, or None if the string is not a valid date
    """
    try:
        day, month, year = (int(part) for part in value.split("."))
        return date(year, month, day)
    except (AttributeError, ValueError):
        return None
