"""
Utilities package for the Courtside schedule viewer.

This package contains utility functions used throughout the application.
"""
from .time_utils import (
    now_dt, format_date, format_time, fmt_clock,
    minutes_of_day, time_to_minutes, parse_schedule_date
)
from .constants import (
    APP_TITLE, DEFAULT_TOURNAMENT_DAYS, EARLY_VISIBILITY_MIN, UPCOMING_LIMIT,
    NOW_REFRESH_SECONDS, CLOCK_REFRESH_SECONDS
)

__all__ = [
    "now_dt", "format_date", "format_time", "fmt_clock",
    "minutes_of_day", "time_to_minutes", "parse_schedule_date",
    "APP_TITLE", "DEFAULT_TOURNAMENT_DAYS", "EARLY_VISIBILITY_MIN",
    "UPCOMING_LIMIT", "NOW_REFRESH_SECONDS", "CLOCK_REFRESH_SECONDS"
]
