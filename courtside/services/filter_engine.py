"""
Filter engine for the Courtside schedule viewer.

Pure functions computing the visible subset of the schedule from the entries,
the current FilterState and the current time. Nothing here reads the clock:
``now`` is always passed in.
"""
from datetime import datetime
from typing import Iterable, List, Optional

from ..models import FilterMode, FilterState, ScheduleEntry
from ..utils import format_date, minutes_of_day
from ..utils.constants import EARLY_VISIBILITY_MIN


def is_live(entry: ScheduleEntry, now: datetime) -> bool:
    """
    Check whether an entry belongs in the "now" view.

    An entry is live from ``EARLY_VISIBILITY_MIN`` minutes before its start
    until its end minute, both bounds inclusive, on its own day only.
    """
    if entry.schedule_date != format_date(now):
        return False

    start, end = entry.start_minutes, entry.end_minutes
    if start is None or end is None:
        return False

    now_minutes = minutes_of_day(now)
    return start - EARLY_VISIBILITY_MIN <= now_minutes <= end


def filter_now(entries: Iterable[ScheduleEntry], now: datetime) -> List[ScheduleEntry]:
    """Keep today's entries whose time window covers ``now``."""
    return [entry for entry in entries if is_live(entry, now)]


def filter_by_day(entries: Iterable[ScheduleEntry], day: str) -> List[ScheduleEntry]:
    """Keep entries scheduled on ``day`` (exact string match)."""
    return [entry for entry in entries if entry.schedule_date == day]


def filter_by_courts(entries: Iterable[ScheduleEntry], courts: Iterable[str]) -> List[ScheduleEntry]:
    """
    Keep entries whose court label contains any of the given courts.

    Matching is a substring test on the raw label, so "Court 1" matches
    "Court 1 & Court 2". An empty court selection keeps everything.
    """
    selected = list(courts)
    entries = list(entries)
    if not selected:
        return entries
    return [entry for entry in entries if any(court in entry.court for court in selected)]


def apply_time_filter(
    entries: Iterable[ScheduleEntry],
    mode: FilterMode,
    now: datetime,
    selected_day: Optional[str] = None,
) -> List[ScheduleEntry]:
    """
    Apply the time-mode part of the filter.

    Args:
        entries: Entries to filter, in display order
        mode: Active filter mode
        now: Current wall-clock time
        selected_day: Day chosen in DAY mode; DAY without a day keeps everything

    Returns:
        The entries relevant for ``mode``
    """
    if mode is FilterMode.NOW:
        return filter_now(entries, now)
    if mode is FilterMode.DAY and selected_day:
        return filter_by_day(entries, selected_day)
    return list(entries)


def visible_entries(
    entries: Iterable[ScheduleEntry],
    state: FilterState,
    now: datetime,
) -> List[ScheduleEntry]:
    """Compute the entries to display for ``state`` at ``now``."""
    timed = apply_time_filter(entries, state.mode, now, state.selected_day)
    return filter_by_courts(timed, state.selected_courts)


def available_courts(entries: Iterable[ScheduleEntry]) -> List[str]:
    """
    Distinct individual court names of the given entries, sorted.

    Combined labels are split, so "Court 1 & Court 2" contributes both courts.
    """
    courts = set()
    for entry in entries:
        courts.update(entry.courts())
    return sorted(courts)
