"""
Record store for the Courtside schedule viewer.

The store is filled once when the session starts and is read-only afterwards.
"""
from typing import Iterable, Iterator, List, Tuple

from .schedule_entry import ScheduleEntry


class RecordStore:
    """Write-once, read-many collection of schedule entries."""

    def __init__(self, entries: Iterable[ScheduleEntry] = ()):
        self._entries: Tuple[ScheduleEntry, ...] = tuple(entries)

    @property
    def entries(self) -> Tuple[ScheduleEntry, ...]:
        """All entries in their original order."""
        return self._entries

    def entries_on(self, day: str) -> List[ScheduleEntry]:
        """Entries scheduled on ``day`` (exact ``D.M.YYYY`` match)."""
        return [entry for entry in self._entries if entry.schedule_date == day]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ScheduleEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"RecordStore(entries={len(self._entries)})"
