"""
ScheduleEntry model for the Courtside schedule viewer.

This module contains the ScheduleEntry dataclass which represents one scheduled
game group: who plays, on which day, in which time window, on which court(s),
and where the group's presentation page lives.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..utils import time_to_minutes
from ..utils.constants import COURT_SEPARATOR, SCHEDULE_FIELDS


@dataclass(frozen=True)
class ScheduleEntry:
    """
    A single scheduled game group.

    Attributes:
        group: Display name of the competing group or team pairing
        schedule_date: Calendar day in ``D.M.YYYY`` form (not zero padded)
        start_time: Start of the time window, ``HH:MM``
        end_time: End of the time window, ``HH:MM``
        court: Court label, possibly several courts joined by ``&``
        presentation_link: URL of the group's presentation page
    """
    group: str
    schedule_date: str
    start_time: str
    end_time: str
    court: str
    presentation_link: str = ""

    @property
    def start_minutes(self) -> Optional[int]:
        """Start time in minutes since midnight (None if unreadable)."""
        return time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> Optional[int]:
        """End time in minutes since midnight (None if unreadable)."""
        return time_to_minutes(self.end_time)

    def courts(self) -> List[str]:
        """
        Split the court label into individual court names.

        Returns:
            Trimmed court names, e.g. ``["Court 1", "Court 2"]`` for
            ``"Court 1 & Court 2"``
        """
        return [part.strip() for part in self.court.split(COURT_SEPARATOR) if part.strip()]

    def to_json(self) -> Dict[str, str]:
        """
        Convert the entry to its wire representation.

        Returns:
            Dictionary keyed by the schedule's field names (``Group``, ...)
        """
        return {wire: getattr(self, attr) for attr, wire in SCHEDULE_FIELDS.items()}

    @staticmethod
    def from_json(data: Dict[str, Any]) -> "ScheduleEntry":
        """
        Create an entry from its wire representation.

        Args:
            data: Dictionary with the ``Group``, ``ScheduleDate``, ``StartTime``,
                  ``EndTime``, ``Court`` and ``PresentationLink`` keys

        Returns:
            New ScheduleEntry instance

        Raises:
            KeyError: If a field is missing
        """
        return ScheduleEntry(**{attr: data[wire] for attr, wire in SCHEDULE_FIELDS.items()})
