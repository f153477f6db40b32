"""
Models package for the Courtside schedule viewer.

This package contains the core data models used throughout the application.
"""
from .schedule_entry import ScheduleEntry
from .record_store import RecordStore
from .filter_state import FilterMode, FilterState
from .tournament_config import TournamentConfig, ConfigError

__all__ = [
    "ScheduleEntry", "RecordStore", "FilterMode", "FilterState",
    "TournamentConfig", "ConfigError"
]
