"""
Courtside schedule viewer

Shows a tournament's game schedule filtered by what is on now, a chosen day,
or everything, narrowed further by court. The schedule is loaded once and
never changes while the viewer runs.

This package provides the filtering and tournament clock logic plus a Flask
web interface for spectators.
"""
from .models import ScheduleEntry, RecordStore, FilterMode, FilterState, TournamentConfig
from .services import ScheduleSession, ScheduleLoader, ScheduleLoadError, visible_entries
from .ui import create_app, run_web_app
from .utils import fmt_clock, now_dt, APP_TITLE

__version__ = "1.0.0"

__all__ = [
    "ScheduleEntry", "RecordStore", "FilterMode", "FilterState", "TournamentConfig",
    "ScheduleSession", "ScheduleLoader", "ScheduleLoadError", "visible_entries",
    "create_app", "run_web_app", "fmt_clock", "now_dt", "APP_TITLE"
]
