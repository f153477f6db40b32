"""
Services package for the Courtside schedule viewer.

This package contains service classes that handle business logic: the pure
filter engine, the tournament clock, filter state transitions and the
viewing session that ties them together.
"""
from .filter_engine import (
    visible_entries, apply_time_filter, filter_now, filter_by_day,
    filter_by_courts, available_courts
)
from .tournament_clock import TournamentClock
from .filter_state_service import FilterStateService
from .schedule_loader import ScheduleLoader, ScheduleLoadError
from .schedule_session import ScheduleSession, RenderUpdate
from .preferences_service import PreferencesService
from .refresh_ticker import RefreshTicker
from .service_factory import ServiceFactory

__all__ = [
    "visible_entries", "apply_time_filter", "filter_now", "filter_by_day",
    "filter_by_courts", "available_courts", "TournamentClock",
    "FilterStateService", "ScheduleLoader", "ScheduleLoadError",
    "ScheduleSession", "RenderUpdate", "PreferencesService",
    "RefreshTicker", "ServiceFactory"
]
