"""
Service Factory for the Courtside schedule viewer.

This module builds properly configured service instances with their
dependencies injected, so the UI layer never wires services by hand.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from ..models import RecordStore, TournamentConfig
from ..utils import now_dt
from ..utils.constants import (
    CLOCK_REFRESH_SECONDS, DEFAULT_PREFERENCES_FILE, NOW_REFRESH_SECONDS,
)
from .preferences_service import PreferencesService
from .refresh_ticker import RefreshTicker
from .schedule_loader import ScheduleLoader
from .schedule_session import ScheduleSession

logger = logging.getLogger(__name__)


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    Args:
        config_path: Optional tournament config file; defaults are used without one
        preferences_path: File holding the theme preference
        clock: Callable returning the current time
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        preferences_path: str = DEFAULT_PREFERENCES_FILE,
        clock: Callable[[], datetime] = now_dt,
    ):
        self.config_path = config_path
        self.preferences_path = preferences_path
        self.clock = clock
        self._config: Optional[TournamentConfig] = None
        self._preferences_service: Optional[PreferencesService] = None

    def get_config(self) -> TournamentConfig:
        """Get the singleton tournament configuration."""
        if self._config is None:
            if self.config_path:
                self._config = TournamentConfig.load(self.config_path)
                logger.info("Using tournament config %s", self.config_path)
            else:
                self._config = TournamentConfig()
        return self._config

    def create_session(self, store: RecordStore) -> ScheduleSession:
        """
        Create a ScheduleSession over an already loaded store.

        Args:
            store: Loaded schedule records

        Returns:
            Configured ScheduleSession instance
        """
        return ScheduleSession(store, self.get_config(), clock=self.clock)

    def create_session_from_file(self, schedule_path: str) -> ScheduleSession:
        """
        Load the schedule file and create a session for it.

        Raises:
            ScheduleLoadError: If the schedule cannot be loaded
        """
        return self.create_session(ScheduleLoader.load_from_file(schedule_path))

    def get_preferences_service(self) -> PreferencesService:
        """Get singleton preferences service."""
        if self._preferences_service is None:
            self._preferences_service = PreferencesService(self.preferences_path)
        return self._preferences_service

    def create_now_ticker(self, callback: Callable[[], None]) -> RefreshTicker:
        """Coarse ticker re-evaluating the "now" view."""
        return RefreshTicker(NOW_REFRESH_SECONDS, callback, name="now-refresh")

    def create_clock_ticker(self, callback: Callable[[], None]) -> RefreshTicker:
        """Fine ticker updating the clock display."""
        return RefreshTicker(CLOCK_REFRESH_SECONDS, callback, name="clock")
