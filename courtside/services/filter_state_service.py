"""
Filter state transitions for the Courtside schedule viewer.

All changes to a FilterState go through this service. The rules:

* any mode change clears the court selection;
* leaving DAY mode clears the selected day;
* entering DAY mode without a day picks today when it is a tournament day,
  otherwise the first tournament day, otherwise falls back to ALL;
* selecting a day clears the court selection;
* toggling a court never touches the mode or the day.
"""
import logging
from datetime import datetime
from typing import Union

from ..models import FilterMode, FilterState, TournamentConfig
from ..utils import format_date

logger = logging.getLogger(__name__)


class FilterStateService:
    """Service applying user actions to a FilterState."""

    def __init__(self, state: FilterState, config: TournamentConfig):
        self.state = state
        self.config = config

    @staticmethod
    def parse_mode(mode: Union[FilterMode, str]) -> FilterMode:
        """
        Convert a mode name to a FilterMode.

        Raises:
            ValueError: If the name is not one of ``now``, ``day``, ``all``
        """
        if isinstance(mode, FilterMode):
            return mode
        try:
            return FilterMode(str(mode).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown filter mode: {mode!r}") from None

    def set_mode(self, mode: Union[FilterMode, str], now: datetime) -> FilterMode:
        """
        Switch the time filter.

        Args:
            mode: Requested mode
            now: Current time, used to pick a day when entering DAY mode

        Returns:
            The mode actually in effect afterwards (DAY may fall back to ALL)
        """
        mode = self.parse_mode(mode)
        self.state.mode = mode
        self.state.selected_courts.clear()

        if mode is not FilterMode.DAY:
            self.state.selected_day = None
            return mode

        if self.state.selected_day:
            return mode

        today = format_date(now)
        if today in self.config.days:
            self.select_day(today)
        elif self.config.days:
            self.select_day(self.config.days[0])
        else:
            logger.info("No tournament days configured, showing all games instead")
            return self.set_mode(FilterMode.ALL, now)
        return mode

    def select_day(self, day: str) -> None:
        """
        Choose the day shown in DAY mode and reset the court selection.

        Day buttons only exist in DAY mode, so a selection made from another
        mode switches to DAY as well.
        """
        self.state.mode = FilterMode.DAY
        self.state.selected_day = day
        self.state.selected_courts.clear()

    def toggle_court(self, court: str) -> bool:
        """
        Add or remove a court from the selection.

        Returns:
            True if the court is selected after the toggle
        """
        if court in self.state.selected_courts:
            self.state.selected_courts.discard(court)
            return False
        self.state.selected_courts.add(court)
        return True
