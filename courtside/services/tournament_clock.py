"""Tournament clock service for the Courtside schedule viewer."""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from ..models import FilterMode, RecordStore, ScheduleEntry, TournamentConfig
from ..utils import format_date, minutes_of_day
from ..utils.constants import (
    EARLY_VISIBILITY_MIN, UPCOMING_LIMIT,
    HINT_EMPTY, HINT_NORMAL, HINT_TOURNAMENT_OVER, HINT_UPCOMING,
)
from .filter_engine import filter_now

logger = logging.getLogger(__name__)


class TournamentClock:
    """Derives live games, upcoming games and tournament-over state from the time."""

    def __init__(self, store: RecordStore, config: TournamentConfig):
        self.store = store
        self.config = config

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def live_now(self, now: datetime) -> List[ScheduleEntry]:
        """Entries in their live window at ``now``."""
        return filter_now(self.store, now)

    def upcoming(self, now: datetime, limit: int = UPCOMING_LIMIT) -> List[ScheduleEntry]:
        """
        Today's games that are not live yet, soonest first.

        An entry counts as upcoming while ``now`` is strictly before its early
        visibility window. Entries with the same start keep their file order.
        """
        today = format_date(now)
        now_minutes = minutes_of_day(now)

        pending = [
            entry for entry in self.store
            if entry.schedule_date == today
            and entry.start_minutes is not None
            and now_minutes < entry.start_minutes - EARLY_VISIBILITY_MIN
        ]
        pending.sort(key=lambda entry: entry.start_minutes)
        return pending[:max(0, limit)]

    def is_over(self, now: datetime) -> bool:
        """
        Return True once the last game of the last tournament day has ended.

        Days are compared as real dates. On the last day the tournament is over
        when ``now`` is strictly after the latest end time of that day; a last
        day without entries never counts as over.
        """
        final_date = self.config.final_date()
        if final_date is None:
            return False

        today = now.date()
        if today > final_date:
            return True

        first_date = self.config.first_date()
        if first_date is not None and today < first_date:
            return False

        if today != final_date:
            return False

        last_end = self._last_end_minutes(self.config.final_day)
        if last_end is None:
            return False
        return minutes_of_day(now) > last_end

    def render_hint(
        self,
        visible: Sequence[ScheduleEntry],
        mode: FilterMode,
        now: datetime,
    ) -> str:
        """
        Choose how the presentation layer should render a result.

        An empty "now" view distinguishes a finished tournament, a pause before
        the next games and a day with nothing left. Other modes only know empty.
        """
        if visible:
            return HINT_NORMAL
        if mode is not FilterMode.NOW:
            return HINT_EMPTY
        if self.is_over(now):
            return HINT_TOURNAMENT_OVER
        if self.upcoming(now):
            return HINT_UPCOMING
        return HINT_EMPTY

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _last_end_minutes(self, day: Optional[str]) -> Optional[int]:
        ends = [
            entry.end_minutes for entry in self.store.entries_on(day)
            if entry.end_minutes is not None
        ]
        if not ends:
            logger.debug("No readable end times on last day %s", day)
            return None
        return max(ends)
