"""
Viewing session for the Courtside schedule viewer.

A ScheduleSession owns the record store, the filter state and the tournament
clock for one viewer. User actions and clock ticks recompute the visible
entries and notify every subscribed listener; the session never renders
anything itself.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union

from ..models import FilterMode, FilterState, RecordStore, ScheduleEntry, TournamentConfig
from ..utils import now_dt
from ..utils.constants import HINT_UPCOMING
from .filter_engine import apply_time_filter, available_courts, filter_by_courts
from .filter_state_service import FilterStateService
from .tournament_clock import TournamentClock

logger = logging.getLogger(__name__)

Listener = Callable[[List[ScheduleEntry], str, Dict[str, Any]], None]


@dataclass
class RenderUpdate:
    """Result of one recomputation, as handed to listeners."""
    entries: List[ScheduleEntry]
    hint: str
    state: FilterState
    available_courts: List[str] = field(default_factory=list)
    upcoming: List[ScheduleEntry] = field(default_factory=list)

    def payload(self) -> Dict[str, Any]:
        """Extra render data passed alongside the entries and hint."""
        data: Dict[str, Any] = {
            "available_courts": list(self.available_courts),
            "state": self.state.to_json(),
        }
        if self.hint == HINT_UPCOMING:
            data["upcoming"] = list(self.upcoming)
        return data

    def to_json(self) -> Dict[str, Any]:
        return {
            "entries": [entry.to_json() for entry in self.entries],
            "hint": self.hint,
            "state": self.state.to_json(),
            "available_courts": list(self.available_courts),
            "upcoming": [entry.to_json() for entry in self.upcoming],
        }


class ScheduleSession:
    """
    Controller tying the filter state to the filter engine.

    Args:
        store: Loaded schedule records
        config: Tournament calendar
        clock: Callable returning the current time (injectable for tests)
    """

    def __init__(
        self,
        store: RecordStore,
        config: Optional[TournamentConfig] = None,
        clock: Callable[[], datetime] = now_dt,
    ):
        self.store = store
        self.config = config or TournamentConfig()
        self.state = FilterState()
        self.clock = clock
        self.transitions = FilterStateService(self.state, self.config)
        self.tournament_clock = TournamentClock(store, self.config)
        self._listeners: List[Listener] = []
        self._last_update: Optional[RenderUpdate] = None

    # ------------------------------------------------------------------
    # Observer wiring
    # ------------------------------------------------------------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a render listener.

        Returns:
            Callable removing the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def start(self, now: Optional[datetime] = None) -> RenderUpdate:
        """Show the initial "now" view."""
        return self.set_mode(FilterMode.NOW, now)

    def set_mode(self, mode: Union[FilterMode, str], now: Optional[datetime] = None) -> RenderUpdate:
        now = now or self.clock()
        self.transitions.set_mode(mode, now)
        return self.refresh(now)

    def select_day(self, day: str, now: Optional[datetime] = None) -> RenderUpdate:
        self.transitions.select_day(day)
        return self.refresh(now)

    def toggle_court(self, court: str, now: Optional[datetime] = None) -> RenderUpdate:
        self.transitions.toggle_court(court)
        return self.refresh(now)

    def tick(self, now: Optional[datetime] = None) -> Optional[RenderUpdate]:
        """
        Periodic refresh; only the "now" view changes with the clock.

        Returns:
            The new update, or None when the current mode is time-independent
        """
        if self.state.mode is not FilterMode.NOW:
            return None
        return self.refresh(now)

    # ------------------------------------------------------------------
    # Recomputation
    # ------------------------------------------------------------------
    def refresh(self, now: Optional[datetime] = None) -> RenderUpdate:
        """Recompute the visible entries and notify listeners."""
        now = now or self.clock()
        update = self.compute(now)
        self._last_update = update
        self._notify(update)
        return update

    def compute(self, now: datetime) -> RenderUpdate:
        """Compute what to show at ``now`` without notifying anyone."""
        timed = apply_time_filter(self.store, self.state.mode, now, self.state.selected_day)
        visible = filter_by_courts(timed, self.state.selected_courts)
        hint = self.tournament_clock.render_hint(visible, self.state.mode, now)
        upcoming = self.tournament_clock.upcoming(now) if hint == HINT_UPCOMING else []

        return RenderUpdate(
            entries=visible,
            hint=hint,
            state=self.state.copy(),
            available_courts=available_courts(timed),
            upcoming=upcoming,
        )

    def current_update(self) -> RenderUpdate:
        """The last computed update, computing one if none exists yet."""
        if self._last_update is None:
            return self.refresh()
        return self._last_update

    def _notify(self, update: RenderUpdate) -> None:
        payload = update.payload()
        for listener in list(self._listeners):
            listener(list(update.entries), update.hint, payload)
        logger.debug(
            "Filter %s: %d visible, hint=%s",
            update.state.mode.value, len(update.entries), update.hint,
        )
