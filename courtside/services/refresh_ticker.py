"""
Periodic refresh ticks for the Courtside schedule viewer.

Two tickers run for the lifetime of the application: a coarse one keeping the
"now" view fresh as games start and end, and a fine one keeping the header
clock current.
"""
import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class RefreshTicker:
    """
    Calls ``callback`` every ``interval`` seconds on a daemon timer thread.

    A failing callback is logged and the ticker keeps running.
    """

    def __init__(self, interval: float, callback: Callable[[], None], name: str = "tick"):
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.interval = interval
        self.callback = callback
        self.name = name
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start ticking; calling start on a running ticker does nothing."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self._schedule()

    def stop(self) -> None:
        """Stop ticking and cancel the pending timer."""
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _schedule(self) -> None:
        self._timer = threading.Timer(self.interval, self._run)
        self._timer.daemon = True
        self._timer.name = f"courtside-{self.name}"
        self._timer.start()

    def _run(self) -> None:
        try:
            self.callback()
        except Exception:
            logger.exception("%s tick failed", self.name)

        with self._lock:
            if self._running:
                self._schedule()
