"""Repeating recomputation of an age breakdown against a live clock.

The ticker owns the schedule and the clock; ``compute_age`` stays a pure
function of the two instants it is given.
"""

import datetime
import logging
import threading
from typing import Callable

from birthday_insights.age import AgeBreakdown, compute_age
from birthday_insights.config import settings

logger: logging.Logger = logging.getLogger(__name__)


class AgeTicker:
    """Recompute ``compute_age(birth, clock())`` every *interval* seconds.

    *interval* defaults to ``settings.refresh_interval``.

    Example::

        with AgeTicker(birth, callback=render) as ticker:
            ...  # render() is called now and then once per minute
    """

    def __init__(
        self,
        birth: datetime.date,
        callback: Callable[[AgeBreakdown], None],
        interval: float | None = None,
        clock: Callable[[], datetime.date] = datetime.datetime.now,
    ) -> None:
        interval = settings.refresh_interval if interval is None else interval
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.birth = birth
        self.callback = callback
        self.interval = interval
        self.clock = clock
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def tick(self) -> AgeBreakdown:
        """Recompute once against the injected clock and notify the callback."""
        breakdown = compute_age(self.birth, self.clock())
        self.callback(breakdown)
        return breakdown

    def start(self) -> None:
        """Run one tick immediately, then schedule the repeating timer."""
        with self._lock:
            if self._running:
                return
            self._running = True
        logger.debug("AgeTicker started with interval=%.1fs", self.interval)
        try:
            self.tick()
        except Exception:
            with self._lock:
                self._running = False
            raise
        self._schedule()

    def stop(self) -> None:
        """Cancel the pending timer.  Safe to call more than once."""
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        logger.debug("AgeTicker stopped")

    def _schedule(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._timer = threading.Timer(self.interval, self._run)
            self._timer.daemon = True
            self._timer.start()

    def _run(self) -> None:
        if not self._running:
            return
        try:
            self.tick()
        finally:
            self._schedule()

    def __enter__(self) -> "AgeTicker":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
