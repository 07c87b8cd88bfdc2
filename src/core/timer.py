"""Recurring auto-advance timer on the asyncio event loop.

Ticks are scheduled at fixed-rate deadlines (start + k * period) with
loop.call_at, so slow callbacks and user navigation never shift the period.
Ticks missed while the loop was blocked are dropped, not replayed.
"""

import asyncio
import math
from collections.abc import Callable

from src.core.errors import InvalidConfigurationError
from src.core.logging import get_logger

logger = get_logger(__name__)


class AutoAdvanceTimer:
    """Fixed-period timer that invokes a callback until cancelled.

    Example:
        timer = AutoAdvanceTimer(10.0, view.on_auto_advance_tick)
        timer.start()  # must be called with a running event loop
        ...
        timer.cancel()
    """

    def __init__(self, interval_seconds: float, callback: Callable[[], None]) -> None:
        if interval_seconds <= 0:
            raise InvalidConfigurationError(
                f"Timer interval must be positive, got {interval_seconds}"
            )
        self._interval = interval_seconds
        self._callback = callback
        self._loop: asyncio.AbstractEventLoop | None = None
        self._handle: asyncio.TimerHandle | None = None
        self._next_deadline = 0.0
        self._cancelled = False
        self.tick_count = 0
        self.dropped_ticks = 0

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._handle is not None and not self._cancelled

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> None:
        """Schedule the first tick one period from now.

        Raises:
            RuntimeError: If no event loop is running or the timer was cancelled.
        """
        if self._cancelled:
            raise RuntimeError("A cancelled timer cannot be restarted")
        if self._handle is not None:
            return

        self._loop = asyncio.get_running_loop()
        self._next_deadline = self._loop.time() + self._interval
        self._handle = self._loop.call_at(self._next_deadline, self._fire)
        logger.debug("timer_started", interval_seconds=self._interval)

    def cancel(self) -> bool:
        """Stop the timer.

        Returns:
            True if this call cancelled the timer, False if it was already
            cancelled.
        """
        if self._cancelled:
            return False
        self._cancelled = True
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.debug("timer_cancelled", ticks=self.tick_count)
        return True

    def _fire(self) -> None:
        if self._cancelled or self._loop is None:
            return

        # Reschedule before running the callback so a raising callback
        # does not stop the timer. Deadlines already in the past are
        # dropped, keeping the original phase.
        self._next_deadline += self._interval
        now = self._loop.time()
        if self._next_deadline <= now:
            missed = math.floor((now - self._next_deadline) / self._interval) + 1
            self._next_deadline += missed * self._interval
            self.dropped_ticks += missed
            logger.debug("timer_ticks_dropped", dropped=missed)
        self._handle = self._loop.call_at(self._next_deadline, self._fire)
        self.tick_count += 1

        # Errors propagate to the loop's exception handler, which reports them.
        self._callback()
