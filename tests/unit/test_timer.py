"""Tests for the auto-advance timer."""

import asyncio
import time
from unittest.mock import patch

import pytest

from src.core.errors import InvalidConfigurationError
from src.core.timer import AutoAdvanceTimer

INTERVAL = 0.02


class TestTimerSetup:
    """Tests for timer construction and lifecycle flags."""

    @pytest.mark.parametrize("interval", [0, -0.5])
    def test_rejects_non_positive_interval(self, interval: float) -> None:
        """Should refuse an interval that would never tick."""
        with pytest.raises(InvalidConfigurationError):
            AutoAdvanceTimer(interval, lambda: None)

    def test_not_running_before_start(self) -> None:
        """Should report idle until started."""
        timer = AutoAdvanceTimer(INTERVAL, lambda: None)
        assert timer.running is False
        assert timer.cancelled is False
        assert timer.tick_count == 0

    def test_start_requires_running_loop(self) -> None:
        """Should raise when started outside an event loop."""
        timer = AutoAdvanceTimer(INTERVAL, lambda: None)
        with pytest.raises(RuntimeError):
            timer.start()

    def test_cancel_before_start(self) -> None:
        """Should cancel cleanly even if it never started."""
        timer = AutoAdvanceTimer(INTERVAL, lambda: None)
        assert timer.cancel() is True
        assert timer.cancelled is True


class TestTimerTicks:
    """Tests that need a running event loop."""

    @pytest.mark.asyncio
    async def test_ticks_repeatedly(self) -> None:
        """Should invoke the callback once per period until cancelled."""
        ticks: list[int] = []
        timer = AutoAdvanceTimer(INTERVAL, lambda: ticks.append(1))
        timer.start()
        assert timer.running is True

        await asyncio.sleep(INTERVAL * 5)
        timer.cancel()

        assert len(ticks) >= 2
        assert timer.tick_count == len(ticks)

    @pytest.mark.asyncio
    async def test_no_tick_before_first_period(self) -> None:
        """Should wait a full period before the first tick."""
        ticks: list[int] = []
        timer = AutoAdvanceTimer(1.0, lambda: ticks.append(1))
        timer.start()
        await asyncio.sleep(0)
        timer.cancel()
        assert ticks == []

    @pytest.mark.asyncio
    async def test_cancel_stops_ticks(self) -> None:
        """Should not fire after cancel."""
        ticks: list[int] = []
        timer = AutoAdvanceTimer(INTERVAL, lambda: ticks.append(1))
        timer.start()
        await asyncio.sleep(INTERVAL * 3)
        timer.cancel()
        count_at_cancel = len(ticks)

        await asyncio.sleep(INTERVAL * 4)
        assert len(ticks) == count_at_cancel
        assert timer.running is False

    @pytest.mark.asyncio
    async def test_cancel_happens_once(self) -> None:
        """Should report True for the first cancel only."""
        timer = AutoAdvanceTimer(INTERVAL, lambda: None)
        timer.start()
        assert timer.cancel() is True
        assert timer.cancel() is False

    @pytest.mark.asyncio
    async def test_cannot_restart_after_cancel(self) -> None:
        """Should refuse to start again once cancelled."""
        timer = AutoAdvanceTimer(INTERVAL, lambda: None)
        timer.start()
        timer.cancel()
        with pytest.raises(RuntimeError):
            timer.start()

    @pytest.mark.asyncio
    async def test_second_start_is_noop(self) -> None:
        """Should not double-schedule when started twice."""
        ticks: list[int] = []
        timer = AutoAdvanceTimer(1.0, lambda: ticks.append(1))
        timer.start()
        timer.start()
        timer.cancel()
        assert ticks == []

    @pytest.mark.asyncio
    async def test_callback_can_cancel_timer(self) -> None:
        """Should stop cleanly when the callback cancels it."""
        holder: dict[str, AutoAdvanceTimer] = {}
        ticks: list[int] = []

        def on_tick() -> None:
            ticks.append(1)
            holder["timer"].cancel()

        timer = AutoAdvanceTimer(INTERVAL, on_tick)
        holder["timer"] = timer
        timer.start()
        await asyncio.sleep(INTERVAL * 5)

        assert ticks == [1]
        assert timer.cancelled is True

    @pytest.mark.asyncio
    async def test_failing_callback_keeps_schedule(self) -> None:
        """Should keep ticking after the callback raises."""
        calls: list[int] = []

        def flaky() -> None:
            calls.append(1)
            if len(calls) == 1:
                raise ValueError("render target gone")

        loop = asyncio.get_running_loop()
        errors: list[dict] = []
        loop.set_exception_handler(lambda _loop, context: errors.append(context))
        try:
            timer = AutoAdvanceTimer(INTERVAL, flaky)
            timer.start()
            await asyncio.sleep(INTERVAL * 6)
            timer.cancel()
        finally:
            loop.set_exception_handler(None)

        assert len(calls) >= 2
        assert isinstance(errors[0]["exception"], ValueError)

    @pytest.mark.asyncio
    async def test_failing_callback_reported_once(self) -> None:
        """Should leave error reporting to the event loop alone."""
        def broken() -> None:
            raise ValueError("render target gone")

        loop = asyncio.get_running_loop()
        errors: list[dict] = []
        loop.set_exception_handler(lambda _loop, context: errors.append(context))
        try:
            with patch("src.core.timer.logger") as mock_logger:
                timer = AutoAdvanceTimer(INTERVAL, broken)
                timer.start()
                await asyncio.sleep(INTERVAL * 1.5)
                timer.cancel()
        finally:
            loop.set_exception_handler(None)

        assert len(errors) == timer.tick_count >= 1
        mock_logger.exception.assert_not_called()
        mock_logger.error.assert_not_called()


class TestBlockedLoop:
    """Ticks missed while the event loop was blocked are not replayed."""

    SLOW_INTERVAL = 0.05

    @pytest.mark.asyncio
    async def test_missed_ticks_are_dropped(self) -> None:
        """Should fire once after a stall of about six periods."""
        ticks: list[int] = []
        timer = AutoAdvanceTimer(self.SLOW_INTERVAL, lambda: ticks.append(1))
        timer.start()

        time.sleep(self.SLOW_INTERVAL * 6.2)  # blocks the event loop
        await asyncio.sleep(self.SLOW_INTERVAL * 0.2)
        timer.cancel()

        assert len(ticks) == 1
        assert timer.dropped_ticks >= 5

    @pytest.mark.asyncio
    async def test_phase_kept_after_stall(self) -> None:
        """Should keep the next deadline on the original period grid."""
        timer = AutoAdvanceTimer(self.SLOW_INTERVAL, lambda: None)
        timer.start()
        start = timer._next_deadline - self.SLOW_INTERVAL

        time.sleep(self.SLOW_INTERVAL * 3.5)
        await asyncio.sleep(0.01)
        deadline = timer._next_deadline
        timer.cancel()

        periods = (deadline - start) / self.SLOW_INTERVAL
        assert periods == pytest.approx(round(periods))
        assert deadline > start + self.SLOW_INTERVAL * 3.5
