# src/exposure_track/session/timer.py

from __future__ import annotations

"""
Countdown for a single ongoing task.

Remaining time is derived from the clock on every read, never from the
number of ticks delivered, so a slow or delayed loop cannot drift.
The tick loop only exists to push updates to a renderer and to notice
expiry.
"""

import asyncio
import contextlib
import logging
import time
from collections.abc import Callable
from enum import Enum

from ..core.ports import Clock

logger = logging.getLogger(__name__)


class TimerState(str, Enum):
    RUNNING = "running"
    EXPIRED = "expired"


class SessionTimer:
    """
    States: running -> expired (terminal). There is no pause.

    The start reference is taken at construction. start() schedules the
    tick loop on the running event loop; stop() cancels it and no tick is
    delivered afterwards. A stopped timer is not restarted: build a new one.
    """

    def __init__(
        self,
        duration_minutes: int,
        *,
        clock: Clock = time.monotonic,
        tick_seconds: float = 1.0,
        on_tick: Callable[[int], None] | None = None,
        on_expire: Callable[[], None] | None = None,
    ) -> None:
        self._total_seconds = max(0, int(duration_minutes)) * 60
        self._clock = clock
        self._started_at = clock()
        self._tick_seconds = max(0.001, float(tick_seconds))
        self._on_tick = on_tick
        self._on_expire = on_expire

        self._runner: asyncio.Task[None] | None = None
        self._stopped = False
        self._expired = False
        self._expire_fired = False

    # ---- queries ----

    @property
    def total_seconds(self) -> int:
        return self._total_seconds

    @property
    def remaining_seconds(self) -> int:
        elapsed = int(self._clock() - self._started_at)
        return max(0, self._total_seconds - elapsed)

    @property
    def expired(self) -> bool:
        if not self._expired and self.remaining_seconds == 0:
            self._expired = True
        return self._expired

    @property
    def state(self) -> TimerState:
        return TimerState.EXPIRED if self.expired else TimerState.RUNNING

    @property
    def is_ticking(self) -> bool:
        return self._runner is not None and not self._runner.done()

    # ---- control ----

    def start(self) -> bool:
        """
        Begin ticking. Must be called from inside a running event loop.

        Returns False (and does nothing) when already ticking or stopped.
        """
        if self._stopped or self.is_ticking:
            return False
        loop = asyncio.get_running_loop()
        self._runner = loop.create_task(self._run())
        logger.debug("Session timer started total=%ss", self._total_seconds)
        return True

    def stop(self) -> None:
        """Cancel ticking. Safe in any state; remaining time is unaffected."""
        self._stopped = True
        if self._runner is not None and not self._runner.done():
            self._runner.cancel()
            logger.debug("Session timer stopped remaining=%ss", self.remaining_seconds)

    async def wait(self) -> None:
        """Wait until the tick loop ends (expired or stopped)."""
        if self._runner is None:
            return
        with contextlib.suppress(asyncio.CancelledError):
            await self._runner

    # ---- loop ----

    async def _run(self) -> None:
        while not self._stopped:
            remaining = self.remaining_seconds
            self._emit_tick(remaining)

            if self.expired:
                self._emit_expire()
                return

            await asyncio.sleep(self._tick_seconds)

    def _emit_tick(self, remaining: int) -> None:
        if self._on_tick is None:
            return
        try:
            self._on_tick(remaining)
        except Exception:
            logger.exception("Timer tick callback failed")

    def _emit_expire(self) -> None:
        if self._expire_fired:
            return
        self._expire_fired = True
        logger.info("Session timer expired after %ss", self._total_seconds)
        if self._on_expire is None:
            return
        try:
            self._on_expire()
        except Exception:
            logger.exception("Timer expire callback failed")


def format_remaining(seconds: int) -> str:
    """MM:SS rendering used by the ongoing-task screen."""
    seconds = max(0, int(seconds))
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"
