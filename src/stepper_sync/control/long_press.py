"""Cooperative auto-repeat loop for held increment/decrement buttons."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class LongPressRepeater:
    """Re-issue a tick at a fixed cadence while a button is held.

    ``start`` spawns a task that waits ``initial_delay_s`` and then calls
    ``tick`` every ``interval_s``. Each wait races a cancellation event, so
    ``stop`` takes effect at the next suspension point. ``tick`` returns
    ``False`` when the step is no longer feasible, which ends the session.
    """

    def __init__(
        self,
        *,
        initial_delay_s: float,
        interval_s: float,
        log_enabled: bool = False,
    ) -> None:
        assert interval_s > 0, "long press interval must be positive"
        self._initial_delay_s = max(0.0, float(initial_delay_s))
        self._interval_s = float(interval_s)
        self._log_enabled = bool(log_enabled)
        self._task: Optional[asyncio.Task[None]] = None
        self._stop: Optional[asyncio.Event] = None
        self._ticks = 0

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def ticks(self) -> int:
        """Ticks issued by the current (or most recent) session."""

        return self._ticks

    @property
    def task(self) -> Optional[asyncio.Task[None]]:
        return self._task

    def start(self, tick: Callable[[], bool], *, label: str = "") -> asyncio.Task[None]:
        self.stop()
        stop = asyncio.Event()
        self._stop = stop
        self._ticks = 0
        self._task = asyncio.get_running_loop().create_task(self._run(tick, stop, label))
        return self._task

    def stop(self) -> None:
        stop = self._stop
        self._stop = None
        if stop is not None and not stop.is_set():
            stop.set()

    def cancel(self) -> None:
        """Stop and cancel the task outright (disposal)."""

        self.stop()
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()

    # ------------------------------------------------------------------
    async def _run(self, tick: Callable[[], bool], stop: asyncio.Event, label: str) -> None:
        if await self._wait(stop, self._initial_delay_s):
            self._log("long press %s released before repeat", label)
            return
        while not stop.is_set():
            if not tick():
                self._log("long press %s ended: infeasible after %d ticks", label, self._ticks)
                break
            self._ticks += 1
            if await self._wait(stop, self._interval_s):
                break
        if self._stop is stop:
            self._stop = None
        self._log("long press %s finished: ticks=%d", label, self._ticks)

    @staticmethod
    async def _wait(stop: asyncio.Event, delay_s: float) -> bool:
        """Sleep for ``delay_s`` unless ``stop`` fires first; returns True when stopped."""

        if stop.is_set():
            return True
        try:
            await asyncio.wait_for(stop.wait(), timeout=delay_s)
        except asyncio.TimeoutError:
            return False
        return True

    def _log(self, msg: str, *args: object) -> None:
        if self._log_enabled:
            logger.info(msg, *args)
        else:
            logger.debug(msg, *args)


__all__ = ["LongPressRepeater"]
