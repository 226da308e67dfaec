"""Single-shot timer scheduling for the throttle and debounce coordinators."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Minimal timer surface: run ``callback`` once after ``delay_s``."""

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle: ...

    def call_soon(self, callback: Callable[[], None]) -> TimerHandle: ...

    def time(self) -> float: ...


class AsyncioScheduler:
    """Timers on an asyncio event loop.

    The loop is resolved lazily so a coordinator can be constructed outside
    a running loop and used once one exists.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> TimerHandle:
        return self.loop.call_later(max(0.0, float(delay_s)), callback)

    def call_soon(self, callback: Callable[[], None]) -> TimerHandle:
        return self.loop.call_soon(callback)

    def time(self) -> float:
        return self.loop.time()


__all__ = ["AsyncioScheduler", "Scheduler", "TimerHandle"]
