"""Idle-timer batching of rapid local value changes."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from stepper_sync.control.throttle import OperationRequest
from stepper_sync.control.timers import Scheduler, TimerHandle


logger = logging.getLogger(__name__)


class DebounceCoordinator:
    """Fire exactly one request after ``delay_s`` of quiet.

    Each ``submit`` replaces the held request and restarts the single idle
    timer. The displayed value and the burst anchor live in
    ``DisplayState``; this class only owns the timer.
    """

    def __init__(
        self,
        *,
        delay_s: float,
        scheduler: Scheduler,
        fire: Callable[[OperationRequest], None],
    ) -> None:
        assert delay_s > 0, "debounce delay must be positive"
        self._delay_s = float(delay_s)
        self._scheduler = scheduler
        self._fire = fire
        self._latest: Optional[OperationRequest] = None
        self._handle: Optional[TimerHandle] = None
        self._burst_size = 0

    @property
    def delay_s(self) -> float:
        return self._delay_s

    @property
    def pending(self) -> Optional[OperationRequest]:
        return self._latest

    @property
    def burst_size(self) -> int:
        return self._burst_size

    def submit(self, request: OperationRequest) -> None:
        self._latest = request
        self._burst_size += 1
        if self._handle is not None:
            self._handle.cancel()
        self._handle = self._scheduler.call_later(self._delay_s, self._elapsed)

    def cancel(self) -> Optional[OperationRequest]:
        handle = self._handle
        self._handle = None
        if handle is not None:
            handle.cancel()
        latest = self._latest
        self._latest = None
        self._burst_size = 0
        return latest

    def _elapsed(self) -> None:
        self._handle = None
        request = self._latest
        burst = self._burst_size
        self._latest = None
        self._burst_size = 0
        if request is None:
            return
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "debounce fire: kind=%s target=%r burst=%d",
                request.kind.value,
                request.target,
                burst,
            )
        self._fire(request)


__all__ = ["DebounceCoordinator"]
