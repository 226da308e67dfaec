"""Rate-limit immediate dispatch of operation requests.

At most one request is dispatched per ``interval_s``. The first request after
a quiet period goes out on the next scheduler turn (requests submitted within
the same turn coalesce into it); requests arriving while the window is closed
overwrite a single queued slot that is flushed at the window boundary.
Intermediate values are dropped, never queued individually.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional

from stepper_sync.control.clamp import Number
from stepper_sync.control.kinds import OperationKind
from stepper_sync.control.timers import Scheduler, TimerHandle


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationRequest:
    """A target value plus the awaitable factory that commits it remotely."""

    target: Number
    kind: OperationKind
    invoke: Optional[Callable[[], Awaitable[None]]] = None
    previous: Optional[Number] = None


class ThrottleCoordinator:
    def __init__(
        self,
        *,
        interval_s: float,
        scheduler: Scheduler,
        dispatch: Callable[[OperationRequest], None],
    ) -> None:
        self._interval_s = max(0.0, float(interval_s))
        self._scheduler = scheduler
        self._dispatch = dispatch
        self._queued: Optional[OperationRequest] = None
        self._handle: Optional[TimerHandle] = None
        self._window_start: Optional[float] = None
        self._dropped = 0

    # ------------------------------------------------------------------
    @property
    def queued(self) -> Optional[OperationRequest]:
        return self._queued

    @property
    def has_queued(self) -> bool:
        return self._queued is not None

    @property
    def dropped(self) -> int:
        """Requests overwritten before they were dispatched."""

        return self._dropped

    def set_interval(self, interval_s: float) -> None:
        self._interval_s = max(0.0, float(interval_s))

    # ------------------------------------------------------------------
    def submit(self, request: OperationRequest) -> None:
        if self._queued is not None:
            self._dropped += 1
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "throttle replace: kind=%s target=%r (was %r)",
                    request.kind.value,
                    request.target,
                    self._queued.target,
                )
            self._queued = request
            return

        now = self._scheduler.time()
        self._queued = request
        if self._window_start is not None and (now - self._window_start) < self._interval_s:
            remaining = self._interval_s - (now - self._window_start)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    "throttle trailing: kind=%s target=%r in %.1fms",
                    request.kind.value,
                    request.target,
                    remaining * 1000.0,
                )
            self._handle = self._scheduler.call_later(remaining, self._flush)
            return

        self._window_start = now
        self._handle = self._scheduler.call_soon(self._flush)

    def cancel(self) -> Optional[OperationRequest]:
        """Drop the queued request (if any) and return it."""

        handle = self._handle
        self._handle = None
        if handle is not None:
            handle.cancel()
        queued = self._queued
        self._queued = None
        return queued

    def reset(self) -> None:
        self.cancel()
        self._window_start = None

    # ------------------------------------------------------------------
    def _flush(self) -> None:
        self._handle = None
        request = self._queued
        self._queued = None
        if request is None:
            return
        self._window_start = self._scheduler.time()
        self._dispatch(request)


__all__ = ["OperationRequest", "ThrottleCoordinator"]
