"""Loading indicator timing: optional show delay, minimum visible duration."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional

from stepper_sync.config import LoadingConfig
from stepper_sync.control.generation import Epoch
from stepper_sync.control.timers import Scheduler, TimerHandle


logger = logging.getLogger(__name__)


class LoadingGate:
    """Decouple perceived loading from actual operation latency.

    ``arm`` is called on dispatch and ``settle`` once the operation finished.
    Operations that settle before ``show_delay_s`` never show the indicator;
    once shown it stays up for at least ``minimum_duration_s`` measured from
    the moment it appeared. Both waits re-check the epoch before mutating.
    """

    def __init__(
        self,
        *,
        config: LoadingConfig,
        scheduler: Scheduler,
        on_change: Callable[[bool], None],
        log_timing: bool = False,
    ) -> None:
        self._config = config
        self._scheduler = scheduler
        self._on_change = on_change
        self._log_timing = bool(log_timing)
        self._active = False
        self._started_at: Optional[float] = None
        self._show_handle: Optional[TimerHandle] = None

    # ------------------------------------------------------------------
    @property
    def active(self) -> bool:
        return self._active

    @property
    def started_at(self) -> Optional[float]:
        return self._started_at

    @property
    def show_pending(self) -> bool:
        return self._show_handle is not None

    # ------------------------------------------------------------------
    def arm(self, epoch: Epoch) -> None:
        self._cancel_show()
        if self._active:
            # Already visible for a superseded epoch: keep showing, same start.
            return
        delay = self._config.show_delay_s
        if delay <= 0:
            self._show(epoch)
            return
        self._show_handle = self._scheduler.call_later(delay, lambda: self._show(epoch))

    async def settle(self, epoch: Epoch) -> None:
        if epoch.is_stale():
            return
        if self._show_handle is not None:
            self._cancel_show()
            self._log("loading skipped: settled within show delay (epoch=%d)", epoch.id)
            return
        if not self._active or self._started_at is None:
            return
        elapsed = self._scheduler.time() - self._started_at
        remaining = self._config.minimum_duration_s - elapsed
        if remaining > 0:
            self._log("loading hold: %.1fms remaining (epoch=%d)", remaining * 1000.0, epoch.id)
            await asyncio.sleep(remaining)
            if epoch.is_stale():
                return
        self._deactivate()

    def reset(self) -> None:
        """Hide immediately, skipping the minimum-duration tail."""

        self._cancel_show()
        self._deactivate()

    # ------------------------------------------------------------------
    def _show(self, epoch: Epoch) -> None:
        self._show_handle = None
        if epoch.is_stale():
            return
        self._active = True
        self._started_at = self._scheduler.time()
        self._log("loading shown (epoch=%d)", epoch.id)
        self._on_change(True)

    def _deactivate(self) -> None:
        if not self._active:
            return
        self._active = False
        self._started_at = None
        self._on_change(False)

    def _cancel_show(self) -> None:
        handle = self._show_handle
        self._show_handle = None
        if handle is not None:
            handle.cancel()

    def _log(self, msg: str, *args: object) -> None:
        if self._log_timing:
            logger.info(msg, *args)
        else:
            logger.debug(msg, *args)


__all__ = ["LoadingGate"]
