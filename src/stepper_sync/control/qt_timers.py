"""Qt-backed timers so throttle/debounce flushes run on the GUI thread.

Used when the coordinator lives inside a Qt application whose asyncio loop is
driven by Qt (qasync and friends): the coalescing timers then behave exactly
like the widget's own ``QTimer``s.
"""

from __future__ import annotations

import time
from typing import Callable

from qtpy import QtCore


class _QtTimerHandle:
    def __init__(self, timer: QtCore.QTimer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        timer = self._timer
        if timer is None:
            return
        self._timer = None
        timer.stop()
        timer.deleteLater()

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()


class QtTimerScheduler:
    """``Scheduler`` implementation backed by single-shot ``QTimer``s."""

    def __init__(self, *, parent: QtCore.QObject | None = None, time_fn: Callable[[], float] = time.monotonic) -> None:
        self._parent = parent
        self._time_fn = time_fn

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> _QtTimerHandle:
        timer = QtCore.QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setTimerType(QtCore.Qt.PreciseTimer)  # type: ignore[attr-defined]
        handle = _QtTimerHandle(timer)

        def _fire() -> None:
            if handle._timer is None:
                return
            handle.cancel()
            callback()

        timer.timeout.connect(_fire)
        timer.start(max(0, int(round(float(delay_s) * 1000.0))))
        return handle

    def call_soon(self, callback: Callable[[], None]) -> _QtTimerHandle:
        return self.call_later(0.0, callback)

    def time(self) -> float:
        return self._time_fn()


__all__ = ["QtTimerScheduler"]
