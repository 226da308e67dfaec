from __future__ import annotations

from typing import Callable, List

from stepper_sync.control.debounce import DebounceCoordinator
from stepper_sync.control.kinds import OperationKind
from stepper_sync.control.throttle import OperationRequest


class _Timer:
    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class _FakeScheduler:
    def __init__(self) -> None:
        self.now = 0.0
        self.timers: List[_Timer] = []

    def time(self) -> float:
        return self.now

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> _Timer:
        timer = _Timer(self.now + delay_s, callback)
        self.timers.append(timer)
        return timer

    def call_soon(self, callback: Callable[[], None]) -> _Timer:
        return self.call_later(0.0, callback)

    def advance(self, delta: float) -> None:
        self.now += delta
        for timer in [t for t in self.timers if not t.cancelled and t.when <= self.now]:
            self.timers.remove(timer)
            timer.callback()

    @property
    def live_timers(self) -> int:
        return sum(1 for t in self.timers if not t.cancelled)


def _make(delay: float = 0.3):
    scheduler = _FakeScheduler()
    fired: List[OperationRequest] = []
    debounce = DebounceCoordinator(delay_s=delay, scheduler=scheduler, fire=fired.append)
    return scheduler, debounce, fired


def test_burst_fires_once_with_latest_value() -> None:
    scheduler, debounce, fired = _make()

    for value in (2, 3, 4):
        debounce.submit(OperationRequest(value, OperationKind.INCREMENT))
        scheduler.advance(0.1)
    assert fired == []
    assert debounce.burst_size == 3
    # Only one idle timer is ever armed.
    assert scheduler.live_timers == 1

    scheduler.advance(0.25)
    assert [r.target for r in fired] == [4]
    assert debounce.pending is None
    assert debounce.burst_size == 0


def test_cancel_returns_latest_and_never_fires() -> None:
    scheduler, debounce, fired = _make()

    debounce.submit(OperationRequest(2, OperationKind.INCREMENT))
    debounce.submit(OperationRequest(3, OperationKind.INCREMENT))
    latest = debounce.cancel()

    assert latest is not None and latest.target == 3
    scheduler.advance(1.0)
    assert fired == []
