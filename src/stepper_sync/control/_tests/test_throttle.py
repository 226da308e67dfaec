from __future__ import annotations

from typing import Callable, List

from stepper_sync.control.kinds import OperationKind
from stepper_sync.control.throttle import OperationRequest, ThrottleCoordinator


class _Timer:
    def __init__(self, when: float, seq: int, callback: Callable[[], None]) -> None:
        self.when = when
        self.seq = seq
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class _FakeScheduler:
    def __init__(self) -> None:
        self.now = 0.0
        self._timers: List[_Timer] = []
        self._seq = 0

    def time(self) -> float:
        return self.now

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> _Timer:
        self._seq += 1
        timer = _Timer(self.now + delay_s, self._seq, callback)
        self._timers.append(timer)
        return timer

    def call_soon(self, callback: Callable[[], None]) -> _Timer:
        return self.call_later(0.0, callback)

    def advance(self, delta: float = 0.0) -> None:
        target = self.now + delta
        while True:
            due = [t for t in self._timers if not t.cancelled and t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.when, t.seq))
            self._timers.remove(timer)
            self.now = max(self.now, timer.when)
            timer.callback()
        self.now = target


def _request(target: float) -> OperationRequest:
    return OperationRequest(target, OperationKind.INCREMENT)


def _make(interval: float = 0.08):
    scheduler = _FakeScheduler()
    dispatched: List[OperationRequest] = []
    throttle = ThrottleCoordinator(interval_s=interval, scheduler=scheduler, dispatch=dispatched.append)
    return scheduler, throttle, dispatched


def test_same_turn_requests_coalesce_into_leading_call() -> None:
    scheduler, throttle, dispatched = _make()

    for value in (2, 3, 4, 5, 6):
        throttle.submit(_request(value))
    assert dispatched == []
    assert throttle.dropped == 4

    scheduler.advance(0.0)
    assert [r.target for r in dispatched] == [6]
    assert not throttle.has_queued


def test_requests_inside_window_flush_once_at_boundary() -> None:
    scheduler, throttle, dispatched = _make()

    throttle.submit(_request(2))
    scheduler.advance(0.0)
    assert [r.target for r in dispatched] == [2]

    scheduler.advance(0.02)
    throttle.submit(_request(3))
    throttle.submit(_request(4))
    scheduler.advance(0.05)
    assert [r.target for r in dispatched] == [2]

    scheduler.advance(0.02)
    assert [r.target for r in dispatched] == [2, 4]


def test_request_after_quiet_period_goes_out_next_turn() -> None:
    scheduler, throttle, dispatched = _make()

    throttle.submit(_request(2))
    scheduler.advance(0.5)
    throttle.submit(_request(3))
    scheduler.advance(0.0)
    assert [r.target for r in dispatched] == [2, 3]


def test_cancel_returns_queued_request_and_drops_it() -> None:
    scheduler, throttle, dispatched = _make()

    throttle.submit(_request(2))
    scheduler.advance(0.0)
    scheduler.advance(0.01)
    throttle.submit(_request(3))

    dropped = throttle.cancel()
    assert dropped is not None and dropped.target == 3
    scheduler.advance(1.0)
    assert [r.target for r in dispatched] == [2]
    assert throttle.cancel() is None
