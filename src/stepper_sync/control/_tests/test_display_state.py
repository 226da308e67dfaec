from __future__ import annotations

from stepper_sync.control.display_state import (
    COMMITTED,
    Debouncing,
    DisplayState,
    Optimistic,
)


def test_debounce_anchor_survives_the_whole_burst() -> None:
    state = DisplayState(optimistic=False)

    assert state.begin_debounce(2, committed=1) == 1
    assert state.begin_debounce(3, committed=1) == 1
    # A committed change mid-burst does not move the anchor.
    assert state.begin_debounce(4, committed=7) == 1
    assert state.source == Debouncing(value=4, anchor=1)
    assert state.resolve(7) == 4

    assert state.revert_debounce() == 1
    assert state.source is COMMITTED
    assert state.resolve(1) == 1


def test_settle_debounce_returns_to_committed() -> None:
    state = DisplayState(optimistic=False)
    state.begin_debounce(5, committed=1)
    state.settle_debounce()
    assert state.resolve(5) == 5
    assert state.debounced_value is None


def test_optimistic_stage_confirm_and_fail() -> None:
    state = DisplayState(optimistic=True)

    assert state.stage(2) is None
    assert state.source == Optimistic(2)
    assert state.resolve(1) == 2
    assert state.stage(3) == 2

    state.confirm()
    assert state.in_flight is None
    assert state.resolve(3) == 3

    state.stage(4)
    assert state.fail(revert=True) == 4
    assert state.resolve(3) == 3


def test_failure_without_revert_keeps_pending() -> None:
    state = DisplayState(optimistic=True)
    state.stage(6)
    assert state.fail(revert=False) is None
    assert state.resolve(5) == 6
    assert state.in_flight is None


def test_non_optimistic_stage_tracks_target_without_showing_it() -> None:
    state = DisplayState(optimistic=False)
    state.stage(2)
    assert state.in_flight == 2
    assert state.pending_value is None
    assert state.resolve(1) == 1


def test_observe_committed_clears_only_on_match() -> None:
    state = DisplayState(optimistic=True)
    state.stage(5)

    assert state.observe_committed(4) is False
    assert state.resolve(4) == 5

    assert state.observe_committed(5) is True
    assert state.pending_value is None


def test_clear_reports_outstanding_target() -> None:
    state = DisplayState(optimistic=False)
    assert state.clear() is None

    state.stage(3)
    assert state.clear() == 3
    assert state.in_flight is None

    state.begin_debounce(8, committed=1)
    assert state.clear() == 8
    assert state.source is COMMITTED
