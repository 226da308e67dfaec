from __future__ import annotations

from stepper_sync.control.generation import GenerationCounter


def test_newer_epoch_makes_older_stale() -> None:
    counter = GenerationCounter()
    first = counter.mint()
    assert first.is_live()

    second = counter.mint()
    assert first.is_stale()
    assert second.is_live()
    assert second.id > first.id


def test_supersede_invalidates_without_new_epoch() -> None:
    counter = GenerationCounter()
    epoch = counter.mint()
    before = counter.current

    assert counter.supersede() == before + 1
    assert epoch.is_stale()

    # A stale epoch never becomes live again.
    counter.mint()
    counter.supersede()
    assert epoch.is_stale()
