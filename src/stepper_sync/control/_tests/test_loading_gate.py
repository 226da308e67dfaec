from __future__ import annotations

import asyncio
from typing import List

from stepper_sync.config import LoadingConfig
from stepper_sync.control.generation import GenerationCounter
from stepper_sync.control.loading_gate import LoadingGate
from stepper_sync.control.timers import AsyncioScheduler


def _gate(config: LoadingConfig, changes: List[bool]) -> LoadingGate:
    return LoadingGate(config=config, scheduler=AsyncioScheduler(), on_change=changes.append)


def test_indicator_stays_up_for_minimum_duration() -> None:
    async def runner() -> None:
        loop = asyncio.get_running_loop()
        changes: List[bool] = []
        gate = _gate(LoadingConfig(minimum_duration_s=0.1), changes)
        counter = GenerationCounter()

        epoch = counter.mint()
        started = loop.time()
        gate.arm(epoch)
        assert gate.active
        await asyncio.sleep(0.01)
        await gate.settle(epoch)

        assert loop.time() - started >= 0.095
        assert not gate.active
        assert changes == [True, False]

    asyncio.run(runner())


def test_fast_operation_never_shows_with_show_delay() -> None:
    async def runner() -> None:
        changes: List[bool] = []
        gate = _gate(LoadingConfig(show_delay_s=0.05, minimum_duration_s=0.1), changes)
        epoch = GenerationCounter().mint()

        gate.arm(epoch)
        assert gate.show_pending
        await asyncio.sleep(0.01)
        await gate.settle(epoch)
        await asyncio.sleep(0.08)

        assert changes == []
        assert not gate.active

    asyncio.run(runner())


def test_stale_settle_leaves_indicator_to_newer_epoch() -> None:
    async def runner() -> None:
        changes: List[bool] = []
        gate = _gate(LoadingConfig(minimum_duration_s=0.0), changes)
        counter = GenerationCounter()

        first = counter.mint()
        gate.arm(first)
        second = counter.mint()
        gate.arm(second)

        await gate.settle(first)
        assert gate.active

        await gate.settle(second)
        assert not gate.active
        assert changes == [True, False]

    asyncio.run(runner())


def test_reset_hides_immediately() -> None:
    async def runner() -> None:
        changes: List[bool] = []
        gate = _gate(LoadingConfig(minimum_duration_s=5.0), changes)
        gate.arm(GenerationCounter().mint())
        gate.reset()
        assert not gate.active
        assert changes == [True, False]

    asyncio.run(runner())
