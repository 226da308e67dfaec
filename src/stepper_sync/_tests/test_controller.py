from __future__ import annotations

import asyncio

import pytest

from stepper_sync.config import LoadingConfig, StepperConfig
from stepper_sync.control.coordinator import StepperCoordinator, StepperHooks
from stepper_sync.control.errors import StepperValidationError
from stepper_sync.controller import QuantityController


def test_initial_quantity_is_clamped() -> None:
    controller = QuantityController(initial_quantity=500, max_quantity=10)
    assert controller.quantity == 10
    assert controller.is_expanded
    assert controller.is_at_max
    assert not controller.can_increment


def test_sync_mutations_notify_and_report_edges() -> None:
    edges = []
    seen = []
    controller = QuantityController(
        initial_quantity=2,
        max_quantity=3,
        on_max_reached=lambda: edges.append("max"),
        on_min_reached=lambda: edges.append("min"),
    )
    controller.add_listener(lambda c: seen.append(c.quantity))

    controller.increment()
    controller.increment()
    assert controller.quantity == 3
    assert edges == ["max"]

    controller.decrement()
    controller.decrement()
    assert controller.quantity == 1
    assert edges == ["max", "min"]
    assert seen == [3, 2, 1]


def test_validator_blocks_increment_and_require_valid_raises() -> None:
    controller = QuantityController(initial_quantity=1, validator=lambda cur, nxt: nxt <= 2)
    controller.increment()
    controller.increment()
    assert controller.quantity == 2

    assert controller.require_valid(2) == 2
    with pytest.raises(StepperValidationError):
        controller.require_valid(5)


def test_set_quantity_async_commits_on_success() -> None:
    async def runner() -> None:
        controller = QuantityController(initial_quantity=1)
        calls = []

        async def op() -> None:
            calls.append(controller.is_loading)
            await asyncio.sleep(0)

        assert await controller.set_quantity_async(5, op, optimistic=True)
        assert calls == [True]
        assert controller.quantity == 5
        assert not controller.is_loading
        assert controller.pending_quantity is None

    asyncio.run(runner())


def test_optimistic_failure_restores_previous_and_reports() -> None:
    async def runner() -> None:
        errors = []
        controller = QuantityController(initial_quantity=3, on_error=lambda exc, ctx: errors.append(exc))

        async def op() -> None:
            assert controller.display_quantity == 4
            raise RuntimeError("boom")

        assert not await controller.set_quantity_async(4, op, optimistic=True)
        assert controller.quantity == 3
        assert controller.display_quantity == 3
        assert not controller.is_loading
        assert len(errors) == 1
        assert controller.last_error is not None
        assert controller.last_error.reverted_to == 3

    asyncio.run(runner())


def test_superseded_async_result_is_ignored() -> None:
    async def runner() -> None:
        controller = QuantityController(initial_quantity=1)
        release = asyncio.Event()

        async def slow() -> None:
            await release.wait()

        task = asyncio.get_running_loop().create_task(controller.set_quantity_async(7, slow))
        await asyncio.sleep(0)
        assert controller.is_loading

        controller.set_quantity(2)
        assert not controller.is_loading
        release.set()

        assert await task is False
        assert controller.quantity == 2

    asyncio.run(runner())


def test_cancel_operation_and_async_steps() -> None:
    async def runner() -> None:
        controller = QuantityController(initial_quantity=1)
        sent = []

        async def send(value) -> None:
            sent.append(value)

        assert await controller.increment_async(send)
        assert await controller.decrement_async(send)
        assert sent == [2, 1]
        assert not await controller.decrement_async(send)

        release = asyncio.Event()

        async def slow() -> None:
            await release.wait()

        task = asyncio.get_running_loop().create_task(controller.set_quantity_async(9, slow, optimistic=True))
        await asyncio.sleep(0)
        assert controller.display_quantity == 9
        controller.cancel_operation()
        assert controller.display_quantity == 1
        release.set()
        assert await task is False
        assert controller.quantity == 1

    asyncio.run(runner())


def test_reset_expand_collapse() -> None:
    async def runner() -> None:
        edges = []
        controller = QuantityController(initial_quantity=5, on_min_reached=lambda: edges.append("min"))

        controller.collapse()
        assert not controller.is_expanded
        assert controller.quantity == 1
        controller.expand()
        assert controller.is_expanded

        controller.set_to_max()
        assert controller.quantity == 99
        controller.reset()
        assert controller.quantity == 1

        async def op() -> None:
            return None

        controller.set_to_max()
        assert await controller.reset_async(op)
        assert controller.quantity == 1
        assert edges == ["min", "min", "min"]

    asyncio.run(runner())


def test_dict_round_trip_and_copy_with() -> None:
    controller = QuantityController(initial_quantity=4, max_quantity=20, step=2)
    data = controller.to_dict()
    assert data == {
        "quantity": 4,
        "min_quantity": 1,
        "max_quantity": 20,
        "step": 2,
        "is_expanded": True,
        "is_loading": False,
    }

    restored = QuantityController.from_dict(data)
    assert restored.to_dict() == data

    copy = controller.copy_with(max_quantity=50)
    assert copy.max_quantity == 50
    assert copy.quantity == 4
    with pytest.raises(TypeError):
        controller.copy_with(colour="red")


def test_dispose_blocks_further_use() -> None:
    controller = QuantityController(initial_quantity=1)
    controller.dispose()
    assert controller.is_disposed
    with pytest.raises(AssertionError):
        controller.increment()


def test_controller_feeds_coordinator_committed_value() -> None:
    async def runner() -> None:
        controller = QuantityController(initial_quantity=1)
        sent = []

        async def send(value) -> None:
            sent.append(value)

        coordinator = StepperCoordinator(
            StepperConfig(optimistic_update=True, loading=LoadingConfig(minimum_duration_s=0.0)),
            committed=controller.quantity,
            request_operation=send,
            hooks=StepperHooks(on_commit=controller.set_quantity),
        )
        unbind = controller.bind_coordinator(coordinator)

        coordinator.increment()
        coordinator.increment()
        await coordinator.wait_idle()

        assert sent == [3]
        assert controller.quantity == 3
        assert coordinator.committed_value == 3
        assert coordinator.display_value == 3

        unbind()
        controller.set_quantity(8)
        assert coordinator.committed_value == 3
        await coordinator.aclose()

    asyncio.run(runner())
