"""Reconcile user-driven stepper values against a fallible async operation.

``StepperCoordinator`` is constructed once per logical stepper and driven
purely through its public methods. A UI layer translates gestures into
``increment``/``decrement``/``add``/``submit_text``/``start_long_press`` and
renders ``display_value``/``is_loading``/``last_error``; it feeds the
caller-owned committed value back through ``update_committed``.

Flow for every user intent::

    candidate -> clamp/validate -> debounce | throttle -> dispatch(epoch)
              -> operation awaited -> epoch live? -> display/ledger/loading

Every continuation re-checks its epoch after each ``await``; a stale epoch
never mutates display, loading or error state.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set

from stepper_sync.config import StepperConfig
from stepper_sync.control.clamp import (
    Number,
    StepBounds,
    StepOutcome,
    StepVerdict,
    Validator,
    parse_quantity,
    propose_decrement,
    propose_increment,
    propose_target,
)
from stepper_sync.control.debounce import DebounceCoordinator
from stepper_sync.control.display_state import DisplayState
from stepper_sync.control.error_ledger import ErrorLedger, ErrorRecord, ErrorSink
from stepper_sync.control.errors import (
    StepperBusyError,
    StepperCancellationError,
    StepperTimeoutError,
    StepperValidationError,
)
from stepper_sync.control.generation import Epoch, GenerationCounter
from stepper_sync.control.kinds import CancellationReason, ChangeKind, OperationKind
from stepper_sync.control.loading_gate import LoadingGate
from stepper_sync.control.long_press import LongPressRepeater
from stepper_sync.control.throttle import OperationRequest, ThrottleCoordinator
from stepper_sync.control.timers import AsyncioScheduler, Scheduler
from stepper_sync.logging_policy import SyncLoggingPolicy


logger = logging.getLogger(__name__)

RequestOperation = Callable[[Number], Awaitable[None]]
AsyncValidator = Callable[[Number, Number], Awaitable[bool]]


@dataclass
class StepperHooks:
    """Optional notification sinks; all side-effect only."""

    on_commit: Optional[Callable[[Number], None]] = None
    on_remove: Optional[Callable[[], None]] = None
    on_validation_rejected: Optional[Callable[[Number, Number], None]] = None
    on_operation_cancelled: Optional[Callable[[Number], None]] = None
    on_error: Optional[ErrorSink] = None
    on_max_reached: Optional[Callable[[], None]] = None
    on_min_reached: Optional[Callable[[], None]] = None
    on_change: Optional[Callable[[Number, Number, ChangeKind], None]] = None


@dataclass(frozen=True)
class StepperSnapshot:
    display_value: Number
    committed_value: Number
    is_loading: bool
    pending_value: Optional[Number]
    debounced_value: Optional[Number]
    last_error: Optional[ErrorRecord]
    generation: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "display_value": self.display_value,
            "committed_value": self.committed_value,
            "is_loading": self.is_loading,
            "pending_value": self.pending_value,
            "debounced_value": self.debounced_value,
            "last_error": str(self.last_error.error) if self.last_error is not None else None,
            "generation": self.generation,
        }


class StepperCoordinator:
    """Asynchronous value-synchronisation coordinator for one stepper."""

    def __init__(
        self,
        config: Optional[StepperConfig] = None,
        *,
        committed: Number,
        request_operation: Optional[RequestOperation] = None,
        remove_operation: Optional[Callable[[], Awaitable[None]]] = None,
        add_operation: Optional[Callable[[], Awaitable[None]]] = None,
        validator: Optional[Validator] = None,
        async_validator: Optional[AsyncValidator] = None,
        hooks: Optional[StepperHooks] = None,
        scheduler: Optional[Scheduler] = None,
        logging_policy: Optional[SyncLoggingPolicy] = None,
    ) -> None:
        self._config = config if config is not None else StepperConfig()
        self._bounds = StepBounds(self._config.min_value, self._config.max_value, self._config.step)
        self._committed: Number = committed
        self._request = request_operation
        self._remove_operation = remove_operation
        self._add_operation = add_operation
        self._validator = validator
        self._async_validator = async_validator
        self._hooks = hooks if hooks is not None else StepperHooks()
        self._scheduler = scheduler if scheduler is not None else AsyncioScheduler()
        self._policy = logging_policy if logging_policy is not None else SyncLoggingPolicy()

        self._generation = GenerationCounter()
        self._display = DisplayState(optimistic=self._config.optimistic_update)
        self._ledger = ErrorLedger(sink=self._hooks.on_error)
        self._throttle = ThrottleCoordinator(
            interval_s=self._config.throttle_interval_s,
            scheduler=self._scheduler,
            dispatch=self._dispatch,
        )
        self._debounce: Optional[DebounceCoordinator] = None
        if self._config.debounce_delay_s is not None:
            self._debounce = DebounceCoordinator(
                delay_s=self._config.debounce_delay_s,
                scheduler=self._scheduler,
                fire=self._dispatch_debounced,
            )
        self._loading = LoadingGate(
            config=self._config.loading,
            scheduler=self._scheduler,
            on_change=self._on_loading_change,
            log_timing=self._policy.log_timing,
        )
        self._long_press = LongPressRepeater(
            initial_delay_s=self._config.long_press_initial_delay_s,
            interval_s=self._config.long_press_interval_s,
            log_enabled=self._policy.log_long_press,
        )

        self._tasks: Set[asyncio.Task[None]] = set()
        self._wakeup: Optional[asyncio.Event] = None
        self._outstanding = 0
        self._long_press_dispatches = 0
        self._last_operation_kind: Optional[OperationKind] = None
        self._last_cancellation: Optional[StepperCancellationError] = None
        self._last_rejection: Optional[StepperValidationError] = None
        self._listeners: List[Callable[[StepperSnapshot], None]] = []
        self._last_snapshot: Optional[StepperSnapshot] = None
        self._disposed = False

    # ------------------------------------------------------------------ state
    @property
    def config(self) -> StepperConfig:
        return self._config

    @property
    def committed_value(self) -> Number:
        return self._committed

    @property
    def display_value(self) -> Number:
        return self._display.resolve(self._committed)

    @property
    def pending_value(self) -> Optional[Number]:
        return self._display.pending_value

    @property
    def debounced_value(self) -> Optional[Number]:
        return self._display.debounced_value

    @property
    def debounce_anchor(self) -> Optional[Number]:
        return self._display.debounce_anchor

    @property
    def is_debouncing(self) -> bool:
        return self._display.debounced_value is not None

    @property
    def is_loading(self) -> bool:
        return self._loading.active

    @property
    def last_error(self) -> Optional[ErrorRecord]:
        return self._ledger.last

    @property
    def last_cancellation(self) -> Optional[StepperCancellationError]:
        return self._last_cancellation

    @property
    def last_rejection(self) -> Optional[StepperValidationError]:
        return self._last_rejection

    @property
    def last_operation_kind(self) -> Optional[OperationKind]:
        return self._last_operation_kind

    @property
    def generation(self) -> int:
        return self._generation.current

    @property
    def is_async(self) -> bool:
        return self._request is not None or self._remove_operation is not None or self._add_operation is not None

    @property
    def is_debounce_mode(self) -> bool:
        return self._debounce is not None

    @property
    def has_pending_operation(self) -> bool:
        # Abandoned (superseded or cancelled) operations do not count.
        return (
            self._display.in_flight is not None
            or self._throttle.has_queued
            or (self._debounce is not None and self._debounce.pending is not None)
            or self._loading.active
            or self._loading.show_pending
        )

    @property
    def is_long_pressing(self) -> bool:
        return self._long_press.active

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def is_at_min(self) -> bool:
        return self.display_value <= self._bounds.minimum

    @property
    def is_at_max(self) -> bool:
        return self.display_value >= self._bounds.maximum

    @property
    def can_increment(self) -> bool:
        if self._disposed or self._busy_blocks_input():
            return False
        return propose_increment(self.display_value, self._bounds, self._validator).accepted

    @property
    def can_decrement(self) -> bool:
        if self._disposed or self._busy_blocks_input():
            return False
        outcome = propose_decrement(
            self.display_value,
            self._bounds,
            self._validator,
            allow_removal=self._removal_allowed(),
        )
        return outcome.verdict in (StepVerdict.ACCEPTED, StepVerdict.REMOVAL)

    def snapshot(self) -> StepperSnapshot:
        return StepperSnapshot(
            display_value=self.display_value,
            committed_value=self._committed,
            is_loading=self._loading.active,
            pending_value=self._display.pending_value,
            debounced_value=self._display.debounced_value,
            last_error=self._ledger.last,
            generation=self._generation.current,
        )

    # ------------------------------------------------------------------ listeners
    def add_listener(self, callback: Callable[[StepperSnapshot], None]) -> None:
        assert callable(callback), "StepperCoordinator listener must be callable"
        assert callback not in self._listeners, "StepperCoordinator listener already registered"
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[StepperSnapshot], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    # ------------------------------------------------------------------ caller input
    def update_committed(self, value: Number) -> None:
        """The caller's authoritative value changed (server confirmation, stream, ...)."""

        self._check_alive()
        previous = self._committed
        self._committed = value
        cleared = self._display.observe_committed(value)
        if cleared:
            self._log_op("pending confirmed by committed value %r", value)
        if previous != value or cleared:
            self._emit()

    # ------------------------------------------------------------------ user intents
    def increment(self, *, long_press: bool = False, raise_if_busy: bool = False) -> bool:
        self._check_alive()
        if self._refuse_if_busy(raise_if_busy):
            return False
        outcome = propose_increment(self.display_value, self._bounds, self._validator)
        change = ChangeKind.LONG_PRESS_INCREMENT if long_press else ChangeKind.INCREMENT
        return self._route(outcome, OperationKind.INCREMENT, change, long_press=long_press)

    def decrement(self, *, long_press: bool = False, raise_if_busy: bool = False) -> bool:
        self._check_alive()
        if self._refuse_if_busy(raise_if_busy):
            return False
        outcome = propose_decrement(
            self.display_value,
            self._bounds,
            self._validator,
            allow_removal=self._removal_allowed() and not long_press,
        )
        if outcome.verdict is StepVerdict.REMOVAL:
            return self._remove(outcome.value, outcome.current)
        change = ChangeKind.LONG_PRESS_DECREMENT if long_press else ChangeKind.DECREMENT
        return self._route(outcome, OperationKind.DECREMENT, change, long_press=long_press)

    def add(self, *, raise_if_busy: bool = False) -> bool:
        """Bring the value to ``min_value`` (the add-to-cart gesture)."""

        self._check_alive()
        if self._refuse_if_busy(raise_if_busy):
            return False
        current = self.display_value
        target = self._bounds.minimum
        if self._add_operation is not None:
            self._submit_throttled(OperationRequest(target, OperationKind.ADD, self._add_operation, current))
        elif self._request is not None:
            invoke = functools.partial(self._request, target)
            self._submit_throttled(OperationRequest(target, OperationKind.ADD, invoke, current))
        else:
            self._commit(target, OperationKind.ADD)
        self._notify_change(target, current, ChangeKind.ADD)
        return True

    def set_value(
        self,
        value: Number,
        *,
        change: ChangeKind = ChangeKind.PROGRAMMATIC,
        raise_if_busy: bool = False,
    ) -> bool:
        """Request an absolute value; it is clamped to bounds first."""

        self._check_alive()
        if self._refuse_if_busy(raise_if_busy):
            return False
        outcome = propose_target(self.display_value, value, self._bounds, self._validator)
        return self._route(outcome, OperationKind.SET_QUANTITY, change, long_press=False)

    def submit_text(self, text: str) -> bool:
        """Manual entry: unparseable text falls back to the current value."""

        self._check_alive()
        current = self.display_value
        return self.set_value(parse_quantity(text, current), change=ChangeKind.MANUAL_INPUT)

    # ------------------------------------------------------------------ long press
    def start_long_press(self, increment: bool) -> bool:
        self._check_alive()
        if not self._config.long_press_enabled:
            return False
        self._long_press_dispatches = 0
        label = "increment" if increment else "decrement"
        self._long_press.start(functools.partial(self._long_press_tick, increment), label=label)
        return True

    def stop_long_press(self) -> None:
        self._long_press.stop()

    def _long_press_tick(self, increment: bool) -> bool:
        if self._disposed:
            return False
        if increment:
            return self.increment(long_press=True)
        return self.decrement(long_press=True)

    # ------------------------------------------------------------------ retry / cancel
    def retry(self) -> bool:
        """Replay the intent behind the last failure against the current value."""

        self._check_alive()
        record = self._ledger.last
        if record is None:
            return False
        if self._busy_blocks_input():
            if self._display.in_flight is not None or self._throttle.has_queued:
                return False
            # Only the failed operation's loading tail is left; drop it.
            self._generation.supersede()
            self._loading.reset()
        kind = record.operation_kind
        self._log_op("retry: kind=%s attempted=%r", kind.value, record.attempted_value)
        if kind is OperationKind.INCREMENT:
            return self.increment()
        if kind is OperationKind.DECREMENT:
            return self.decrement()
        if kind is OperationKind.ADD:
            return self.add()
        if kind is OperationKind.REMOVE:
            current = self.display_value
            return self._remove(current - self._bounds.step, current)
        if record.attempted_value is None:
            return False
        return self.set_value(record.attempted_value)

    def cancel(self) -> None:
        """Abandon queued and in-flight work; local state returns to committed."""

        self._check_alive()
        self._cancel_all(CancellationReason.USER_CANCELLED)
        self._emit()

    def dispose(self) -> None:
        if self._disposed:
            return
        self._cancel_all(CancellationReason.DISPOSED)
        self._long_press.cancel()
        for task in list(self._tasks):
            task.cancel()
        self._disposed = True
        self._listeners.clear()

    async def aclose(self) -> None:
        tasks = list(self._tasks)
        self.dispose()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def wait_idle(self) -> None:
        """Wait until no request is queued, debouncing or in flight."""

        while True:
            tasks = [task for task in self._tasks if not task.done()]
            if tasks:
                await asyncio.gather(*tasks, return_exceptions=True)
                continue
            if not self._throttle.has_queued and (self._debounce is None or self._debounce.pending is None):
                return
            # Queued work either dispatches or is cancelled; both wake us.
            if self._wakeup is None:
                self._wakeup = asyncio.Event()
            await self._wakeup.wait()

    def _wake_waiters(self) -> None:
        if self._wakeup is not None:
            self._wakeup.set()
            self._wakeup = None

    # ------------------------------------------------------------------ routing
    def _route(self, outcome: StepOutcome, kind: OperationKind, change: ChangeKind, *, long_press: bool) -> bool:
        if outcome.verdict is StepVerdict.BLOCKED:
            return False
        if outcome.verdict is StepVerdict.REJECTED:
            self._reject(outcome.current, outcome.value)
            return False
        target = outcome.value
        current = outcome.current
        if self._request is None:
            self._commit(target, kind)
            self._notify_change(target, current, change)
            return True
        if self._debounce is not None:
            self._submit_debounced(OperationRequest(target, kind, functools.partial(self._request, target), current))
        else:
            if long_press and not self._config.allow_long_press_for_async:
                if self._long_press_dispatches >= 1 or self.has_pending_operation:
                    return False
            self._submit_throttled(OperationRequest(target, kind, functools.partial(self._request, target), current))
            if long_press:
                self._long_press_dispatches += 1
        self._notify_change(target, current, change)
        return True

    def _remove(self, target: Number, current: Number) -> bool:
        kind = OperationKind.REMOVE
        if self._remove_operation is not None:
            request = OperationRequest(target, kind, self._remove_operation, current)
        elif self._hooks.on_remove is not None:
            self._call_hook(self._hooks.on_remove)
            self._notify_change(target, current, ChangeKind.REMOVE)
            return True
        elif self._config.delete_via_quantity_change and self._request is not None:
            request = OperationRequest(target, kind, functools.partial(self._request, target), current)
        elif self._config.delete_via_quantity_change:
            self._commit(target, kind)
            self._notify_change(target, current, ChangeKind.REMOVE)
            return True
        else:
            return False
        if self._debounce is not None and self._debounce.pending is not None:
            self._debounce.cancel()
            self._display.revert_debounce()
        self._submit_throttled(request)
        self._notify_change(target, current, ChangeKind.REMOVE)
        return True

    def _submit_throttled(self, request: OperationRequest) -> None:
        # With an async validator the target is staged only once it passes.
        replaced = self._display.stage(request.target) if self._async_validator is None else None
        if self._outstanding > 0:
            # An older operation's result would now be stale.
            self._generation.supersede()
        if replaced is not None and replaced != request.target:
            self._report_cancelled(replaced, CancellationReason.SUPERSEDED)
        self._ledger.clear()
        self._throttle.submit(request)
        self._emit()

    def _submit_debounced(self, request: OperationRequest) -> None:
        assert self._debounce is not None
        anchor = self._display.begin_debounce(request.target, self._committed)
        if self._outstanding > 0:
            # Nothing live until the next burst dispatches.
            self._generation.supersede()
            self._loading.reset()
        self._ledger.clear()
        self._debounce.submit(request)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("debounce accumulate: target=%r anchor=%r", request.target, anchor)
        self._emit()

    # ------------------------------------------------------------------ dispatch
    def _dispatch(self, request: OperationRequest) -> None:
        self._wake_waiters()
        if self._disposed:
            return
        self._spawn(self._run_operation(request))

    def _dispatch_debounced(self, request: OperationRequest) -> None:
        self._wake_waiters()
        if self._disposed:
            return
        self._spawn(self._run_debounced(request))

    def _spawn(self, coro: Awaitable[None]) -> None:
        task = asyncio.get_running_loop().create_task(coro)  # type: ignore[arg-type]
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_operation(self, request: OperationRequest) -> None:
        epoch = self._begin(request)
        self._outstanding += 1
        try:
            if self._async_validator is not None:
                if not await self._passes_async_validation(epoch, request):
                    if epoch.is_live():
                        self._emit()
                        await self._loading.settle(epoch)
                    return
                self._display.stage(request.target)
                self._emit()
            try:
                await self._invoke(request)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                if epoch.is_stale():
                    self._log_stale(epoch, request, "failure")
                    return
                reverted = self._display.fail(revert=self._config.revert_on_error)
                self._ledger.record(
                    request.kind,
                    request.target,
                    exc,
                    reverted_to=self._committed if reverted is not None else None,
                )
                self._emit()
            else:
                if epoch.is_stale():
                    self._log_stale(epoch, request, "success")
                    return
                self._display.confirm()
                self._commit(request.target, request.kind)
                self._emit()
        finally:
            self._outstanding -= 1
        await self._loading.settle(epoch)

    async def _run_debounced(self, request: OperationRequest) -> None:
        epoch = self._begin(request)
        self._outstanding += 1
        try:
            try:
                await self._invoke(request)
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                if epoch.is_stale():
                    self._log_stale(epoch, request, "failure")
                    return
                reverted_to = self._display.revert_debounce() if self._config.revert_on_error else None
                self._ledger.record(request.kind, request.target, exc, reverted_to=reverted_to)
                self._emit()
            else:
                if epoch.is_stale():
                    self._log_stale(epoch, request, "success")
                    return
                self._display.settle_debounce()
                self._commit(request.target, request.kind)
                self._emit()
        finally:
            self._outstanding -= 1
        await self._loading.settle(epoch)

    def _begin(self, request: OperationRequest) -> Epoch:
        epoch = self._generation.mint()
        self._last_operation_kind = request.kind
        self._ledger.clear()
        self._loading.arm(epoch)
        self._log_op(
            "dispatch: epoch=%d kind=%s target=%r",
            epoch.id,
            request.kind.value,
            request.target,
        )
        self._emit()
        return epoch

    async def _invoke(self, request: OperationRequest) -> None:
        assert request.invoke is not None, "operation request without invoke"
        timeout = self._config.operation_timeout_s
        if timeout is None:
            await request.invoke()
            return
        try:
            await asyncio.wait_for(request.invoke(), timeout=timeout)
        except asyncio.TimeoutError:
            raise StepperTimeoutError(timeout, request.kind) from None

    async def _passes_async_validation(self, epoch: Epoch, request: OperationRequest) -> bool:
        assert self._async_validator is not None
        current = request.previous if request.previous is not None else self._committed
        try:
            ok = await self._async_validator(current, request.target)
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            if epoch.is_live():
                self._ledger.record(request.kind, request.target, exc)
            return False
        if epoch.is_stale():
            return False
        if not ok:
            self._reject(current, request.target)
        return bool(ok)

    # ------------------------------------------------------------------ outcomes
    def _commit(self, value: Number, kind: OperationKind) -> None:
        self._call_hook(self._hooks.on_commit, value)
        if kind is OperationKind.REMOVE:
            return
        if value >= self._bounds.maximum:
            self._call_hook(self._hooks.on_max_reached)
        elif value == self._bounds.minimum:
            self._call_hook(self._hooks.on_min_reached)

    def _reject(self, current: Number, attempted: Number) -> None:
        self._last_rejection = StepperValidationError(current, attempted)
        self._log_op("validation rejected: %r -> %r", current, attempted)
        self._call_hook(self._hooks.on_validation_rejected, current, attempted)

    def _report_cancelled(self, attempted: Number, reason: CancellationReason) -> None:
        self._last_cancellation = StepperCancellationError(attempted, reason)
        self._log_op("operation cancelled: attempted=%r reason=%s", attempted, reason.value)
        self._call_hook(self._hooks.on_operation_cancelled, attempted)

    def _notify_change(self, new: Number, old: Number, change: ChangeKind) -> None:
        self._call_hook(self._hooks.on_change, new, old, change)

    def _cancel_all(self, reason: CancellationReason) -> None:
        self._long_press.stop()
        self._throttle.cancel()
        if self._debounce is not None:
            self._debounce.cancel()
        outstanding = self._display.clear()
        self._generation.supersede()
        self._loading.reset()
        if outstanding is not None:
            self._report_cancelled(outstanding, reason)
        self._wake_waiters()

    # ------------------------------------------------------------------ helpers
    def _removal_allowed(self) -> bool:
        return (
            self._remove_operation is not None
            or self._hooks.on_remove is not None
            or (
                self._config.delete_via_quantity_change
                and (self._request is not None or self._hooks.on_commit is not None)
            )
        )

    def _busy_blocks_input(self) -> bool:
        if self._config.optimistic_update or self._debounce is not None:
            return False
        return self.has_pending_operation

    def _refuse_if_busy(self, raise_if_busy: bool) -> bool:
        if not self._busy_blocks_input():
            return False
        if raise_if_busy:
            raise StepperBusyError(self._display.in_flight)
        return True

    def _on_loading_change(self, active: bool) -> None:
        self._emit()

    def _emit(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        if snap == self._last_snapshot:
            return
        self._last_snapshot = snap
        for callback in tuple(self._listeners):
            try:
                callback(snap)
            except Exception:
                logger.warning("StepperCoordinator listener raised", exc_info=True)

    def _call_hook(self, hook: Optional[Callable[..., None]], *args: Any) -> None:
        if hook is None:
            return
        try:
            hook(*args)
        except Exception:
            logger.warning("Stepper hook %r raised", getattr(hook, "__name__", hook), exc_info=True)

    def _check_alive(self) -> None:
        assert not self._disposed, "StepperCoordinator used after dispose()"

    def _log_op(self, msg: str, *args: object) -> None:
        if self._policy.log_operations:
            logger.info(msg, *args)
        else:
            logger.debug(msg, *args)

    def _log_stale(self, epoch: Epoch, request: OperationRequest, outcome: str) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "stale %s discarded: epoch=%d live=%d kind=%s target=%r",
                outcome,
                epoch.id,
                self._generation.current,
                request.kind.value,
                request.target,
            )

    def __repr__(self) -> str:
        loading = ", loading" if self._loading.active else ""
        pending = f", pending: {self._display.pending_value}" if self._display.pending_value is not None else ""
        return (
            f"StepperCoordinator(committed: {self._committed}, display: {self.display_value}, "
            f"min: {self._bounds.minimum}, max: {self._bounds.maximum}, step: {self._bounds.step}{loading}{pending})"
        )


__all__ = ["StepperCoordinator", "StepperHooks", "StepperSnapshot"]
