"""Framework-free quantity controller.

``QuantityController`` owns a committed quantity and exposes imperative
mutations plus awaitable variants that wrap a caller-supplied operation.
Async mutations share the generation-token discipline of the coordinator:
a result arriving after a newer mutation (or ``cancel_operation``) is
ignored.

A controller can be the committed-value source of a ``StepperCoordinator``::

    controller = QuantityController(initial_quantity=1)
    coordinator = StepperCoordinator(
        config,
        committed=controller.quantity,
        request_operation=api.update_cart,
        hooks=StepperHooks(on_commit=controller.set_quantity),
    )
    controller.bind_coordinator(coordinator)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Mapping, Optional

from stepper_sync.control.clamp import Number, Validator, clamp_value, coerce_like
from stepper_sync.control.error_ledger import ErrorLedger, ErrorRecord, ErrorSink
from stepper_sync.control.errors import StepperValidationError
from stepper_sync.control.generation import GenerationCounter
from stepper_sync.control.kinds import OperationKind

if TYPE_CHECKING:
    from stepper_sync.control.coordinator import StepperCoordinator


logger = logging.getLogger(__name__)

Listener = Callable[["QuantityController"], None]


class QuantityController:
    def __init__(
        self,
        *,
        initial_quantity: Number,
        min_quantity: Number = 1,
        max_quantity: Number = 99,
        step: Number = 1,
        validator: Optional[Validator] = None,
        on_error: Optional[ErrorSink] = None,
        on_max_reached: Optional[Callable[[], None]] = None,
        on_min_reached: Optional[Callable[[], None]] = None,
    ) -> None:
        assert min_quantity > 0, "min_quantity must be > 0"
        assert max_quantity > min_quantity, "max_quantity must be > min_quantity"
        assert step > 0, "step must be > 0"
        self.min_quantity = min_quantity
        self.max_quantity = max_quantity
        self.step = step
        self.validator = validator
        self.on_error = on_error
        self.on_max_reached = on_max_reached
        self.on_min_reached = on_min_reached

        self._expanded = initial_quantity > 0
        self._quantity = self._clamp(initial_quantity)
        self._pending: Optional[Number] = None
        self._loading = False
        self._generation = GenerationCounter()
        self._ledger = ErrorLedger(sink=on_error)
        self._listeners: List[Listener] = []
        self._disposed = False

    # ------------------------------------------------------------------ state
    @property
    def quantity(self) -> Number:
        return self._quantity

    @property
    def is_expanded(self) -> bool:
        return self._expanded

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    @property
    def pending_quantity(self) -> Optional[Number]:
        return self._pending

    @property
    def has_pending_operation(self) -> bool:
        return self._pending is not None

    @property
    def display_quantity(self) -> Number:
        return self._pending if self._pending is not None else self._quantity

    @property
    def last_error(self) -> Optional[ErrorRecord]:
        return self._ledger.last

    @property
    def can_increment(self) -> bool:
        return not self._loading and self.display_quantity + self.step <= self.max_quantity

    @property
    def can_decrement(self) -> bool:
        return not self._loading and self.display_quantity - self.step >= self.min_quantity

    @property
    def is_at_min(self) -> bool:
        return self.display_quantity <= self.min_quantity

    @property
    def is_at_max(self) -> bool:
        return self.display_quantity >= self.max_quantity

    # ------------------------------------------------------------------ listeners
    def add_listener(self, callback: Listener) -> None:
        assert callable(callback), "QuantityController listener must be callable"
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def bind_coordinator(self, coordinator: "StepperCoordinator") -> Callable[[], None]:
        """Push every quantity change into ``coordinator``; returns an unbind callable."""

        def _push(controller: "QuantityController") -> None:
            if not coordinator.is_disposed:
                coordinator.update_committed(controller.quantity)

        self.add_listener(_push)
        return lambda: self.remove_listener(_push)

    # ------------------------------------------------------------------ validation
    def require_valid(self, value: Number) -> Number:
        """Return ``value`` clamped, raising when the validator refuses it."""

        candidate = self._clamp(value)
        if self.validator is not None and not self.validator(self._quantity, candidate):
            raise StepperValidationError(self._quantity, candidate)
        return candidate

    # ------------------------------------------------------------------ sync mutations
    def set_quantity(self, value: Number) -> None:
        """Set the quantity (clamped); an in-flight async mutation is cancelled."""

        self._check_alive()
        new_value = self._clamp(value)
        if self._loading:
            self._generation.supersede()
            self._loading = False
        if self._quantity != new_value or self._pending is not None:
            self._quantity = new_value
            self._expanded = new_value > 0
            self._pending = None
            self._notify()

    def increment(self) -> None:
        self._check_alive()
        if not self.can_increment:
            return
        new_value = coerce_like(self.display_quantity + self.step, self._quantity)
        if self.validator is not None and not self.validator(self.display_quantity, new_value):
            return
        self.set_quantity(new_value)
        if self._quantity >= self.max_quantity:
            self._call(self.on_max_reached)

    def decrement(self) -> None:
        self._check_alive()
        if not self.can_decrement:
            return
        new_value = coerce_like(self.display_quantity - self.step, self._quantity)
        if self.validator is not None and not self.validator(self.display_quantity, new_value):
            return
        self.set_quantity(new_value)
        if self._quantity <= self.min_quantity:
            self._call(self.on_min_reached)

    def reset(self) -> None:
        """Return to ``min_quantity``."""

        self._check_alive()
        target = self._clamp(self.min_quantity)
        if self._quantity == target and not self._expanded and self._pending is None:
            return
        self._generation.supersede()
        self._quantity = target
        self._expanded = target > 0
        self._pending = None
        self._loading = False
        self._notify()
        self._call(self.on_min_reached)

    def set_to_max(self) -> None:
        self.set_quantity(self.max_quantity)

    def set_to_min(self) -> None:
        self.set_quantity(self.min_quantity)

    def expand(self) -> None:
        self._check_alive()
        if self._expanded:
            return
        if self._quantity == 0:
            self._quantity = self._clamp(self.min_quantity)
        self._expanded = True
        self._notify()

    def collapse(self) -> None:
        self._check_alive()
        target = self._clamp(self.min_quantity)
        if not self._expanded and self._quantity == target:
            return
        self._expanded = False
        self._quantity = target
        self._pending = None
        self._notify()
        self._call(self.on_min_reached)

    def cancel_operation(self) -> None:
        self._check_alive()
        if self._pending is None and not self._loading:
            return
        self._generation.supersede()
        self._pending = None
        self._loading = False
        self._notify()

    # ------------------------------------------------------------------ async mutations
    async def set_quantity_async(
        self,
        value: Number,
        operation: Callable[[], Awaitable[Any]],
        *,
        optimistic: bool = False,
    ) -> bool:
        """Run ``operation`` and commit ``value`` when it succeeds.

        Returns False when the validator refuses the value, the operation
        fails, or a newer mutation superseded this one.
        """

        self._check_alive()
        new_value = self._clamp(value)
        if self.validator is not None and not self.validator(self._quantity, new_value):
            return False
        return await self._run(OperationKind.SET_QUANTITY, new_value, operation, optimistic=optimistic)

    async def increment_async(
        self,
        operation: Callable[[Number], Awaitable[Any]],
        *,
        optimistic: bool = False,
    ) -> bool:
        self._check_alive()
        if not self.can_increment:
            return False
        new_value = coerce_like(self.display_quantity + self.step, self._quantity)
        if self.validator is not None and not self.validator(self.display_quantity, new_value):
            return False
        return await self.set_quantity_async(new_value, lambda: operation(new_value), optimistic=optimistic)

    async def decrement_async(
        self,
        operation: Callable[[Number], Awaitable[Any]],
        *,
        optimistic: bool = False,
    ) -> bool:
        self._check_alive()
        if not self.can_decrement:
            return False
        new_value = coerce_like(self.display_quantity - self.step, self._quantity)
        if self.validator is not None and not self.validator(self.display_quantity, new_value):
            return False
        return await self.set_quantity_async(new_value, lambda: operation(new_value), optimistic=optimistic)

    async def reset_async(self, operation: Callable[[], Awaitable[Any]]) -> bool:
        self._check_alive()
        return await self._run(OperationKind.RESET, self._clamp(self.min_quantity), operation, optimistic=False)

    async def _run(
        self,
        kind: OperationKind,
        target: Number,
        operation: Callable[[], Awaitable[Any]],
        *,
        optimistic: bool,
    ) -> bool:
        epoch = self._generation.mint()
        previous = self._quantity
        if optimistic:
            self._pending = target
        self._loading = True
        self._ledger.clear()
        self._notify()
        try:
            await operation()
        except Exception as exc:
            if epoch.is_stale() or self._disposed:
                return False
            if optimistic:
                self._pending = None
                self._quantity = previous
            self._ledger.record(kind, target, exc, reverted_to=previous if optimistic else None)
            return False
        else:
            if epoch.is_stale():
                return False
            self._quantity = target
            self._expanded = target > 0
            self._pending = None
            if target >= self.max_quantity:
                self._call(self.on_max_reached)
            elif target <= self.min_quantity:
                self._call(self.on_min_reached)
            return True
        finally:
            if epoch.is_live() and not self._disposed:
                self._loading = False
                self._notify()

    # ------------------------------------------------------------------ lifecycle
    def dispose(self) -> None:
        self._disposed = True
        self._generation.supersede()
        self._pending = None
        self._loading = False
        self._listeners.clear()

    def copy_with(self, **changes: Any) -> "QuantityController":
        params: Dict[str, Any] = {
            "initial_quantity": self._quantity,
            "min_quantity": self.min_quantity,
            "max_quantity": self.max_quantity,
            "step": self.step,
            "validator": self.validator,
            "on_error": self.on_error,
            "on_max_reached": self.on_max_reached,
            "on_min_reached": self.on_min_reached,
        }
        unknown = set(changes) - set(params)
        if unknown:
            raise TypeError(f"copy_with got unexpected fields: {sorted(unknown)}")
        params.update({key: value for key, value in changes.items() if value is not None})
        return QuantityController(**params)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quantity": self._quantity,
            "min_quantity": self.min_quantity,
            "max_quantity": self.max_quantity,
            "step": self.step,
            "is_expanded": self._expanded,
            "is_loading": self._loading,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "QuantityController":
        return cls(
            initial_quantity=data.get("quantity", 0),
            min_quantity=data.get("min_quantity", 1),
            max_quantity=data.get("max_quantity", 99),
            step=data.get("step", 1),
        )

    # ------------------------------------------------------------------ helpers
    def _clamp(self, value: Number) -> Number:
        return coerce_like(clamp_value(value, self.min_quantity, self.max_quantity), value)

    def _notify(self) -> None:
        for callback in tuple(self._listeners):
            try:
                callback(self)
            except Exception:
                logger.warning("QuantityController listener raised", exc_info=True)

    def _call(self, hook: Optional[Callable[[], None]]) -> None:
        if hook is None:
            return
        try:
            hook()
        except Exception:
            logger.warning("QuantityController callback raised", exc_info=True)

    def _check_alive(self) -> None:
        assert not self._disposed, "QuantityController used after dispose()"

    def __repr__(self) -> str:
        loading = ", loading" if self._loading else ""
        pending = f", pending: {self._pending}" if self._pending is not None else ""
        return (
            f"QuantityController(quantity: {self._quantity}, min: {self.min_quantity}, "
            f"max: {self.max_quantity}, step: {self.step}{loading}{pending})"
        )


__all__ = ["QuantityController"]
