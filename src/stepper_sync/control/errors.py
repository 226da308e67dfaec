"""Typed error hierarchy for stepper operations."""

from __future__ import annotations

from typing import Optional

from stepper_sync.control.kinds import CancellationReason, OperationKind


class StepperError(Exception):
    """Base class for every error the control layer raises or records."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class StepperValidationError(StepperError):
    """A validator refused a candidate value before anything was dispatched."""

    def __init__(self, current: float, attempted: float, reason: Optional[str] = None) -> None:
        super().__init__(reason or f"Validation failed: cannot change from {current} to {attempted}")
        self.current = current
        self.attempted = attempted
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.message} (current: {self.current}, attempted: {self.attempted})"


class StepperOperationError(StepperError):
    """The caller-supplied async operation raised."""

    def __init__(
        self,
        operation_kind: OperationKind,
        target: Optional[float],
        cause: BaseException,
    ) -> None:
        base = f"Operation {operation_kind.value} failed"
        message = f"{base} (target: {target})" if target is not None else base
        super().__init__(message, cause=cause)
        self.operation_kind = operation_kind
        self.target = target

    def __str__(self) -> str:
        return f"{self.message}: {self.cause!r}"


class StepperTimeoutError(StepperError):
    def __init__(self, timeout_s: float, operation_kind: OperationKind) -> None:
        super().__init__(f"Operation {operation_kind.value} timed out after {int(round(timeout_s * 1000))}ms")
        self.timeout_s = timeout_s
        self.operation_kind = operation_kind


class StepperCancellationError(StepperError):
    """A generation was superseded or the coordinator was disposed mid-flight.

    Informational only: it is handed to ``on_operation_cancelled`` observers
    through the coordinator's records and is never raised at callers.
    """

    def __init__(self, attempted: float, reason: CancellationReason) -> None:
        super().__init__(f"Operation cancelled: {reason.description}")
        self.attempted = attempted
        self.reason = reason


class StepperBusyError(StepperError):
    """An operation was requested while another one is still in flight."""

    def __init__(self, pending: Optional[float] = None) -> None:
        suffix = f" (pending: {pending})" if pending is not None else ""
        super().__init__(f"Cannot perform operation: another operation is in progress{suffix}")
        self.pending = pending


__all__ = [
    "StepperBusyError",
    "StepperCancellationError",
    "StepperError",
    "StepperOperationError",
    "StepperTimeoutError",
    "StepperValidationError",
]
