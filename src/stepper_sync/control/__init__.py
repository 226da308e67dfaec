"""Control layer: reconcile local stepper intents with async operations."""

from .clamp import Number, StepBounds, StepOutcome, StepVerdict, Validator
from .coordinator import StepperCoordinator, StepperHooks, StepperSnapshot
from .display_state import Committed, Debouncing, DisplaySource, Optimistic
from .error_ledger import ErrorRecord, ErrorSink
from .errors import (
    StepperBusyError,
    StepperCancellationError,
    StepperError,
    StepperOperationError,
    StepperTimeoutError,
    StepperValidationError,
)
from .kinds import CancellationReason, ChangeKind, OperationKind
from .timers import AsyncioScheduler, Scheduler, TimerHandle

__all__ = [
    "AsyncioScheduler",
    "CancellationReason",
    "ChangeKind",
    "Committed",
    "Debouncing",
    "DisplaySource",
    "ErrorRecord",
    "ErrorSink",
    "Number",
    "OperationKind",
    "Optimistic",
    "Scheduler",
    "StepBounds",
    "StepOutcome",
    "StepVerdict",
    "StepperBusyError",
    "StepperCancellationError",
    "StepperCoordinator",
    "StepperError",
    "StepperHooks",
    "StepperOperationError",
    "StepperSnapshot",
    "StepperTimeoutError",
    "StepperValidationError",
    "TimerHandle",
    "Validator",
]
