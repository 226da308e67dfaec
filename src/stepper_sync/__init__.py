"""
stepper-sync: asynchronous value synchronisation for quantity steppers

Coalesces rapid increment/decrement intents, dispatches them to a fallible
async operation, and keeps the displayed value, loading indicator and error
state consistent while results arrive out of order.
"""

from .config import LoadingConfig, StepperConfig, load_stepper_config
from .control import (
    ChangeKind,
    OperationKind,
    StepperCoordinator,
    StepperError,
    StepperHooks,
)
from .controller import QuantityController
from .logging_policy import SyncLoggingPolicy, load_logging_policy

__version__ = "0.1.0"

__all__ = [
    "ChangeKind",
    "LoadingConfig",
    "OperationKind",
    "QuantityController",
    "StepperConfig",
    "StepperCoordinator",
    "StepperError",
    "StepperHooks",
    "SyncLoggingPolicy",
    "load_logging_policy",
    "load_stepper_config",
]
