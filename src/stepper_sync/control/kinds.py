"""Enumerations shared by the control layer."""

from __future__ import annotations

from enum import Enum


class OperationKind(str, Enum):
    """User intent that produced an operation; replayed by ``retry()``."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    ADD = "add"
    REMOVE = "remove"
    SET_QUANTITY = "set_quantity"
    RESET = "reset"


class ChangeKind(str, Enum):
    """How a displayed quantity change came about."""

    INCREMENT = "increment"
    DECREMENT = "decrement"
    ADD = "add"
    REMOVE = "remove"
    LONG_PRESS_INCREMENT = "long_press_increment"
    LONG_PRESS_DECREMENT = "long_press_decrement"
    MANUAL_INPUT = "manual_input"
    PROGRAMMATIC = "programmatic"


class CancellationReason(str, Enum):
    SUPERSEDED = "superseded"
    DISPOSED = "disposed"
    USER_CANCELLED = "user_cancelled"

    @property
    def description(self) -> str:
        return _REASON_TEXT[self]


_REASON_TEXT = {
    CancellationReason.SUPERSEDED: "superseded by new operation",
    CancellationReason.DISPOSED: "coordinator was disposed",
    CancellationReason.USER_CANCELLED: "cancelled by user",
}


__all__ = ["CancellationReason", "ChangeKind", "OperationKind"]
