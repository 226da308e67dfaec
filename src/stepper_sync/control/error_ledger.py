"""Record the most recent operation failure and surface it."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from stepper_sync.control.clamp import Number
from stepper_sync.control.errors import StepperOperationError
from stepper_sync.control.kinds import OperationKind


logger = logging.getLogger(__name__)

ErrorSink = Callable[[BaseException, Dict[str, Any]], None]


@dataclass(frozen=True)
class ErrorRecord:
    operation_kind: OperationKind
    attempted_value: Optional[Number]
    cause: BaseException
    error: StepperOperationError
    timestamp: float
    reverted_to: Optional[Number] = None

    def context(self) -> Dict[str, Any]:
        return {
            "operation_kind": self.operation_kind.value,
            "attempted_value": self.attempted_value,
            "reverted_to": self.reverted_to,
            "error": self.error,
        }


class ErrorLedger:
    """Holds the last failure; cleared on the next dispatch or success."""

    def __init__(self, *, sink: Optional[ErrorSink] = None, clock: Callable[[], float] = time.time) -> None:
        self._sink = sink
        self._clock = clock
        self._last: Optional[ErrorRecord] = None
        self._failures = 0

    @property
    def last(self) -> Optional[ErrorRecord]:
        return self._last

    @property
    def failures(self) -> int:
        return self._failures

    def set_sink(self, sink: Optional[ErrorSink]) -> None:
        self._sink = sink

    def clear(self) -> Optional[ErrorRecord]:
        last = self._last
        self._last = None
        return last

    def record(
        self,
        kind: OperationKind,
        attempted: Optional[Number],
        cause: BaseException,
        *,
        reverted_to: Optional[Number] = None,
    ) -> ErrorRecord:
        error = StepperOperationError(kind, attempted, cause)
        error.__cause__ = cause
        record = ErrorRecord(
            operation_kind=kind,
            attempted_value=attempted,
            cause=cause,
            error=error,
            timestamp=float(self._clock()),
            reverted_to=reverted_to,
        )
        self._last = record
        self._failures += 1
        self._surface(record)
        return record

    # ------------------------------------------------------------------
    def _surface(self, record: ErrorRecord) -> None:
        sink = self._sink
        if sink is None:
            # Unobserved failures still leave a trace.
            logger.warning(
                "Unhandled stepper operation error: %s (provide an on_error callback to handle it)",
                record.error,
                exc_info=(type(record.cause), record.cause, record.cause.__traceback__),
            )
            return
        try:
            sink(record.cause, record.context())
        except Exception:
            logger.warning(
                "Stepper on_error callback raised while handling %s",
                record.error,
                exc_info=True,
            )


__all__ = ["ErrorLedger", "ErrorRecord", "ErrorSink"]
