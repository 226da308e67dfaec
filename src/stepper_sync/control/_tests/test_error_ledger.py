from __future__ import annotations

import logging

from stepper_sync.control.error_ledger import ErrorLedger
from stepper_sync.control.errors import StepperOperationError
from stepper_sync.control.kinds import OperationKind


def test_record_without_sink_logs_warning(caplog) -> None:
    ledger = ErrorLedger(clock=lambda: 12.5)
    cause = RuntimeError("boom")

    with caplog.at_level(logging.WARNING, logger="stepper_sync.control.error_ledger"):
        record = ledger.record(OperationKind.INCREMENT, 4, cause)

    assert ledger.last is record
    assert ledger.failures == 1
    assert record.timestamp == 12.5
    assert isinstance(record.error, StepperOperationError)
    assert record.error.__cause__ is cause
    assert record.error.operation_kind is OperationKind.INCREMENT
    assert "Unhandled stepper operation error" in caplog.text


def test_sink_receives_cause_and_context() -> None:
    received = []
    ledger = ErrorLedger(sink=lambda exc, ctx: received.append((exc, ctx)))
    cause = ValueError("nope")

    ledger.record(OperationKind.SET_QUANTITY, 9, cause, reverted_to=3)

    assert len(received) == 1
    exc, ctx = received[0]
    assert exc is cause
    assert ctx["operation_kind"] == "set_quantity"
    assert ctx["attempted_value"] == 9
    assert ctx["reverted_to"] == 3


def test_raising_sink_is_swallowed(caplog) -> None:
    def sink(exc, ctx):
        raise KeyError("sink broke")

    ledger = ErrorLedger(sink=sink)
    with caplog.at_level(logging.WARNING, logger="stepper_sync.control.error_ledger"):
        ledger.record(OperationKind.DECREMENT, 1, RuntimeError("boom"))

    assert ledger.last is not None
    assert "on_error callback raised" in caplog.text


def test_clear_returns_previous_record() -> None:
    ledger = ErrorLedger(sink=lambda exc, ctx: None)
    assert ledger.clear() is None
    record = ledger.record(OperationKind.ADD, 1, RuntimeError("x"))
    assert ledger.clear() is record
    assert ledger.last is None
