"""Bounds arithmetic and validation for candidate stepper values.

Pure functions only. Every proposal is judged on the *clamped* result: an
increment is feasible whenever it moves the value at all, so a large ``step``
near the ceiling lands on ``maximum`` instead of disabling the button.
Decrementing past ``minimum`` is never floored; it yields a removal outcome
the caller decides what to do with.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

Number = Union[int, float]
Validator = Callable[[Number, Number], bool]


class StepVerdict(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    REMOVAL = "removal"
    BLOCKED = "blocked"


@dataclass(frozen=True)
class StepBounds:
    minimum: Number
    maximum: Number
    step: Number

    def __post_init__(self) -> None:
        assert self.maximum > self.minimum, "maximum must exceed minimum"
        assert self.step > 0, "step must be positive"


@dataclass(frozen=True)
class StepOutcome:
    """Result of proposing a new value; ``value`` is the candidate."""

    verdict: StepVerdict
    current: Number
    value: Number

    @property
    def accepted(self) -> bool:
        return self.verdict is StepVerdict.ACCEPTED

    @property
    def changed(self) -> bool:
        return self.accepted and self.value != self.current


def clamp_value(value: Number, minimum: Number, maximum: Number) -> Number:
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def coerce_like(value: Number, template: Number) -> Number:
    """Return ``value`` as an int when ``template`` is an int and no precision is lost."""

    if isinstance(template, int) and not isinstance(template, bool):
        if isinstance(value, float) and value.is_integer():
            return int(value)
    return value


def _judge(current: Number, candidate: Number, validator: Optional[Validator]) -> StepOutcome:
    if validator is not None and not validator(current, candidate):
        return StepOutcome(StepVerdict.REJECTED, current, candidate)
    return StepOutcome(StepVerdict.ACCEPTED, current, candidate)


def propose_increment(
    current: Number,
    bounds: StepBounds,
    validator: Optional[Validator] = None,
) -> StepOutcome:
    candidate = coerce_like(clamp_value(current + bounds.step, bounds.minimum, bounds.maximum), current)
    if candidate <= current:
        return StepOutcome(StepVerdict.BLOCKED, current, candidate)
    return _judge(current, candidate, validator)


def propose_decrement(
    current: Number,
    bounds: StepBounds,
    validator: Optional[Validator] = None,
    *,
    allow_removal: bool,
) -> StepOutcome:
    """Propose ``current - step``.

    Below ``minimum`` the raw (unclamped) value is returned with a REMOVAL
    verdict when ``allow_removal`` is set, otherwise BLOCKED. The validator is
    not consulted for removals.
    """

    candidate = current - bounds.step
    if candidate < bounds.minimum:
        verdict = StepVerdict.REMOVAL if allow_removal else StepVerdict.BLOCKED
        return StepOutcome(verdict, current, coerce_like(candidate, current))
    return _judge(current, coerce_like(candidate, current), validator)


def propose_target(
    current: Number,
    target: Number,
    bounds: StepBounds,
    validator: Optional[Validator] = None,
) -> StepOutcome:
    """Propose an absolute value (manual entry, programmatic set)."""

    if isinstance(target, float) and math.isnan(target):
        return StepOutcome(StepVerdict.BLOCKED, current, current)
    candidate = coerce_like(clamp_value(target, bounds.minimum, bounds.maximum), current)
    if candidate == current:
        return StepOutcome(StepVerdict.BLOCKED, current, candidate)
    return _judge(current, candidate, validator)


def parse_quantity(text: str, fallback: Number) -> Number:
    """Parse manual input; unparseable text yields ``fallback``."""

    raw = (text or "").strip()
    if not raw:
        return fallback
    try:
        return int(raw, 10)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        return fallback
    if math.isnan(value) or math.isinf(value):
        return fallback
    return value


__all__ = [
    "Number",
    "StepBounds",
    "StepOutcome",
    "StepVerdict",
    "Validator",
    "clamp_value",
    "coerce_like",
    "parse_quantity",
    "propose_decrement",
    "propose_increment",
    "propose_target",
]
