"""Resolve which value the stepper shows while operations are in flight.

The displayed value comes from exactly one source at a time:

- ``Committed``: the caller's authoritative value.
- ``Debouncing(value, anchor)``: a locally accumulated value during a
  debounce burst; ``anchor`` is the committed value from before the burst.
- ``Optimistic(value)``: a dispatched target shown before confirmation.

The in-flight target is tracked separately because non-optimistic steppers
still need to know what is pending (busy checks, cancellation reports)
without displaying it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from stepper_sync.control.clamp import Number


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Committed:
    pass


@dataclass(frozen=True)
class Debouncing:
    value: Number
    anchor: Number


@dataclass(frozen=True)
class Optimistic:
    value: Number


DisplaySource = Union[Committed, Debouncing, Optimistic]

COMMITTED = Committed()


class DisplayState:
    """Owns the display source variant and the in-flight target."""

    def __init__(self, *, optimistic: bool) -> None:
        self._optimistic = bool(optimistic)
        self._source: DisplaySource = COMMITTED
        self._in_flight: Optional[Number] = None

    # ------------------------------------------------------------------
    @property
    def source(self) -> DisplaySource:
        return self._source

    @property
    def optimistic(self) -> bool:
        return self._optimistic

    @property
    def pending_value(self) -> Optional[Number]:
        source = self._source
        return source.value if isinstance(source, Optimistic) else None

    @property
    def debounced_value(self) -> Optional[Number]:
        source = self._source
        return source.value if isinstance(source, Debouncing) else None

    @property
    def debounce_anchor(self) -> Optional[Number]:
        source = self._source
        return source.anchor if isinstance(source, Debouncing) else None

    @property
    def in_flight(self) -> Optional[Number]:
        return self._in_flight

    def resolve(self, committed: Number) -> Number:
        source = self._source
        if isinstance(source, (Debouncing, Optimistic)):
            return source.value
        return committed

    # ------------------------------------------------------------------ debounce
    def begin_debounce(self, value: Number, committed: Number) -> Number:
        """Show ``value`` immediately; returns the burst anchor."""

        source = self._source
        anchor = source.anchor if isinstance(source, Debouncing) else committed
        self._source = Debouncing(value=value, anchor=anchor)
        return anchor

    def settle_debounce(self) -> None:
        if isinstance(self._source, Debouncing):
            self._source = COMMITTED

    def revert_debounce(self) -> Optional[Number]:
        """Drop the burst and return the anchor it started from."""

        source = self._source
        if not isinstance(source, Debouncing):
            return None
        self._source = COMMITTED
        return source.anchor

    # ------------------------------------------------------------------ optimistic
    def stage(self, target: Number) -> Optional[Number]:
        """Record ``target`` as in flight; returns the target it replaced."""

        previous = self._in_flight
        self._in_flight = target
        if self._optimistic:
            self._source = Optimistic(value=target)
        return previous

    def confirm(self) -> None:
        """The live operation succeeded."""

        self._in_flight = None
        if isinstance(self._source, Optimistic):
            self._source = COMMITTED

    def fail(self, *, revert: bool) -> Optional[Number]:
        """The live operation failed; returns the pending value when reverted."""

        self._in_flight = None
        source = self._source
        if revert and isinstance(source, Optimistic):
            self._source = COMMITTED
            return source.value
        return None

    def observe_committed(self, committed: Number) -> bool:
        """Clear the optimistic value once the caller's value has caught up."""

        source = self._source
        if isinstance(source, Optimistic) and committed == source.value:
            self._source = COMMITTED
            return True
        if isinstance(source, Optimistic) and logger.isEnabledFor(logging.DEBUG):
            logger.debug("display keeps pending=%r (committed=%r)", source.value, committed)
        return False

    def clear(self) -> Optional[Number]:
        """Forget everything; returns whatever target was outstanding."""

        outstanding = self._in_flight
        source = self._source
        if outstanding is None and isinstance(source, (Optimistic, Debouncing)):
            outstanding = source.value
        self._in_flight = None
        self._source = COMMITTED
        return outstanding


__all__ = [
    "COMMITTED",
    "Committed",
    "Debouncing",
    "DisplaySource",
    "DisplayState",
    "Optimistic",
]
