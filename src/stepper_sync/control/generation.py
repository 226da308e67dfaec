"""Monotonic operation epochs used for cooperative cancellation.

Every continuation that resumes after an ``await`` holds an ``Epoch`` and
checks ``is_live()`` before touching shared state. Superseding work bumps the
counter; a stale epoch never becomes live again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass


logger = logging.getLogger(__name__)


class GenerationCounter:
    """Owner of the live generation number. Never reset."""

    def __init__(self) -> None:
        self._value = 0

    @property
    def current(self) -> int:
        return self._value

    def mint(self) -> "Epoch":
        self._value += 1
        return Epoch(self._value, self)

    def supersede(self) -> int:
        """Invalidate every outstanding epoch without starting a new one."""

        self._value += 1
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("generation superseded -> %d", self._value)
        return self._value


@dataclass(frozen=True)
class Epoch:
    id: int
    source: GenerationCounter

    def is_live(self) -> bool:
        return self.source.current == self.id

    def is_stale(self) -> bool:
        return not self.is_live()


__all__ = ["Epoch", "GenerationCounter"]
