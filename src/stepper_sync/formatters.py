"""Display formatters turning a quantity into a label."""

from __future__ import annotations

from typing import Callable

from stepper_sync.control.clamp import Number

Formatter = Callable[[Number], str]


def _plain(quantity: Number) -> str:
    if isinstance(quantity, int) or float(quantity).is_integer():
        return str(int(quantity))
    return str(quantity)


def _scaled(value: float, suffix: str) -> str:
    if value == int(value):
        return f"{int(value)}{suffix}"
    return f"{value:.1f}{suffix}"


def abbreviated(quantity: Number) -> str:
    """1000 -> "1k", 1500 -> "1.5k", 2000000 -> "2M"."""

    if quantity >= 1_000_000:
        return _scaled(quantity / 1_000_000, "M")
    if quantity >= 1_000:
        return _scaled(quantity / 1_000, "k")
    return _plain(quantity)


def abbreviated_with_max(max_quantity: Number) -> Formatter:
    """Like ``abbreviated`` but values at or above ``max_quantity`` read "99+"."""

    cap = _plain(max_quantity)

    def _format(quantity: Number) -> str:
        if quantity >= max_quantity:
            return f"{cap}+"
        return abbreviated(quantity)

    return _format


def simple(quantity: Number) -> str:
    return _plain(quantity)


__all__ = ["Formatter", "abbreviated", "abbreviated_with_max", "simple"]
