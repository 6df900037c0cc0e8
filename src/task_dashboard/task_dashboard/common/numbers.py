from __future__ import annotations

import math
from typing import Any, Iterable


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going toward +inf; non-finite input gives ``0.0``."""

    if value is None or not math.isfinite(value):
        return 0.0
    factor = 10 ** digits
    scaled = value * factor
    if not math.isfinite(scaled):
        # too large to carry any fractional digits
        return value
    return math.floor(scaled + 0.5) / factor


def round1(value: float) -> float:
    """One-decimal rounding used for every displayed score."""
    return round_half_up(value, 1)


def average(values: Iterable[float]) -> float:
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def is_number(value: Any) -> bool:
    """True for real numbers (bools excluded), NaN included."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Best-effort float conversion; unparseable or non-finite input gives ``default``."""

    if is_number(value):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return default
    else:
        return default

    if not math.isfinite(number):
        return default
    return number
