from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def percent(part: float, whole: float) -> int:
    """Whole-number percentage; an empty denominator gives 0."""
    if not whole:
        return 0
    return round_half_up(part / whole * 100)
