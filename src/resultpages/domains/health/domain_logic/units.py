"""Unit conversions and number formatting shared by every page builder.

Rounding is half-up (``floor(x + 0.5)``) everywhere, never banker's rounding,
so published numbers do not shift between .5 boundaries.
"""

from __future__ import annotations

import math

LB_TO_KG = 0.45359237
KG_TO_LB = 1 / LB_TO_KG
IN_TO_CM = 2.54


def to_kg(weight_lb: float) -> float:
    return weight_lb * LB_TO_KG


def to_lb(weight_kg: float) -> float:
    return weight_kg * KG_TO_LB


def to_cm(height_in: float) -> float:
    return height_in * IN_TO_CM


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals, ties away from negative infinity."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_signed(value: float, digits: int = 1) -> str:
    """Fixed-precision string with a leading ``+`` for positive values.

    Values that round to zero render unsigned (``0.0``, never ``-0.0``).
    """
    rounded = round_half_up(value, digits)
    if rounded == 0:
        rounded = 0.0
    sign = "+" if rounded > 0 else ""
    return f"{sign}{rounded:.{digits}f}"


def format_thousands(value: float) -> str:
    """Integer with thousands separators, e.g. ``2,450``."""
    return f"{round_int(value):,}"


def mean(values) -> float:
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)
