from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

Number = Union[int, float, Decimal]


def to_amount(value: Number | None) -> float:
    """Coerce int/float/Decimal (or None) into the float used by all formulas."""
    if value is None:
        return 0.0
    return float(value)


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, ties towards positive infinity.

    Matches the rounding the legacy payroll figures were produced with, so
    2.5 -> 3 and -2.5 -> -2 (Python's ``round`` would give 2 and -2).
    """
    x = float(value)
    floor = math.floor(x)
    return int(floor + 1) if x - floor >= 0.5 else int(floor)
