"""Rounding helpers matching the numbers shown on the draft history page.

Python's built-in :func:`round` rounds half to even, which would shift
values like ``2.25`` and ``0.05`` away from what members have always seen.
These helpers round half up instead.
"""

import math
from decimal import ROUND_HALF_UP, Decimal

from src.draft_luck.config import ROUND_DECIMALS


def decimal_scale(decimals: int = ROUND_DECIMALS) -> int:
    """Multiplier that shifts *decimals* places left of the point, e.g. 10."""
    return 10 ** decimals


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going towards +infinity."""
    return math.floor(value + 0.5)


def round_to_places(value: float, decimals: int = ROUND_DECIMALS) -> float:
    """Round *value* to *decimals* places, ties going towards +infinity."""
    scale = decimal_scale(decimals)
    return round_half_up(value * scale) / scale


def format_percentage(value: float, decimals: int = ROUND_DECIMALS) -> str:
    """Format *value* as a fixed-point percentage string, e.g. ``"87.5%"``.

    Uses the exact binary value of the float, rounding ties away from zero.
    """
    quantum = Decimal(1).scaleb(-decimals)
    fixed = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{fixed}%"
