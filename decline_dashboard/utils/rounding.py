"""Rounding rules for rates and monetary totals"""

import math


def round2(value: float) -> float:
    """
    Round to 2 decimals with halves going up (toward +infinity).

    Multiply-round-divide as the dashboard has always reported it; this is
    not banker's rounding and not Decimal quantization. 0.125 -> 0.13,
    -0.125 -> -0.12.
    """
    return math.floor(value * 100 + 0.5) / 100


def round_share(part: int, whole: int) -> float:
    """
    part/whole as a percentage with 2 decimals, 0 when whole is 0.

    Scales the ratio by 10000 in one step before rounding, so float error
    lands the same way the decline-code table has always shown it
    (23/160 -> 14.38, where round2(23/160*100) gives 14.37).
    """
    if whole <= 0:
        return 0.0
    return math.floor(part / whole * 10000 + 0.5) / 100
