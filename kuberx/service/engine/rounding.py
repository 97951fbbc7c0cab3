"""Rounding helpers shared by the engine.

The published figures round halves upwards (2.5 -> 3, -2.5 -> -2),
which differs from Python's round-half-to-even.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +infinity."""
    return int(math.floor(value + 0.5))


def round_to_tenth(value: float) -> float:
    """Round to one decimal place, halves towards +infinity."""
    return math.floor(value * 10 + 0.5) / 10


def guarded(denominator: float) -> float:
    """Substitute 1 for a zero denominator so ratios stay finite."""
    return denominator or 1
