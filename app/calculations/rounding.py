"""
Money Rounding

Shared rounding control and numeric input checks for the engine.
"""

import math
import sys
from typing import Literal

RoundMode = Literal["none", "cents"]

ROUND_MODES = ("none", "cents")


def apply_rounding(value: float, round_mode: RoundMode) -> float:
    """
    Round a monetary value according to the rounding mode.

    "cents" rounds half up to two decimal places. A machine-epsilon nudge
    is added first so that values like 1.005, stored as 1.00499999...,
    still round up to 1.01. "none" keeps full floating-point precision.
    Amounts too large to carry cents (including infinity) are returned
    unchanged.

    Args:
        value: Amount to round
        round_mode: "none" or "cents"

    Returns:
        The rounded amount

    Raises:
        ValueError: If round_mode is not a known rounding mode
    """
    if round_mode not in ROUND_MODES:
        raise ValueError(f"Unknown rounding mode: {round_mode!r}")
    if round_mode == "none":
        return value

    scaled = (value + sys.float_info.epsilon) * 100 + 0.5
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled) / 100


def is_finite_number(value) -> bool:
    """True for int/float values that are finite as floats. Booleans are rejected."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False
