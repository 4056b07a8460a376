"""
Helpers for IEEE-754 single precision values.

Tempo is stored as a 32-bit float, but Python floats are doubles. A plain
``repr`` of the widened value prints digits that only exist in the double
(98.4f becomes 98.4000015258789), so formatting searches for the shortest
decimal that maps back to the same float32.
"""

import math
import struct
from decimal import Decimal, localcontext

# Enough significant digits to round-trip any float32
MAX_FLOAT32_DIGITS = 9


def to_float32(value: float) -> float:
    """Round a Python float to the nearest float32 value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _round_trips(candidate: Decimal, target: float) -> bool:
    try:
        return to_float32(float(candidate)) == target
    except OverflowError:
        # Beyond the float32 range
        return False


def format_float32(value: float) -> str:
    """
    Format a float32 value with the fewest digits that round-trip.

    Args:
        value: Value to format (rounded to float32 first)

    Returns:
        Positional decimal text without exponent or trailing zeros,
        e.g. "120", "98.4", "0.5". NaN and infinities render as
        "NaN", "+Inf" and "-Inf".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"

    target = to_float32(value)
    exact = Decimal(target)

    with localcontext() as ctx:
        ctx.prec = 60
        for digits in range(1, MAX_FLOAT32_DIGITS + 1):
            nearest = Decimal(f"{target:.{digits - 1}e}")
            # Near powers of two the rounding interval is lopsided, so a
            # neighbour one unit in the last digit can round-trip when the
            # nearest decimal does not
            unit = Decimal(1).scaleb(nearest.adjusted() - digits + 1)
            matches = [
                candidate
                for candidate in (nearest, nearest - unit, nearest + unit)
                if _round_trips(candidate, target)
            ]
            if matches:
                best = min(matches, key=lambda candidate: abs(candidate - exact))
                return format(best.normalize(), "f")

    return format(exact.normalize(), "f")
