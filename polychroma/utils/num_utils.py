import math

from ..types.constants import PRECISION


def round_precise(value: float, precision: int = PRECISION) -> float:
    """
    Round to `precision` decimal digits, halves away from zero.

    Python's round() rounds halves to even, which would turn RGB 238.5 into
    238; channel values are rounded the way display code expects (239).
    """
    factor = 10 ** precision
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    The value is snapped to PRECISION digits first so float noise such as
    238.49999999999997 still rounds like 238.5.
    """
    return int(round_precise(round_precise(value), 0))
