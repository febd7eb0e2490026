import math
from typing import Tuple

from ..types.constants import PB, PG, PR
from .hue import get_hue
from .predicates import unit_rgb_ints


def perceived_brightness(r: float, g: float, b: float) -> float:
    return math.sqrt(r * r * PR + g * g * PG + b * b * PB)


def unit_rgb_to_hsp(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSP.

    Saturation is one minus the ratio of the smaller non-max channel to the
    max channel.
    See: http://alienryderflex.com/hsp.html

    Args:
        r, g, b: Red, green and blue in [0, 1]
    Returns:
        (h, s, p): hue in degrees, saturation and perceived brightness in [0, 1]
    """
    ints = unit_rgb_ints(r, g, b)
    if ints[0] == ints[1] == ints[2]:
        return 0.0, 0.0, ints[0] / 255

    maximum = max(r, g, b)
    if maximum == r:
        saturation = 1 - (g / r if b >= g else b / r)
    elif maximum == g:
        saturation = 1 - (b / g if r >= b else r / g)
    else:
        saturation = 1 - (r / b if g >= r else g / b)

    return get_hue(r, g, b), saturation, perceived_brightness(r, g, b)
