import math
from typing import Tuple

from boundednumbers import clamp

from ..types.color_types import HUE_360
from .predicates import unit_rgb_ints


def unit_rgb_to_hsi(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSI.

    The hue comes from the arccosine of the chromaticity differences rather
    than from get_hue(), mirrored past 180 degrees when blue exceeds green.

    Args:
        r, g, b: Red, green and blue in [0, 1]
    Returns:
        (h, s, i): hue in degrees, saturation and intensity in [0, 1]
    """
    ints = unit_rgb_ints(r, g, b)
    if all(v == 0 for v in ints):
        return 0.0, 0.0, 0.0
    if all(v == 255 for v in ints):
        return 0.0, 0.0, 1.0
    if ints[0] == ints[1] == ints[2]:
        return 0.0, 0.0, ints[0] / 255

    total = r + g + b
    rf, gf, bf = r / total, g / total, b / total

    numerator = 0.5 * ((rf - gf) + (rf - bf))
    denominator = math.sqrt((rf - gf) ** 2 + (rf - bf) * (gf - bf))
    hue = math.acos(clamp(numerator / denominator, -1.0, 1.0))
    if bf > gf:
        hue = 2 * math.pi - hue

    hue = hue / (2 * math.pi) * HUE_360
    saturation = 1 - 3 * min(rf, gf, bf)
    intensity = total / 3
    return hue, saturation, intensity
