from typing import Tuple

from .hue import get_hue
from .predicates import unit_rgb_ints


def unit_rgb_to_hsb(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSB (HSV).

    Args:
        r, g, b: Red, green and blue in [0, 1]
    Returns:
        (h, s, v): hue in degrees, saturation and brightness in [0, 1]
    """
    ints = unit_rgb_ints(r, g, b)
    if ints[0] == ints[1] == ints[2]:
        return 0.0, 0.0, ints[0] / 255

    maximum = max(r, g, b)
    minimum = min(r, g, b)
    saturation = 0.0 if maximum == 0 else (maximum - minimum) / maximum
    return get_hue(r, g, b), saturation, maximum
