from typing import Tuple

from .hue import get_hue
from .predicates import unit_rgb_ints


def unit_rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to HSL.

    Args:
        r, g, b: Red, green and blue in [0, 1]
    Returns:
        (h, s, l): hue in degrees, saturation and lightness in [0, 1]
    """
    ints = unit_rgb_ints(r, g, b)
    if ints[0] == ints[1] == ints[2]:
        return 0.0, 0.0, ints[0] / 255

    maximum = max(r, g, b)
    minimum = min(r, g, b)
    delta = maximum - minimum
    lightness = (maximum + minimum) / 2

    if lightness > 0.5:
        saturation = delta / (2 - maximum - minimum)
    else:
        saturation = delta / (maximum + minimum)

    return get_hue(r, g, b), saturation, lightness
