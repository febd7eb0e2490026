from typing import Tuple

from boundednumbers import clamp01

from .predicates import unit_rgb_ints


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """
    Convert unit RGB to unit CMYK.

    Args:
        r, g, b: Red, green and blue in [0, 1]
    Returns:
        (c, m, y, k) each in [0, 1]
    """
    if all(v == 0 for v in unit_rgb_ints(r, g, b)):
        return 0.0, 0.0, 0.0, 1.0

    c, m, y = 1 - r, 1 - g, 1 - b
    k = clamp01(min(c, m, y))
    if k == 1:
        return 0.0, 0.0, 0.0, 1.0

    return (
        clamp01((c - k) / (1 - k)),
        clamp01((m - k) / (1 - k)),
        clamp01((y - k) / (1 - k)),
        k,
    )
