"""
RGB to Oklab, following the reference implementation at
https://bottosson.github.io/posts/oklab/
"""

from typing import Tuple

import numpy as np

from ..types.constants import LINEAR_RGB_TO_LMS, LMS_TO_OKLAB
from .gamma import srgb_to_linear
from .predicates import unit_rgb_ints


def unit_rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to Oklab.

    Args:
        r, g, b: Red, green and blue in [0, 1]
    Returns:
        (l, a, b) in Oklab units, white at (1, 0, 0)
    """
    ints = unit_rgb_ints(r, g, b)
    if all(v == 0 for v in ints):
        return 0.0, 0.0, 0.0
    if all(v == 255 for v in ints):
        return 1.0, 0.0, 0.0

    linear = np.array([srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)])
    lms = np.cbrt(LINEAR_RGB_TO_LMS @ linear)
    l, a, b_ = LMS_TO_OKLAB @ lms
    return float(l), float(a), float(b_)
