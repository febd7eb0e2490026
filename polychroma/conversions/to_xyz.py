from typing import Tuple

import numpy as np

from ..types.constants import (
    CIE_EPSILON,
    CIE_KAPPA,
    CIE_OFFSET,
    RGB_TO_XYZ,
    WHITEPOINT_X,
    WHITEPOINT_Y,
    WHITEPOINT_Z,
)
from .gamma import srgb_to_linear
from .predicates import unit_rgb_ints

WHITEPOINT = np.array([WHITEPOINT_X, WHITEPOINT_Y, WHITEPOINT_Z])


def unit_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB to unit XYZ (XYZ / 100).

    The whitepoint is calibrated so RGB white lands on exactly 1 in every
    channel. Values above 1 are legal for colors outside sRGB.

    Args:
        r, g, b: Red, green and blue in [0, 1]
    Returns:
        (x, y, z) with white at (1, 1, 1)
    """
    ints = unit_rgb_ints(r, g, b)
    if all(v == 0 for v in ints):
        return 0.0, 0.0, 0.0
    if all(v == 255 for v in ints):
        return 1.0, 1.0, 1.0

    linear = np.array([srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b)])
    x, y, z = RGB_TO_XYZ @ linear * WHITEPOINT / 100
    return float(x), float(y), float(z)


def lab_to_xyz(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Convert CIELAB to unit XYZ.

    Negative intermediates, produced by LAB values outside the sRGB gamut,
    are floored to 0.

    Args:
        l: Lightness in [0, 100]
        a, b: Chromaticity in [-128, 127]
    Returns:
        (x, y, z) with white at (1, 1, 1)
    """
    fy = (l + CIE_OFFSET) / 116
    fx = a / 500 + fy
    fz = fy - b / 200

    def _finish(f: float) -> float:
        cubed = f ** 3
        return cubed if cubed > CIE_EPSILON else (116 * f - CIE_OFFSET) / CIE_KAPPA

    x = _finish(fx)
    y = fy ** 3 if l > CIE_EPSILON * CIE_KAPPA else l / CIE_KAPPA
    z = _finish(fz)
    return max(x, 0.0), max(y, 0.0), max(z, 0.0)
