from typing import Tuple

from boundednumbers import clamp

from ..types.constants import CIE_EPSILON, CIE_LINEAR_SLOPE, CIE_OFFSET
from .predicates import unit_rgb_ints
from .to_xyz import unit_rgb_to_xyz


def _lab_f(value: float) -> float:
    if value > CIE_EPSILON:
        return value ** (1 / 3)
    return CIE_LINEAR_SLOPE * value + CIE_OFFSET / 116


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert unit XYZ to CIELAB, clamping the result to the nominal LAB range.

    Args:
        x, y, z: XYZ / 100, white at (1, 1, 1)
    Returns:
        (l, a, b): lightness in [0, 100], a and b in [-128, 127]
    """
    fx, fy, fz = _lab_f(x), _lab_f(y), _lab_f(z)
    lightness = clamp(116 * fy - CIE_OFFSET, 0.0, 100.0)
    a = clamp(500 * (fx - fy), -128.0, 127.0)
    b = clamp(200 * (fy - fz), -128.0, 127.0)
    return float(lightness), float(a), float(b)


def unit_rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    ints = unit_rgb_ints(r, g, b)
    if all(v == 0 for v in ints):
        return 0.0, 0.0, 0.0
    if all(v == 255 for v in ints):
        return 100.0, 0.0, 0.0
    return xyz_to_lab(*unit_rgb_to_xyz(r, g, b))
