"""
Black / white / monochromatic tests for every color space.

Each predicate reads the space's own native channel values, rounded to
PRECISION digits (RGB: to display integers), and is used to short-circuit
conversions whose general formulas are undefined at the achromatic extremes.
"""

from typing import Callable, Dict, Sequence, Tuple

from ..types.color_types import ColorSpace
from ..utils.num_utils import round_half_up, round_precise

Predicate = Callable[[Sequence[float]], bool]


def _rounded(values: Sequence[float]) -> Tuple[float, ...]:
    return tuple(round_precise(v) for v in values)


def _rgb_ints(values: Sequence[float]) -> Tuple[int, ...]:
    return tuple(round_half_up(v) for v in values)


def unit_rgb_ints(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """Display integers of a unit RGB color."""
    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def _rgb_black(values):
    return all(v == 0 for v in _rgb_ints(values))


def _rgb_white(values):
    return all(v == 255 for v in _rgb_ints(values))


def _rgb_mono(values):
    r, g, b = _rgb_ints(values)
    return r == g == b


def _cmyk_black(values):
    return _rounded(values)[3] == 100


def _cmyk_white(values):
    return all(v == 0 for v in _rounded(values))


def _cmyk_mono(values):
    c, m, y, _ = _rounded(values)
    return c == m == y == 0


def _hsi_black(values):
    return _rounded(values)[2] == 0


def _hsi_white(values):
    _, s, i = _rounded(values)
    return s == 0 and i == 100


def _hsi_mono(values):
    _, s, i = _rounded(values)
    return i == 0 or s == 0


def _hsl_black(values):
    return _rounded(values)[2] == 0


def _hsl_white(values):
    return _rounded(values)[2] == 100


def _hsl_mono(values):
    _, s, l = _rounded(values)
    return l in (0, 100) or s == 0


def _hsp_black(values):
    return _rounded(values)[2] == 0


def _hsp_white(values):
    _, s, p = _rounded(values)
    return s == 0 and p == 100


def _hsp_mono(values):
    _, s, p = _rounded(values)
    return p in (0, 100) or s == 0


def _hsb_black(values):
    return _rounded(values)[2] == 0


def _hsb_white(values):
    _, s, v = _rounded(values)
    return s == 0 and v == 100


def _hsb_mono(values):
    _, s, v = _rounded(values)
    return v == 0 or s == 0


def _lab_black(values):
    return all(v == 0 for v in _rounded(values))


def _lab_white(values):
    l, a, b = _rounded(values)
    return l == 100 and a == 0 and b == 0


def _lab_mono(values):
    _, a, b = _rounded(values)
    return a == 0 and b == 0


def _oklab_black(values):
    l, a, b = _rounded(values)
    return l <= 0 and a <= 0 and b <= 0


def _oklab_white(values):
    l, a, b = _rounded(values)
    return l >= 1 and a <= 0 and b <= 0


def _xyz_black(values):
    return all(v == 0 for v in _rounded(values))


def _xyz_white(values):
    return all(v >= 100 for v in _rounded(values))


def _xyz_mono(values):
    x, y, z = _rounded(values)
    return x == y == z


IS_BLACK: Dict[ColorSpace, Predicate] = {
    ColorSpace.RGB: _rgb_black,
    ColorSpace.CMYK: _cmyk_black,
    ColorSpace.HSI: _hsi_black,
    ColorSpace.HSL: _hsl_black,
    ColorSpace.HSP: _hsp_black,
    ColorSpace.HSB: _hsb_black,
    ColorSpace.LAB: _lab_black,
    ColorSpace.OKLAB: _oklab_black,
    ColorSpace.XYZ: _xyz_black,
}

IS_WHITE: Dict[ColorSpace, Predicate] = {
    ColorSpace.RGB: _rgb_white,
    ColorSpace.CMYK: _cmyk_white,
    ColorSpace.HSI: _hsi_white,
    ColorSpace.HSL: _hsl_white,
    ColorSpace.HSP: _hsp_white,
    ColorSpace.HSB: _hsb_white,
    ColorSpace.LAB: _lab_white,
    ColorSpace.OKLAB: _oklab_white,
    ColorSpace.XYZ: _xyz_white,
}

IS_MONOCHROMATIC: Dict[ColorSpace, Predicate] = {
    ColorSpace.RGB: _rgb_mono,
    ColorSpace.CMYK: _cmyk_mono,
    ColorSpace.HSI: _hsi_mono,
    ColorSpace.HSL: _hsl_mono,
    ColorSpace.HSP: _hsp_mono,
    ColorSpace.HSB: _hsb_mono,
    ColorSpace.LAB: _lab_mono,
    ColorSpace.OKLAB: _lab_mono,
    ColorSpace.XYZ: _xyz_mono,
}


def is_black(space: ColorSpace, values: Sequence[float]) -> bool:
    return IS_BLACK[space](values)


def is_white(space: ColorSpace, values: Sequence[float]) -> bool:
    return IS_WHITE[space](values)


def is_monochromatic(space: ColorSpace, values: Sequence[float]) -> bool:
    return IS_MONOCHROMATIC[space](values)
