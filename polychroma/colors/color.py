"""
Conversion and adjustment methods, attached to ColorBase.

They live here rather than in color_base.py because they need the registry
of concrete color classes, which itself depends on ColorBase.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from boundednumbers import clamp, clamp01

from ..conversions.hue import get_hue
from ..conversions.wrapper import convert, normalize
from ..exceptions import ChannelRangeError
from ..gradients.interpolator import interpolate, lerp
from ..types.color_types import ALPHA_MAX, HUE_360, ColorSpace, ColorSpaceLike, to_color_space
from ..types.constants import CHROMA_EXPONENT, CHROMA_OFFSET, CHROMA_PRECISION, CHROMA_SCALE
from ..utils import hue_math
from ..utils.hex import hex_to_rgb, rgb_to_hex
from ..utils.num_utils import round_precise
from .color_base import ColorBase
from .models import RgbColor, color_registry

logger = logging.getLogger(__name__)


def get_color_class(color_space: ColorSpaceLike) -> type[ColorBase]:
    return color_registry[to_color_space(color_space)]


## Conversion

def color_convert(self: ColorBase, to_space: ColorSpaceLike) -> ColorBase:
    """
    Convert this color to another color space, keeping its alpha.

    RGB sources convert from their precise channels.

    Args:
        to_space: Target color space (e.g., "rgb", "hsl", ColorSpace.LAB)
    Returns:
        New color instance in the target space
    """
    target = to_color_space(to_space)
    if target == self.space:
        return self
    values = convert(self.to_precise_list(), self.space, target)
    return get_color_class(target)._from_trusted(values, self.alpha)


def cast_to(self: ColorBase, other: ColorBase) -> ColorBase:
    """Convert this color into `other`'s color space."""
    return self.convert(other.space)


def _to(space: ColorSpace):
    def method(self: ColorBase) -> ColorBase:
        return self.convert(space)
    method.__name__ = f"to_{space.value}"
    method.__doc__ = f"Convert this color to {space.value.upper()}."
    return method


## Hue

def color_hue(self: ColorBase) -> float:
    """Hue in degrees of this color's RGB projection."""
    r, g, b = normalize(self.to_rgb().to_precise_list(), ColorSpace.RGB)
    return get_hue(r, g, b)


def color_saturation(self: ColorBase) -> float:
    """HSB saturation of this color, 0-100."""
    return self.convert(ColorSpace.HSB).values[1]


def _adjust_hue(self: ColorBase, adjust) -> ColorBase:
    """Apply `adjust` to the hue channel, through HSL unless the space has a hue."""
    if self.has_hue:
        h, *rest = self.values
        return self._from_trusted((adjust(h), *rest), self.alpha)
    hsl = self.convert(ColorSpace.HSL)
    h, s, l = hsl.values
    return hsl._from_trusted((adjust(h), s, l), self.alpha).convert(self.space)


def rotate_hue(self: ColorBase, amount: float) -> ColorBase:
    """Rotate the hue by `amount` degrees, returning a color in the same space."""
    return _adjust_hue(self, lambda h: hue_math.rotate(h, amount))


def rotate_hue_rad(self: ColorBase, amount: float) -> ColorBase:
    """Rotate the hue by `amount` radians."""
    return _adjust_hue(self, lambda h: hue_math.rotate_rad(h, amount))


def with_hue(self: ColorBase, hue: float) -> ColorBase:
    if not 0 <= hue <= HUE_360:
        raise ChannelRangeError("hue", hue, 0, HUE_360)
    return _adjust_hue(self, lambda h: hue)


def warmer(self: ColorBase, amount: float, relative: bool = True) -> ColorBase:
    """
    Shift the hue towards 90 degrees.

    Args:
        amount: Percentage of the distance to 90 if `relative`, else degrees
        relative: How `amount` is read
    """
    return _adjust_hue(self, lambda h: hue_math.warmer(h, amount, relative))


def cooler(self: ColorBase, amount: float, relative: bool = True) -> ColorBase:
    """Shift the hue towards 270 degrees; see warmer()."""
    return _adjust_hue(self, lambda h: hue_math.cooler(h, amount, relative))


def opposite(self: ColorBase) -> ColorBase:
    return self.rotate_hue(180)


def distance_to(self: ColorBase, other: ColorBase) -> float:
    """Shortest hue distance to `other`, in degrees."""
    return hue_math.distance(self.hue, other.hue)


## Inversion

def _invert_hue_space(values):
    h, s, x = values
    return hue_math.rotate(h, 180), 100 - s, 100 - x


_INVERTERS = {
    ColorSpace.RGB: lambda v: tuple(255 - c for c in v),
    ColorSpace.CMYK: lambda v: tuple(100 - c for c in v),
    ColorSpace.HSI: _invert_hue_space,
    ColorSpace.HSL: _invert_hue_space,
    ColorSpace.HSP: _invert_hue_space,
    ColorSpace.HSB: _invert_hue_space,
    ColorSpace.LAB: lambda v: (100 - v[0], -v[1] - 1, -v[2] - 1),
    ColorSpace.OKLAB: lambda v: (1 - v[0], -v[1], -v[2]),
    ColorSpace.XYZ: lambda v: tuple(100 - clamp(c, 0, 100) for c in v),
}


def inverted(self: ColorBase) -> ColorBase:
    """The color opposite this one within its own space."""
    return self._from_trusted(_INVERTERS[self.space](self.values), self.alpha)


## Chroma

def chroma(self: ColorBase) -> float:
    """
    Oklab chroma in [0, 1]: ((L + 0.028) / 1.028) ** 6.9 of the Oklab lightness.
    """
    lightness = self.convert(ColorSpace.OKLAB).values[0]
    base = (lightness + CHROMA_OFFSET) / CHROMA_SCALE
    if base <= 0:
        return 0.0
    return float(clamp01(round_precise(base ** CHROMA_EXPONENT, CHROMA_PRECISION)))


def with_chroma(self: ColorBase, chroma: float) -> ColorBase:
    """
    Return this color with the Oklab lightness that yields `chroma`.

    The Oklab a and b channels are kept as they are.
    """
    if not 0 <= chroma <= 1:
        raise ChannelRangeError("chroma", chroma, 0, 1)
    oklab = self.convert(ColorSpace.OKLAB)
    if chroma == 0:
        lightness = 0.0
    else:
        lightness = CHROMA_SCALE * chroma ** (1 / CHROMA_EXPONENT) - CHROMA_OFFSET
    _, a, b = oklab.values
    return oklab._from_trusted((lightness, a, b), self.alpha).convert(self.space)


## Alpha

def with_alpha(self: ColorBase, alpha: float) -> ColorBase:
    """Return a copy with alpha set to `alpha` (0-255)."""
    return self._from_trusted(self.values, self._check_alpha(alpha))


def with_opacity(self: ColorBase, opacity: float) -> ColorBase:
    """Return a copy with alpha set from `opacity` (0-1)."""
    if not 0 <= opacity <= 1:
        raise ChannelRangeError("opacity", opacity, 0, 1)
    return self.with_alpha(opacity * ALPHA_MAX)


## Comparison

def equals(self: ColorBase, other: ColorBase) -> bool:
    """True if both colors have the same RGB display values and alpha."""
    return self.to_rgb() == other.to_rgb()


## Hex

def color_hex(self: ColorBase) -> str:
    """`#rrggbb` of this color's RGB projection."""
    return rgb_to_hex(self.to_rgb().to_list())


@classmethod
def from_hex(cls: type[ColorBase], hex_str: str) -> ColorBase:
    """Parse `#RRGGBB` or `#RGB` into a color of this class."""
    rgb = RgbColor(*hex_to_rgb(hex_str))
    if cls is ColorBase:
        return rgb
    return rgb.convert(cls.space)


## Interpolation

def color_interpolate(self: ColorBase, end: ColorBase, step: float) -> ColorBase:
    """The color at `step` (0-1) between this color and `end`, in this color's space."""
    return interpolate(self, end, step)


def lerp_to(
    self: ColorBase,
    other: ColorBase,
    steps: int,
    color_space: Optional[ColorSpaceLike] = None,
    exclude_original_colors: bool = False,
    invert: bool = False,
) -> List[ColorBase]:
    """See gradients.interpolator.lerp()."""
    return lerp(
        self,
        other,
        steps,
        color_space=color_space,
        exclude_original_colors=exclude_original_colors,
        invert=invert,
    )


ColorBase.convert = color_convert
ColorBase.cast_to = cast_to
for _space in ColorSpace:
    setattr(ColorBase, f"to_{_space.value}", _to(_space))
ColorBase.to_hsv = ColorBase.to_hsb
ColorBase.hue = property(color_hue)
ColorBase.saturation = property(color_saturation)
ColorBase.rotate_hue = rotate_hue
ColorBase.rotate_hue_rad = rotate_hue_rad
ColorBase.with_hue = with_hue
ColorBase.warmer = warmer
ColorBase.cooler = cooler
ColorBase.opposite = property(opposite)
ColorBase.distance_to = distance_to
ColorBase.inverted = property(inverted)
ColorBase.chroma = property(chroma)
ColorBase.with_chroma = with_chroma
ColorBase.with_alpha = with_alpha
ColorBase.with_opacity = with_opacity
ColorBase.equals = equals
ColorBase.hex = property(color_hex)
ColorBase.from_hex = from_hex
ColorBase.interpolate = color_interpolate
ColorBase.lerp_to = lerp_to
