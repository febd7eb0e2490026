from __future__ import annotations
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Union

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ChannelValues = Tuple[float, ...]
Bound = Optional[float]


class ColorSpace(str, Enum):
    CMYK = "cmyk"
    HSB = "hsb"
    HSI = "hsi"
    HSL = "hsl"
    HSP = "hsp"
    LAB = "lab"
    OKLAB = "oklab"
    RGB = "rgb"
    XYZ = "xyz"


ColorSpaceLike = Union[ColorSpace, str]

# Alternative spellings accepted wherever a space name is parsed.
SPACE_ALIASES: Dict[str, ColorSpace] = {
    "hsv": ColorSpace.HSB,
    "cielab": ColorSpace.LAB,
    "ciexyz": ColorSpace.XYZ,
}

HUE_SPACES = {ColorSpace.HSI, ColorSpace.HSL, ColorSpace.HSP, ColorSpace.HSB}

HUE_360 = 360

# Per-channel divisors between a space's native channel units and the unit
# values the conversion functions work with. Hue stays in degrees.
unit_scales: Dict[ColorSpace, ScalarVector] = {
    ColorSpace.RGB: (255.0, 255.0, 255.0),
    ColorSpace.CMYK: (100.0, 100.0, 100.0, 100.0),
    ColorSpace.HSI: (1.0, 100.0, 100.0),
    ColorSpace.HSL: (1.0, 100.0, 100.0),
    ColorSpace.HSP: (1.0, 100.0, 100.0),
    ColorSpace.HSB: (1.0, 100.0, 100.0),
    ColorSpace.LAB: (1.0, 1.0, 1.0),
    ColorSpace.OKLAB: (1.0, 1.0, 1.0),
    ColorSpace.XYZ: (100.0, 100.0, 100.0),
}

channel_minima: Dict[ColorSpace, Tuple[Bound, ...]] = {
    ColorSpace.RGB: (0.0, 0.0, 0.0),
    ColorSpace.CMYK: (0.0, 0.0, 0.0, 0.0),
    ColorSpace.HSI: (0.0, 0.0, 0.0),
    ColorSpace.HSL: (0.0, 0.0, 0.0),
    ColorSpace.HSP: (0.0, 0.0, 0.0),
    ColorSpace.HSB: (0.0, 0.0, 0.0),
    ColorSpace.LAB: (0.0, -128.0, -128.0),
    ColorSpace.OKLAB: (None, None, None),
    ColorSpace.XYZ: (0.0, 0.0, 0.0),
}

channel_maxima: Dict[ColorSpace, Tuple[Bound, ...]] = {
    ColorSpace.RGB: (255.0, 255.0, 255.0),
    ColorSpace.CMYK: (100.0, 100.0, 100.0, 100.0),
    ColorSpace.HSI: (360.0, 100.0, 100.0),
    ColorSpace.HSL: (360.0, 100.0, 100.0),
    ColorSpace.HSP: (360.0, 100.0, 100.0),
    ColorSpace.HSB: (360.0, 100.0, 100.0),
    ColorSpace.LAB: (100.0, 127.0, 127.0),
    ColorSpace.OKLAB: (None, None, None),
    ColorSpace.XYZ: (None, None, None),
}

ALPHA_MAX = 255


def to_color_space(space: ColorSpaceLike) -> ColorSpace:
    """
    Resolve a color space name or enum member to a ColorSpace.

    Args:
        space: ColorSpace member or case-insensitive name ("hsv" maps to HSB)
    Returns:
        The matching ColorSpace
    Raises:
        UndefinedConversionError: if the name is not a known color space
    """
    if isinstance(space, ColorSpace):
        return space
    name = str(space).lower()
    if name in SPACE_ALIASES:
        return SPACE_ALIASES[name]
    try:
        return ColorSpace(name)
    except ValueError:
        from ..exceptions import UndefinedConversionError
        raise UndefinedConversionError(space) from None


def is_hue_space(color_space: ColorSpaceLike) -> bool:
    """
    Check if the given color space carries a hue channel (HSI, HSL, HSP, HSB).

    Args:
        color_space: Color space enum or string
    Returns:
        True if hue-based, False otherwise
    """
    return to_color_space(color_space) in HUE_SPACES


def in_bounds(value: float, minimum: Bound, maximum: Bound) -> bool:
    if minimum is not None and value < minimum:
        return False
    if maximum is not None and value > maximum:
        return False
    return True


def bounds_of(space: ColorSpace) -> Sequence[Tuple[Bound, Bound]]:
    return tuple(zip(channel_minima[space], channel_maxima[space]))
