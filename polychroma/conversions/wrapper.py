import logging
import math
from numbers import Real
from typing import Callable, Dict, Sequence, Tuple

from boundednumbers import clamp

from ..exceptions import ChannelCountError, ChannelRangeError
from ..types.color_types import (
    ChannelValues,
    ColorSpace,
    ColorSpaceLike,
    bounds_of,
    in_bounds,
    to_color_space,
    unit_scales,
)
from .to_cmyk import unit_rgb_to_cmyk
from .to_hsb import unit_rgb_to_hsb
from .to_hsi import unit_rgb_to_hsi
from .to_hsl import unit_rgb_to_hsl
from .to_hsp import unit_rgb_to_hsp
from .to_lab import unit_rgb_to_lab, xyz_to_lab
from .to_oklab import unit_rgb_to_oklab
from .to_rgb import (
    cmyk_to_unit_rgb,
    hsb_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsp_to_unit_rgb,
    lab_to_unit_rgb,
    oklab_to_unit_rgb,
    xyz_to_unit_rgb,
)
from .to_xyz import lab_to_xyz, unit_rgb_to_xyz

logger = logging.getLogger(__name__)

ConversionFn = Callable[..., Tuple[float, ...]]

# Every space reaches every other space through unit RGB.
TO_UNIT_RGB: Dict[ColorSpace, ConversionFn] = {
    ColorSpace.CMYK: cmyk_to_unit_rgb,
    ColorSpace.HSI: hsi_to_unit_rgb,
    ColorSpace.HSL: hsl_to_unit_rgb,
    ColorSpace.HSP: hsp_to_unit_rgb,
    ColorSpace.HSB: hsb_to_unit_rgb,
    ColorSpace.LAB: lab_to_unit_rgb,
    ColorSpace.OKLAB: oklab_to_unit_rgb,
    ColorSpace.XYZ: xyz_to_unit_rgb,
}

FROM_UNIT_RGB: Dict[ColorSpace, ConversionFn] = {
    ColorSpace.CMYK: unit_rgb_to_cmyk,
    ColorSpace.HSI: unit_rgb_to_hsi,
    ColorSpace.HSL: unit_rgb_to_hsl,
    ColorSpace.HSP: unit_rgb_to_hsp,
    ColorSpace.HSB: unit_rgb_to_hsb,
    ColorSpace.LAB: unit_rgb_to_lab,
    ColorSpace.OKLAB: unit_rgb_to_oklab,
    ColorSpace.XYZ: unit_rgb_to_xyz,
}

# Pairs that skip the RGB round trip
CONVERT_DIRECT: Dict[Tuple[ColorSpace, ColorSpace], ConversionFn] = {
    (ColorSpace.XYZ, ColorSpace.LAB): xyz_to_lab,
    (ColorSpace.LAB, ColorSpace.XYZ): lab_to_xyz,
}


def normalize(values: Sequence[float], space: ColorSpace) -> ChannelValues:
    """Native channel units -> unit values (hue stays in degrees)."""
    return tuple(v / s for v, s in zip(values, unit_scales[space]))


def scale(values: Sequence[float], space: ColorSpace) -> ChannelValues:
    """Unit values -> native channel units."""
    return tuple(v * s for v, s in zip(values, unit_scales[space]))


def check_channels(values: Sequence[float], space: ColorSpace, names: Sequence[str] = ()) -> None:
    """
    Reject a channel list that does not fit `space`.

    Raises:
        ChannelCountError: if `values` has the wrong length
        ChannelRangeError: if a value is not a finite real (bools included)
            or lies outside the channel range
    """
    if len(values) != len(unit_scales[space]):
        raise ChannelCountError(space.value, len(unit_scales[space]), len(values))
    for i, (value, (lo, hi)) in enumerate(zip(values, bounds_of(space))):
        name = names[i] if names else f"{space.value} channel {i}"
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
            raise ChannelRangeError(name, value, lo, hi)
        if not in_bounds(value, lo, hi):
            raise ChannelRangeError(name, value, lo, hi)


def clamp_to_space(values: Sequence[float], space: ColorSpace) -> ChannelValues:
    """
    Clamp native values into the declared range of `space`.

    Sides declared as None are left open.
    """
    clamped = []
    for value, (lo, hi) in zip(values, bounds_of(space)):
        if lo is not None and hi is not None:
            value = clamp(value, lo, hi)
        elif lo is not None:
            value = max(value, lo)
        elif hi is not None:
            value = min(value, hi)
        clamped.append(float(value))
    return tuple(clamped)


def convert(
    values: Sequence[float],
    from_space: ColorSpaceLike,
    to_space: ColorSpaceLike,
) -> ChannelValues:
    """
    Convert native channel values between two color spaces.

    Args:
        values: Channel values in `from_space` native units (RGB 0-255, CMYK 0-100, ...)
        from_space: Source color space
        to_space: Target color space
    Returns:
        Channel values in `to_space` native units, clamped to its range
    Raises:
        UndefinedConversionError: if either space is unknown
        ChannelCountError: if `values` has the wrong length for `from_space`
        ChannelRangeError: if a value lies outside its `from_space` range
    """
    fs = to_color_space(from_space)
    ts = to_color_space(to_space)
    check_channels(values, fs)

    if fs == ts:
        return tuple(float(v) for v in values)  # No conversion needed

    # normalize → convert → scale
    unit = normalize(values, fs)

    key = (fs, ts)
    if key in CONVERT_DIRECT:
        logger.debug("Converting %s to %s directly", fs.value, ts.value)
        converted = CONVERT_DIRECT[key](*unit)
    else:
        logger.debug("Converting %s to %s via rgb", fs.value, ts.value)
        rgb = unit if fs == ColorSpace.RGB else TO_UNIT_RGB[fs](*unit)
        converted = rgb if ts == ColorSpace.RGB else FROM_UNIT_RGB[ts](*rgb)

    return clamp_to_space(scale(converted, ts), ts)
