"""
Polychroma Color Space Conversions
==================================

Scalar conversion functions between nine color spaces: RGB, CMYK, HSI, HSL,
HSP, HSB (HSV), CIELAB, Oklab and CIEXYZ.

Every space converts to and from RGB; any other pair is routed through RGB,
except XYZ <-> LAB which has a direct path.

Conversion Functions
--------------------
The unit-level functions take and return unit values: RGB, CMYK,
saturation, lightness, intensity and brightness in [0, 1], XYZ divided by
100, hue in degrees, LAB and Oklab in their own units.

RGB → X:
    unit_rgb_to_cmyk(r, g, b)
    unit_rgb_to_hsi(r, g, b)
    unit_rgb_to_hsl(r, g, b)
    unit_rgb_to_hsp(r, g, b)
    unit_rgb_to_hsb(r, g, b)
    unit_rgb_to_xyz(r, g, b)
    unit_rgb_to_lab(r, g, b)
    unit_rgb_to_oklab(r, g, b)

X → RGB:
    cmyk_to_unit_rgb(c, m, y, k)
    hsi_to_unit_rgb(h, s, i)
    hsl_to_unit_rgb(h, s, l)
    hsp_to_unit_rgb(h, s, p)
    hsb_to_unit_rgb(h, s, v)
    xyz_to_unit_rgb(x, y, z)
    lab_to_unit_rgb(l, a, b)
    oklab_to_unit_rgb(l, a, b)

XYZ ↔ LAB:
    xyz_to_lab(x, y, z)
    lab_to_xyz(l, a, b)

High-Level API
--------------
convert(values, from_space, to_space)
    Convert native channel values (RGB 0-255, CMYK 0-100, ...) between spaces

>>> from polychroma.conversions import convert
>>> convert((0, 255, 255), "rgb", "cmyk")
(100.0, 0.0, 0.0, 0.0)
"""

from .hue import get_hue
from .predicates import is_black, is_white, is_monochromatic
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
from .wrapper import check_channels, clamp_to_space, convert, normalize, scale
from ..types.color_types import ColorSpace

__all__ = [
    'ColorSpace',
    'convert',
    'normalize',
    'scale',
    'clamp_to_space',
    'check_channels',
    'get_hue',
    'is_black',
    'is_white',
    'is_monochromatic',
    'unit_rgb_to_cmyk',
    'unit_rgb_to_hsi',
    'unit_rgb_to_hsl',
    'unit_rgb_to_hsp',
    'unit_rgb_to_hsb',
    'unit_rgb_to_xyz',
    'unit_rgb_to_lab',
    'unit_rgb_to_oklab',
    'cmyk_to_unit_rgb',
    'hsi_to_unit_rgb',
    'hsl_to_unit_rgb',
    'hsp_to_unit_rgb',
    'hsb_to_unit_rgb',
    'xyz_to_unit_rgb',
    'lab_to_unit_rgb',
    'oklab_to_unit_rgb',
    'xyz_to_lab',
    'lab_to_xyz',
]
