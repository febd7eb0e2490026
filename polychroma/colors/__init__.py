"""
Polychroma Color Classes
========================

Immutable color values for nine color spaces, each holding its channel
values and an integer alpha (0-255, default 255).

Usage
-----
>>> from polychroma.colors import RgbColor
>>>
>>> orange = RgbColor(255, 144, 0)
>>> orange.to_hsl().lightness
50.0
>>> orange.rotate_hue(30)
RgbColor(239, 255, 0, alpha=255)
>>> orange.lerp_to(RgbColor(0, 0, 255), 1, exclude_original_colors=True)
[RgbColor(128, 72, 128, alpha=255)]

Color Classes
-------------
    - RgbColor: red, green, blue (0-255, stored unrounded)
    - CmykColor: cyan, magenta, yellow, black (0-100)
    - HsiColor: hue (0-360), saturation, intensity (0-100)
    - HslColor: hue (0-360), saturation, lightness (0-100)
    - HspColor: hue (0-360), saturation, perceived_brightness (0-100)
    - HsbColor / HsvColor: hue (0-360), saturation, brightness (0-100)
    - LabColor: lightness (0-100), chromaticity_a, chromaticity_b (-128-127)
    - OklabColor: lightness, chromaticity_a, chromaticity_b (finite)
    - XyzColor: x, y, z (0-100, upwardly unbounded)

Notes
-----
- Instances are frozen after initialization; every adjustment returns a new color
- Constructor arguments outside a channel's range raise ChannelRangeError
- Colors compare equal when their channels agree to 6 decimals (RGB: as integers)
"""

from .color_base import ColorBase
from .models import (
    RgbColor,
    CmykColor,
    HsiColor,
    HslColor,
    HspColor,
    HsbColor,
    HsvColor,
    LabColor,
    OklabColor,
    XyzColor,
    color_registry,
)
from .color import get_color_class
from .random import random_color


__all__ = [
    'ColorBase',
    'RgbColor',
    'CmykColor',
    'HsiColor',
    'HslColor',
    'HspColor',
    'HsbColor',
    'HsvColor',
    'LabColor',
    'OklabColor',
    'XyzColor',
    'color_registry',
    'get_color_class',
    'random_color',
]
