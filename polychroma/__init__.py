"""
Polychroma
==========

Color models and conversions between RGB, CMYK, HSI, HSL, HSP, HSB (HSV),
CIELAB, Oklab and CIEXYZ, with interpolation, palette resampling and hue
adjustments.
"""

from .types.color_types import ColorSpace
from .exceptions import (
    ColorModelError,
    ChannelRangeError,
    ChannelCountError,
    HexFormatError,
    UndefinedConversionError,
)
from .colors import (
    ColorBase,
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
    get_color_class,
    random_color,
)
from .conversions import convert
from .gradients import augment, convert_colors, get_color_at, interpolate, lerp

__version__ = "0.1.0"

__all__ = [
    'ColorSpace',
    'ColorModelError',
    'ChannelRangeError',
    'ChannelCountError',
    'HexFormatError',
    'UndefinedConversionError',
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
    'get_color_class',
    'random_color',
    'convert',
    'augment',
    'convert_colors',
    'get_color_at',
    'interpolate',
    'lerp',
]
