from .interpolator import interpolate, lerp, lerp_values
from .palette import augment, convert_colors, get_color_at

__all__ = [
    'interpolate',
    'lerp',
    'lerp_values',
    'augment',
    'convert_colors',
    'get_color_at',
]
