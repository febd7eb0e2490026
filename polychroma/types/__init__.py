from .color_types import (
    ColorSpace,
    ColorSpaceLike,
    HUE_SPACES,
    is_hue_space,
    to_color_space,
    unit_scales,
)

__all__ = [
    "ColorSpace",
    "ColorSpaceLike",
    "HUE_SPACES",
    "is_hue_space",
    "to_color_space",
    "unit_scales",
]
