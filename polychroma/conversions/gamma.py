"""sRGB transfer function, shared by the XYZ and Oklab paths."""

from ..types.constants import (
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
)


def srgb_to_linear(value: float) -> float:
    if value <= SRGB_DECODE_THRESHOLD:
        return value / SRGB_LINEAR_SLOPE
    return ((value + 0.055) / 1.055) ** SRGB_GAMMA


def linear_to_srgb(value: float) -> float:
    if value <= SRGB_ENCODE_THRESHOLD:
        return value * SRGB_LINEAR_SLOPE
    return 1.055 * value ** (1 / SRGB_GAMMA) - 0.055
