import math
from typing import Tuple

import numpy as np
from boundednumbers import clamp01

from ..types.color_types import HUE_360, ColorSpace
from ..types.constants import (
    LMS_TO_LINEAR_RGB,
    OKLAB_TO_LMS,
    PB,
    PG,
    PR,
    WHITEPOINT_X,
    WHITEPOINT_Y,
    WHITEPOINT_Z,
    XYZ_TO_RGB,
)
from .gamma import linear_to_srgb
from .predicates import IS_BLACK, IS_WHITE
from .to_xyz import lab_to_xyz

UnitRGB = Tuple[float, float, float]


def _clamped(r: float, g: float, b: float) -> UnitRGB:
    return float(clamp01(r)), float(clamp01(g)), float(clamp01(b))


## CMYK to RGB

def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> UnitRGB:
    """
    Args:
        c, m, y, k: Cyan, magenta, yellow and black in [0, 1]
    Returns:
        (r, g, b) in [0, 1]
    """
    return (
        1 - clamp01(c * (1 - k) + k),
        1 - clamp01(m * (1 - k) + k),
        1 - clamp01(y * (1 - k) + k),
    )


## HSI to RGB

def hsi_to_unit_rgb(h: float, s: float, i: float) -> UnitRGB:
    """
    Convert HSI to RGB by 120 degree sector.

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in [0, 1]
        i: Intensity in [0, 1]
    Returns:
        (r, g, b) in [0, 1]; overshoot from float error is clamped away
    """
    hue = math.radians(h)
    pi3 = math.pi / 3

    def _first() -> float:
        return i * (1 - s)

    def _second(angle: float) -> float:
        return i * (1 + s * math.cos(angle) / math.cos(pi3 - angle))

    def _third(angle: float) -> float:
        return i * (1 + s * (1 - math.cos(angle) / math.cos(pi3 - angle)))

    if hue < 2 * pi3:
        b = _first()
        r = _second(hue)
        g = _third(hue)
    elif hue < 4 * pi3:
        hue -= 2 * pi3
        r = _first()
        g = _second(hue)
        b = _third(hue)
    else:
        hue -= 4 * pi3
        g = _first()
        b = _second(hue)
        r = _third(hue)

    return _clamped(r, g, b)


## HSL to RGB

def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_unit_rgb(h: float, s: float, l: float) -> UnitRGB:
    """
    Convert HSL to RGB with the classic hue-to-rgb helper.

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]
    Returns:
        (r, g, b) in [0, 1]
    """
    if s == 0:
        return _clamped(l, l, l)

    hue = h / HUE_360
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return _clamped(
        _hue_to_rgb(p, q, hue + 1 / 3),
        _hue_to_rgb(p, q, hue),
        _hue_to_rgb(p, q, hue - 1 / 3),
    )


## HSB to RGB

def hsb_to_unit_rgb(h: float, s: float, v: float) -> UnitRGB:
    """
    Convert HSB (HSV) to RGB by 60 degree sector.

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in [0, 1]
        v: Brightness in [0, 1]
    Returns:
        (r, g, b) in [0, 1]
    """
    hue = h / HUE_360 * 6
    index = math.floor(hue)
    fraction = hue - index
    segment = 1 - fraction if index % 2 == 0 else fraction

    a = v
    b = v * (1 - s)
    c = v * (1 - segment * s)

    sector = index % 6
    if sector == 0:
        rgb = (a, c, b)
    elif sector == 1:
        rgb = (c, a, b)
    elif sector == 2:
        rgb = (b, a, c)
    elif sector == 3:
        rgb = (b, c, a)
    elif sector == 4:
        rgb = (c, b, a)
    else:
        rgb = (a, b, c)
    return _clamped(*rgb)


## HSP to RGB

def hsp_to_unit_rgb(h: float, s: float, p: float) -> UnitRGB:
    """
    Convert HSP to RGB.

    The hue is folded into one of six sectors; within a sector two channels
    are solved from the brightness equation and the third follows linearly.
    Fully saturated colors (s == 1) have one channel at 0 and use a separate
    solution. Each channel is clamped as soon as it is computed.
    See: http://alienryderflex.com/hsp.html

    Args:
        h: Hue in degrees [0, 360]
        s: Saturation in [0, 1]
        p: Perceived brightness in [0, 1]
    Returns:
        (r, g, b) in [0, 1]
    """
    hue = (h / HUE_360) % 1.0
    index = math.floor(hue * 6) % 6
    segment = index if index % 2 == 0 else index + 1
    sign = 1 if index % 2 == 0 else -1
    hue = 6 * (sign * hue - sign * segment / 6)

    if s < 1:
        inverse = 1 - s
        part = 1 + hue * (1 / inverse - 1)

        def _first(a: float, b: float, c: float) -> float:
            return clamp01(p / math.sqrt(a / inverse / inverse + b * part * part + c))

        def _second(first: float) -> float:
            return clamp01(first / inverse)

        def _third(first: float, second: float) -> float:
            return clamp01(first + hue * (second - first))

        if index == 0:
            blue = _first(PR, PG, PB)
            red = _second(blue)
            green = _third(blue, red)
        elif index == 1:
            blue = _first(PG, PR, PB)
            green = _second(blue)
            red = _third(blue, green)
        elif index == 2:
            red = _first(PG, PB, PR)
            green = _second(red)
            blue = _third(red, green)
        elif index == 3:
            red = _first(PB, PG, PR)
            blue = _second(red)
            green = _third(red, blue)
        elif index == 4:
            green = _first(PB, PR, PG)
            blue = _second(green)
            red = _third(green, blue)
        else:
            green = _first(PR, PB, PG)
            red = _second(green)
            blue = _third(green, red)
    else:
        def _first(a: float, b: float) -> float:
            return clamp01(math.sqrt(p * p / (a + b * hue * hue)))

        def _second(first: float) -> float:
            return clamp01(first * hue)

        if index == 0:
            red = _first(PR, PG)
            green = _second(red)
            blue = 0.0
        elif index == 1:
            green = _first(PG, PR)
            red = _second(green)
            blue = 0.0
        elif index == 2:
            green = _first(PG, PB)
            blue = _second(green)
            red = 0.0
        elif index == 3:
            blue = _first(PB, PG)
            green = _second(blue)
            red = 0.0
        elif index == 4:
            blue = _first(PB, PR)
            red = _second(blue)
            green = 0.0
        else:
            red = _first(PR, PB)
            blue = _second(red)
            green = 0.0

    return _clamped(red, green, blue)


## XYZ / LAB to RGB

def xyz_to_unit_rgb(x: float, y: float, z: float) -> UnitRGB:
    """
    Args:
        x, y, z: XYZ / 100, white at (1, 1, 1); values above 1 are allowed
    Returns:
        (r, g, b) in [0, 1], out-of-gamut colors clamped
    """
    scaled = np.array([
        x * 100 / WHITEPOINT_X,
        y * 100 / WHITEPOINT_Y,
        z * 100 / WHITEPOINT_Z,
    ])
    r, g, b = (linear_to_srgb(float(v)) for v in XYZ_TO_RGB @ scaled)
    return _clamped(r, g, b)


def lab_to_unit_rgb(l: float, a: float, b: float) -> UnitRGB:
    return xyz_to_unit_rgb(*lab_to_xyz(l, a, b))


## Oklab to RGB

def oklab_to_unit_rgb(l: float, a: float, b: float) -> UnitRGB:
    """
    Convert Oklab to RGB, following https://bottosson.github.io/posts/oklab/

    Args:
        l, a, b: Oklab lightness and opponent axes
    Returns:
        (r, g, b) in [0, 1], out-of-gamut colors clamped
    """
    if IS_BLACK[ColorSpace.OKLAB]((l, a, b)):
        return 0.0, 0.0, 0.0
    if IS_WHITE[ColorSpace.OKLAB]((l, a, b)):
        return 1.0, 1.0, 1.0

    lms = (OKLAB_TO_LMS @ np.array([l, a, b])) ** 3
    r, g, b_ = (linear_to_srgb(float(v)) for v in LMS_TO_LINEAR_RGB @ lms)
    return _clamped(r, g, b_)
