"""
Hue arithmetic shared by every hue adjustment.

All hues are in degrees on [0, 360]. Wrapping is delegated to
``boundednumbers.cyclic_wrap_float`` so rotated hues always land back on the
color wheel.
"""

import math

from boundednumbers.functions import cyclic_wrap_float

from ..exceptions import ChannelRangeError
from ..types.color_types import HUE_360
from ..types.constants import COOL_HUE, WARM_HUE


def _check_hue(name: str, hue: float) -> None:
    if not 0 <= hue <= HUE_360:
        raise ChannelRangeError(name, hue, 0, HUE_360)


def _check_amount(amount: float, relative: bool) -> None:
    if amount <= 0:
        raise ChannelRangeError("amount", amount, 0, 100 if relative else None)
    if relative and amount > 100:
        raise ChannelRangeError("amount", amount, 0, 100)


def wrap_hue(hue: float) -> float:
    """Wrap any angle in degrees onto [0, 360)."""
    return float(cyclic_wrap_float(hue, 0.0, float(HUE_360)))


def distance(hue1: float, hue2: float) -> float:
    """
    Shortest arc between two hues, in degrees.

    Args:
        hue1: First hue in [0, 360]
        hue2: Second hue in [0, 360]
    Returns:
        The smaller of the clockwise and counterclockwise distances
    """
    _check_hue("hue1", hue1)
    _check_hue("hue2", hue2)
    if hue1 > hue2:
        direct, around = hue1 - hue2, (hue2 + HUE_360) - hue1
    else:
        direct, around = hue2 - hue1, (hue1 + HUE_360) - hue2
    return direct if direct < around else around


def rotate(hue: float, amount: float) -> float:
    """Rotate `hue` by `amount` degrees, wrapping onto [0, 360)."""
    return wrap_hue(hue + amount)


def rotate_rad(hue: float, amount: float) -> float:
    """Rotate `hue` (degrees) by `amount` radians."""
    return rotate(hue, math.degrees(amount))


def warmer(hue: float, amount: float, relative: bool = True) -> float:
    """
    Move `hue` towards 90 degrees.

    If `relative`, `amount` is a percentage of the distance to 90; otherwise it
    is a number of degrees. The result is capped at 90, except for hues in
    [270, 360] which advance through 0 without a cap.
    """
    _check_hue("hue", hue)
    _check_amount(amount, relative)
    adjustment = distance(hue, WARM_HUE) * (amount / 100) if relative else amount

    if 0 <= hue <= WARM_HUE:
        hue = min(hue + adjustment, WARM_HUE)
    elif COOL_HUE <= hue <= HUE_360:
        hue = wrap_hue(hue + adjustment)
    else:
        hue = max(hue - adjustment, WARM_HUE)
    return float(hue)


def cooler(hue: float, amount: float, relative: bool = True) -> float:
    """
    Move `hue` towards 270 degrees.

    Mirror of warmer(): capped at 270, except for hues in [0, 90] which move
    backwards through 360 without a cap.
    """
    _check_hue("hue", hue)
    _check_amount(amount, relative)
    adjustment = distance(hue, COOL_HUE) * (amount / 100) if relative else amount

    if 0 <= hue <= WARM_HUE:
        hue = wrap_hue(hue - adjustment)
    elif COOL_HUE <= hue <= HUE_360:
        hue = max(hue - adjustment, COOL_HUE)
    else:
        hue = min(hue + adjustment, COOL_HUE)
    return float(hue)
