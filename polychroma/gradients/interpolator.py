"""
Linear interpolation between two colors.

Channels, alpha included, are blended on a straight line in the working
space and rounded to PRECISION digits. Hue is blended like any other
channel: 350 -> 10 passes through 180, not through 0.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

import numpy as np

from ..exceptions import ChannelRangeError
from ..types.color_types import ColorSpaceLike, to_color_space
from ..utils.num_utils import round_half_up, round_precise

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase

logger = logging.getLogger(__name__)


def lerp_values(starts: Sequence[float], ends: Sequence[float], step: float) -> List[float]:
    """
    Blend two channel vectors at `step`, rounding each result.

    Args:
        starts: Values at step 0
        ends: Values at step 1
        step: Position in [0, 1]
    Returns:
        (1 - step) * starts + step * ends, rounded to PRECISION digits
    """
    blended = (1 - step) * np.asarray(starts, dtype=float) + step * np.asarray(ends, dtype=float)
    return [round_precise(float(v)) for v in blended]


def _mix(color_a: ColorBase, color_b: ColorBase, step: float) -> ColorBase:
    """Blend two colors that are already in the same space."""
    *values, alpha = lerp_values(
        color_a.to_precise_list_with_alpha(),
        color_b.to_precise_list_with_alpha(),
        step,
    )
    return color_a._from_trusted(values, round_half_up(alpha))


def interpolate(color_a: ColorBase, color_b: ColorBase, step: float) -> ColorBase:
    """
    The color at `step` between two colors, in `color_a`'s space.

    Args:
        color_a: Start color, also fixes the working space
        color_b: End color, converted into the working space
        step: Position in [0, 1]
    """
    if not 0 <= step <= 1:
        raise ChannelRangeError("step", step, 0, 1)
    return _mix(color_a, color_b.convert(color_a.space), step)


def lerp(
    color_a: ColorBase,
    color_b: ColorBase,
    steps: int,
    color_space: Optional[ColorSpaceLike] = None,
    exclude_original_colors: bool = False,
    invert: bool = False,
) -> List[ColorBase]:
    """
    Evenly spaced colors between `color_a` and `color_b`.

    Args:
        color_a: Start color
        color_b: End color
        steps: Number of intermediate colors, at least 1
        color_space: Working space; defaults to `color_a`'s space
        exclude_original_colors: Return only the intermediate colors
        invert: Default the working space to `color_b`'s space instead
    Returns:
        `steps` colors, or `steps + 2` with both ends, all in the working space
    """
    if steps < 1:
        raise ChannelRangeError("steps", steps, 1, None)

    if color_space is not None:
        space = to_color_space(color_space)
    else:
        space = color_b.space if invert else color_a.space

    start = color_a.convert(space)
    end = color_b.convert(space)
    logger.debug("Interpolating %d steps in %s", steps, space.value)

    colors = [_mix(start, end, i / (steps + 1)) for i in range(1, steps + 1)]
    if exclude_original_colors:
        return colors
    return [start, *colors, end]
