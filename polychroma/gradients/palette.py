"""
Palette resampling.

A palette is a list of colors placed on an abstract [0, 1] gradient, evenly
or at caller-supplied stops. augment() reads the gradient back at a new
number of evenly spaced positions.
"""

from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING, List, Optional, Sequence

from ..exceptions import ChannelCountError, ChannelRangeError
from ..types.color_types import ColorSpaceLike, to_color_space
from .interpolator import interpolate

if TYPE_CHECKING:
    from ..colors.color_base import ColorBase

logger = logging.getLogger(__name__)

# Tolerance for a target position landing on a stop
STOP_TOLERANCE = 1e-9


def _even_stops(count: int) -> List[float]:
    if count == 1:
        return [0.0]
    return [i / (count - 1) for i in range(count)]


def _check_palette(colors: Sequence[ColorBase]) -> None:
    if len(colors) == 0:
        raise ValueError("palette must contain at least one color")


def augment(
    colors: Sequence[ColorBase],
    new_length: int,
    stops: Optional[Sequence[float]] = None,
    color_space: Optional[ColorSpaceLike] = None,
    invert: bool = False,
    from_end_space: bool = False,
) -> List[ColorBase]:
    """
    Resample a palette to `new_length` colors.

    Args:
        colors: The palette
        new_length: Number of colors to return, at least 1
        stops: Gradient position of each color in [0, 1]; evenly spaced if None.
            Unsorted stops are sorted together with their colors.
        color_space: Interpolate every segment in this space
        invert: Walk the gradient from the last color to the first
        from_end_space: Interpolate each segment in its ending color's space
            instead of its starting color's; ignored when `color_space` is set
    Returns:
        `new_length` colors
    """
    _check_palette(colors)
    if new_length < 1:
        raise ChannelRangeError("new_length", new_length, 1, None)

    if stops is None:
        stops = _even_stops(len(colors))
    else:
        if len(stops) != len(colors):
            raise ChannelCountError("stops", len(colors), len(stops))
        for stop in stops:
            if not 0 <= stop <= 1:
                raise ChannelRangeError("stop", stop, 0, 1)

    # sorted() is stable, so colors sharing a stop keep their order
    pairs = sorted(zip(stops, colors), key=lambda pair: pair[0])
    if invert:
        pairs = [(1 - stop, color) for stop, color in reversed(pairs)]
    stops = [stop for stop, _ in pairs]
    palette = [color for _, color in pairs]

    space = to_color_space(color_space) if color_space is not None else None

    def _forced(color: ColorBase) -> ColorBase:
        return color.convert(space) if space is not None else color

    logger.debug("Augmenting %d colors to %d", len(palette), new_length)

    if len(palette) == 1 or new_length == 1:
        return [_forced(palette[0])] * new_length

    result: List[ColorBase] = []
    for i in range(new_length):
        step = i / (new_length - 1)

        if step <= stops[0]:
            result.append(_forced(palette[0]))
            continue
        if step >= stops[-1]:
            result.append(_forced(palette[-1]))
            continue

        on_stop = next(
            (j for j, stop in enumerate(stops) if math.isclose(step, stop, abs_tol=STOP_TOLERANCE)),
            None,
        )
        if on_stop is not None:
            result.append(palette[on_stop])
            continue

        for j in range(len(stops) - 1):
            if stops[j] <= step < stops[j + 1]:
                break
        lower, upper = stops[j], stops[j + 1]
        start, end = palette[j], palette[j + 1]

        if space is not None:
            start, end = start.convert(space), end.convert(space)
        elif from_end_space:
            start = start.convert(end.space)

        result.append(interpolate(start, end, (step - lower) / (upper - lower)))

    return result


def get_color_at(colors: Sequence[ColorBase], delta: float) -> ColorBase:
    """
    The color at `delta` along a palette of evenly spaced colors.

    Args:
        colors: The palette
        delta: Position in [0, 1]
    Returns:
        The palette color itself when `delta` lands on one, otherwise the
        blend in the space of the segment's starting color
    """
    _check_palette(colors)
    if not 0 <= delta <= 1:
        raise ChannelRangeError("delta", delta, 0, 1)
    if len(colors) == 1:
        return colors[0]

    position = delta * (len(colors) - 1)
    index = int(position)
    # a position on a palette color returns that color in its own space
    if position == index:
        return colors[index]
    return interpolate(colors[index], colors[index + 1], position - index)


def convert_colors(colors: Sequence[ColorBase], color_space: ColorSpaceLike) -> List[ColorBase]:
    """Convert every color of a palette to `color_space`."""
    space = to_color_space(color_space)
    return [color.convert(space) for color in colors]
