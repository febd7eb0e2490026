"""
Random colors drawn from a caller-owned numpy Generator.

Ranges are given per channel name, ``hue=(300, 60)``; a hue range whose
minimum exceeds its maximum wraps through 0. Channels are rounded to one
decimal, RGB channels are drawn as integers.
"""

from __future__ import annotations
from typing import Dict, Optional, Tuple

import numpy as np
from boundednumbers import clamp

from ..exceptions import ChannelRangeError
from ..types.color_types import HUE_360, ColorSpace, ColorSpaceLike, bounds_of, to_color_space
from ..utils.num_utils import round_precise
from ..utils.rng import get_rng, uniform
from .color import get_color_class
from .color_base import ColorBase

Range = Tuple[float, float]

# Sampling ranges for sides a space leaves unbounded
_OPEN_RANGES: Dict[ColorSpace, Tuple[Range, ...]] = {
    ColorSpace.OKLAB: ((0.0, 1.0), (0.0, 1.0), (0.0, 1.0)),
    ColorSpace.XYZ: ((0.0, 100.0), (0.0, 100.0), (0.0, 100.0)),
}


def default_ranges(space: ColorSpace) -> Tuple[Range, ...]:
    if space in _OPEN_RANGES:
        return _OPEN_RANGES[space]
    return tuple((float(lo), float(hi)) for lo, hi in bounds_of(space))


def _random_hue(rng: np.random.Generator, lo: float, hi: float) -> float:
    if lo <= hi:
        return round_precise(uniform(rng, lo, hi), 1)
    return (round_precise(uniform(rng, 0, hi + HUE_360 - lo), 1) + lo) % HUE_360


def random_color(
    space: ColorSpaceLike,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    **ranges: Range,
) -> ColorBase:
    """
    Build a random color.

    Args:
        space: Color space of the result
        rng: Generator to draw from; never shared implicitly
        seed: Seed for a fresh generator when `rng` is None
        **ranges: (min, max) per channel name, defaults to the full range
    Returns:
        A color of `space`'s class, fully opaque
    """
    cls = get_color_class(space)
    space = to_color_space(space)
    unknown = set(ranges) - set(cls.channel_names)
    if unknown:
        raise TypeError(f"{cls.__name__} has no channel(s) {sorted(unknown)}")

    generator = get_rng(rng, seed)
    values = []
    for name, (lo_bound, hi_bound), default in zip(cls.channel_names, bounds_of(space), default_ranges(space)):
        lo, hi = ranges.get(name, default)
        for value in (lo, hi):
            if (lo_bound is not None and value < lo_bound) or (hi_bound is not None and value > hi_bound):
                raise ChannelRangeError(name, value, lo_bound, hi_bound)

        if name == 'hue':
            values.append(_random_hue(generator, lo, hi))
            continue
        if lo > hi:
            raise ChannelRangeError(f"minimum {name}", lo, lo_bound, hi)
        if space == ColorSpace.RGB:
            values.append(int(generator.integers(int(lo), int(hi), endpoint=True)))
        else:
            values.append(float(clamp(round_precise(uniform(generator, lo, hi), 1), lo, hi)))

    return cls(*values)


def _random(cls, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None, **ranges: Range):
    return random_color(cls.space, rng=rng, seed=seed, **ranges)


ColorBase.random = classmethod(_random)
