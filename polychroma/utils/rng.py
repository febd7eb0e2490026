"""
Random generator handling for random color construction.

There is no module-level generator: callers pass their own
``numpy.random.Generator`` or a seed, so results are reproducible and
independent calls never share state.
"""

from __future__ import annotations

from typing import Optional

import numpy as np


def get_rng(rng: Optional[np.random.Generator] = None, seed: Optional[int] = None) -> np.random.Generator:
    """
    Resolve the generator a random helper should draw from.

    Args:
        rng: Caller-owned generator, used as is when given
        seed: Seed for a fresh generator when `rng` is None
    Returns:
        A numpy Generator
    """
    if rng is not None:
        if seed is not None:
            raise ValueError("pass either rng or seed, not both")
        return rng
    return np.random.default_rng(seed)


def uniform(rng: np.random.Generator, low: float, high: float) -> float:
    """Draw one float from [low, high]."""
    if low == high:
        return float(low)
    return float(rng.uniform(low, high))
