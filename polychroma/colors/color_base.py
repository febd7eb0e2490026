from __future__ import annotations
from numbers import Real
from typing import Any, Callable, ClassVar, Dict, List, Optional, Sequence, Tuple

from ..exceptions import ChannelCountError, ChannelRangeError
from ..types.color_types import (
    ALPHA_MAX,
    Bound,
    ChannelValues,
    ColorSpace,
    ColorSpaceLike,
    HUE_SPACES,
    channel_maxima,
    channel_minima,
)
from ..conversions.predicates import is_black, is_monochromatic, is_white
from ..conversions.wrapper import check_channels, clamp_to_space
from ..utils import get_dimension, round_half_up, round_precise


class ColorBase:
    """
    Immutable color value: one float per channel plus an integer alpha.

    Subclasses only declare their space and channel names; ranges come from
    the tables in ``types.color_types``. Conversion and adjustment methods are
    attached in ``colors.color``.
    """
    __slots__ = ('_values', '_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    space:         ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]
    minima:        ClassVar[Tuple[Bound, ...]]
    maxima:        ClassVar[Tuple[Bound, ...]]

    # attached in colors.color
    convert: Callable[[ColorBase, ColorSpaceLike], ColorBase]
    to_rgb: Callable[[ColorBase], ColorBase]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'space' in cls.__dict__:
            cls.minima = channel_minima[cls.space]
            cls.maxima = channel_maxima[cls.space]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *values: float, alpha: float = ALPHA_MAX) -> None:
        check_channels(values, self.space, self.channel_names)

        self._values = tuple(float(v) for v in values)
        self._alpha = self._check_alpha(alpha)

        # freeze instance, no more writes
        super().__setattr__('_is_frozen', True)

    @staticmethod
    def _check_alpha(alpha: float) -> int:
        if isinstance(alpha, bool) or not isinstance(alpha, Real) or not 0 <= alpha <= ALPHA_MAX:
            raise ChannelRangeError("alpha", alpha, 0, ALPHA_MAX)
        return round_half_up(alpha)

    @classmethod
    def _from_trusted(cls, values: Sequence[float], alpha: int):
        """
        Build an instance from computed values without validation.

        Values are clamped to the space's range, so float overshoot from a
        conversion never surfaces as a range error.
        """
        obj = object.__new__(cls)
        object.__setattr__(obj, '_values', clamp_to_space(values, cls.space))
        object.__setattr__(obj, '_alpha', int(alpha))
        object.__setattr__(obj, '_is_frozen', True)
        return obj

    @classmethod
    def from_list(cls, values: Sequence[float]):
        """
        Build a color from its channel values, optionally followed by alpha.
        """
        expected = get_dimension(cls.channel_names)
        if len(values) == expected:
            return cls(*values)
        if len(values) == expected + 1:
            return cls(*values[:-1], alpha=values[-1])
        raise ChannelCountError(cls.space.value, expected, len(values))

    def copy_with(self, alpha: Optional[float] = None, **channels: float):
        """Return a copy with the named channels (and alpha) replaced."""
        unknown = set(channels) - set(self.channel_names)
        if unknown:
            raise TypeError(f"{self.__class__.__name__} has no channel(s) {sorted(unknown)}")
        values = [
            channels.get(name, value)
            for name, value in zip(self.channel_names, self._values)
        ]
        return self.__class__(*values, alpha=self._alpha if alpha is None else alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def values(self) -> ChannelValues:
        return self._values

    @property
    def alpha(self) -> int:
        return self._alpha

    @property
    def opacity(self) -> float:
        return self._alpha / ALPHA_MAX

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.space in HUE_SPACES

    @property
    def is_black(self) -> bool:
        return is_black(self.space, self._values)

    @property
    def is_white(self) -> bool:
        return is_white(self.space, self._values)

    @property
    def is_monochromatic(self) -> bool:
        return is_monochromatic(self.space, self._values)

    def to_list(self) -> List[float]:
        return list(self._values)

    def to_list_with_alpha(self) -> List[float]:
        return self.to_list() + [self._alpha]

    def to_precise_list(self) -> List[float]:
        """Stored channel values, never rounded."""
        return list(self._values)

    def to_precise_list_with_alpha(self) -> List[float]:
        return self.to_precise_list() + [self._alpha]

    def _rounded(self) -> Tuple[Any, ...]:
        return tuple(round_precise(v) for v in self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase) or type(other) is not type(self):
            return NotImplemented
        return self._rounded() == other._rounded() and self._alpha == other._alpha

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._rounded(), self._alpha))

    def __repr__(self) -> str:
        channels = ", ".join(f"{v!r}" for v in self.to_list())
        return f"{self.__class__.__name__}({channels}, alpha={self._alpha})"


def channel(index: int, doc: Optional[str] = None) -> property:
    """Read-only accessor for one channel of a ColorBase subclass."""
    def getter(self: ColorBase) -> float:
        return self._values[index]
    return property(getter, doc=doc)


def build_registry(*classes: type[ColorBase]) -> Dict[ColorSpace, type[ColorBase]]:
    return {
        cls.space: cls
        for cls in classes
    }
