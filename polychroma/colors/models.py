from typing import ClassVar, List, Tuple

from ..types.color_types import ColorSpace
from ..utils import round_half_up
from .color_base import ColorBase, build_registry, channel


class RgbColor(ColorBase):
    """
    sRGB color, channels 0-255.

    Channels are stored as floats so conversion chains do not compound
    rounding error; the channel properties return display integers.
    """
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.RGB
    channel_names: ClassVar[Tuple[str, ...]] = ('red', 'green', 'blue')

    @property
    def red(self) -> int:
        return round_half_up(self._values[0])

    @property
    def green(self) -> int:
        return round_half_up(self._values[1])

    @property
    def blue(self) -> int:
        return round_half_up(self._values[2])

    def to_list(self) -> List[int]:
        return [round_half_up(v) for v in self._values]

    def _rounded(self):
        return tuple(self.to_list())


class CmykColor(ColorBase):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.CMYK
    channel_names: ClassVar[Tuple[str, ...]] = ('cyan', 'magenta', 'yellow', 'black')

    cyan = channel(0)
    magenta = channel(1)
    yellow = channel(2)
    black = channel(3)


class HsiColor(ColorBase):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSI
    channel_names: ClassVar[Tuple[str, ...]] = ('hue', 'saturation', 'intensity')

    hue = channel(0, "Hue in degrees [0, 360].")
    saturation = channel(1)
    intensity = channel(2)


class HslColor(ColorBase):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSL
    channel_names: ClassVar[Tuple[str, ...]] = ('hue', 'saturation', 'lightness')

    hue = channel(0, "Hue in degrees [0, 360].")
    saturation = channel(1)
    lightness = channel(2)


class HspColor(ColorBase):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSP
    channel_names: ClassVar[Tuple[str, ...]] = ('hue', 'saturation', 'perceived_brightness')

    hue = channel(0, "Hue in degrees [0, 360].")
    saturation = channel(1)
    perceived_brightness = channel(2)


class HsbColor(ColorBase):
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.HSB
    channel_names: ClassVar[Tuple[str, ...]] = ('hue', 'saturation', 'brightness')

    hue = channel(0, "Hue in degrees [0, 360].")
    saturation = channel(1)
    brightness = channel(2)
    value = brightness


class LabColor(ColorBase):
    """CIELAB: lightness 0-100, a and b in [-128, 127]."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.LAB
    channel_names: ClassVar[Tuple[str, ...]] = ('lightness', 'chromaticity_a', 'chromaticity_b')

    lightness = channel(0)
    chromaticity_a = channel(1)
    chromaticity_b = channel(2)


class OklabColor(ColorBase):
    """Oklab: lightness nominally 0-1; channels only need to be finite."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.OKLAB
    channel_names: ClassVar[Tuple[str, ...]] = ('lightness', 'chromaticity_a', 'chromaticity_b')

    lightness = channel(0)
    chromaticity_a = channel(1)
    chromaticity_b = channel(2)


class XyzColor(ColorBase):
    """CIEXYZ: nominally 0-100, upwardly unbounded for out-of-gamut colors."""
    __slots__ = ()
    space: ClassVar[ColorSpace] = ColorSpace.XYZ
    channel_names: ClassVar[Tuple[str, ...]] = ('x', 'y', 'z')

    x = channel(0)
    y = channel(1)
    z = channel(2)


HsvColor = HsbColor


color_registry = build_registry(
    RgbColor,
    CmykColor,
    HsiColor,
    HslColor,
    HspColor,
    HsbColor,
    LabColor,
    OklabColor,
    XyzColor,
)
