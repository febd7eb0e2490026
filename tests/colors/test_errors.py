import pytest

from polychroma import (
    ChannelCountError,
    ChannelRangeError,
    ColorModelError,
    HexFormatError,
    HslColor,
    LabColor,
    OklabColor,
    RgbColor,
    UndefinedConversionError,
    XyzColor,
)


def test_channel_out_of_range():
    with pytest.raises(ChannelRangeError, match="red must be within"):
        RgbColor(256, 0, 0)
    with pytest.raises(ChannelRangeError):
        HslColor(361, 0, 0)
    with pytest.raises(ChannelRangeError):
        LabColor(50, 128, 0)
    with pytest.raises(ChannelRangeError):
        XyzColor(-1, 0, 0)
    with pytest.raises(ChannelRangeError):
        OklabColor(float("nan"), 0, 0)
    with pytest.raises(ChannelRangeError):
        RgbColor("1", 0, 0)


def test_bool_channels_rejected():
    with pytest.raises(ChannelRangeError, match="red"):
        RgbColor(True, 0, 0)
    with pytest.raises(ChannelRangeError):
        HslColor(0, False, 50)
    with pytest.raises(ChannelRangeError, match="alpha"):
        RgbColor(0, 0, 0, alpha=True)


def test_unbounded_channels_accept_large_values():
    assert XyzColor(150, 0, 0).x == 150
    assert OklabColor(1.2, -0.5, 0.5).lightness == 1.2


def test_range_errors_are_value_errors():
    with pytest.raises(ValueError):
        RgbColor(0, 0, -1)
    assert issubclass(ChannelRangeError, ColorModelError)


def test_alpha_out_of_range():
    with pytest.raises(ChannelRangeError, match="alpha"):
        RgbColor(0, 0, 0, alpha=300)
    with pytest.raises(ChannelRangeError):
        RgbColor(0, 0, 0).with_alpha(-1)
    with pytest.raises(ChannelRangeError):
        RgbColor(0, 0, 0).with_opacity(1.5)


def test_wrong_channel_count():
    with pytest.raises(ChannelCountError, match="rgb expects 3 values, got 2"):
        RgbColor(1, 2)
    with pytest.raises(ChannelCountError):
        HslColor.from_list([1, 2, 3, 4, 5])


def test_bad_hex():
    for bad in ["#12345", "#ggg", "", "#1234567", "12 34 56"]:
        with pytest.raises(HexFormatError):
            RgbColor.from_hex(bad)


def test_unknown_space():
    with pytest.raises(UndefinedConversionError):
        RgbColor(0, 0, 0).convert("yuv")


def test_hue_arguments():
    with pytest.raises(ChannelRangeError):
        HslColor(10, 10, 10).with_hue(400)
    with pytest.raises(ChannelRangeError):
        HslColor(10, 10, 10).warmer(0)
    with pytest.raises(ChannelRangeError):
        HslColor(10, 10, 10).cooler(101)
    # absolute amounts are not capped at 100
    assert HslColor(10, 10, 10).warmer(120, relative=False).hue == 90


def test_interpolation_arguments():
    red, blue = RgbColor(255, 0, 0), RgbColor(0, 0, 255)
    with pytest.raises(ChannelRangeError):
        red.interpolate(blue, 1.5)
    with pytest.raises(ChannelRangeError):
        red.lerp_to(blue, 0)
