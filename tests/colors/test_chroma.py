import pytest

from polychroma import OklabColor, RgbColor
from polychroma.exceptions import ChannelRangeError


def test_chroma_round_trip():
    for i in range(101):
        lightness = 0.0 if i == 0 else 1.028 * (i / 100) ** (1 / 6.9) - 0.028
        color = OklabColor(lightness, 0, 0)
        chroma = color.chroma
        assert round(chroma, 6) == round(i * 0.01, 6)
        assert color.with_chroma(chroma).lightness == lightness


def test_with_chroma_keeps_a_and_b():
    color = OklabColor(0.5, 0.1, -0.05)
    adjusted = color.with_chroma(0.3)
    assert adjusted.chromaticity_a == 0.1
    assert adjusted.chromaticity_b == -0.05
    assert adjusted.chroma == pytest.approx(0.3)


def test_chroma_of_other_spaces():
    assert RgbColor(0, 0, 0).chroma == 0.0
    assert RgbColor(255, 255, 255).chroma == 1.0
    darker = RgbColor(200, 100, 50).with_chroma(0.01)
    assert isinstance(darker, RgbColor)
    assert darker.to_oklab().lightness < RgbColor(200, 100, 50).to_oklab().lightness


def test_with_chroma_range():
    with pytest.raises(ChannelRangeError):
        OklabColor(0.5, 0, 0).with_chroma(1.5)
    with pytest.raises(ChannelRangeError):
        OklabColor(0.5, 0, 0).with_chroma(-0.1)
