import math

import pytest

from polychroma import CmykColor, HsbColor, HsiColor, HslColor, HspColor, LabColor, OklabColor, RgbColor, XyzColor
from ..samples import reference_rgb

orange = RgbColor(255, 144, 0)


def test_rotate_hue_orange():
    assert orange.rotate_hue(30) == RgbColor(239, 255, 0)
    assert orange.rotate_hue(-30) == RgbColor(255, 17, 0)
    assert orange.inverted == RgbColor(0, 111, 255)


def test_rotate_hue_keeps_space_and_alpha():
    color = CmykColor(0, 40, 100, 0, alpha=50)
    rotated = color.rotate_hue(90)
    assert isinstance(rotated, CmykColor)
    assert rotated.alpha == 50

    hsl = HslColor(350, 50, 50).rotate_hue(20)
    assert hsl.hue == pytest.approx(10)
    assert hsl.saturation == 50


def test_rotate_hue_rad():
    assert HslColor(0, 50, 50).rotate_hue_rad(math.pi) == HslColor(180, 50, 50)


def test_rotation_closure():
    # 30 rotations of 12 degrees come back to the start
    for rgb in reference_rgb:
        start = RgbColor(*rgb)
        for space in ("rgb", "hsl", "hsb", "hsi", "hsp", "cmyk", "lab", "oklab", "xyz"):
            color = start.convert(space)
            rotated = color
            for _ in range(30):
                rotated = rotated.rotate_hue(12)
            assert rotated.equals(color), f"{color} -> {rotated}"


def test_with_hue():
    assert HsbColor(10, 100, 100).with_hue(120) == HsbColor(120, 100, 100)
    assert RgbColor(255, 0, 0).with_hue(240) == RgbColor(0, 0, 255)


def test_warmer_and_cooler():
    assert HslColor(0, 50, 50).warmer(50).hue == pytest.approx(45)
    assert HslColor(180, 50, 50).warmer(100, relative=False).hue == pytest.approx(90)
    assert HslColor(300, 50, 50).warmer(50).hue == pytest.approx(15)
    assert HslColor(0, 50, 50).cooler(50).hue == pytest.approx(315)
    assert HslColor(260, 50, 50).cooler(50, relative=False).hue == pytest.approx(270)

    # non-hue spaces go through HSL
    warmer_red = RgbColor(255, 0, 0).warmer(100)
    assert warmer_red == RgbColor(128, 255, 0)
    assert isinstance(warmer_red, RgbColor)


def test_opposite():
    assert HslColor(30, 50, 50).opposite == HslColor(210, 50, 50)
    assert RgbColor(255, 0, 0).opposite == RgbColor(0, 255, 255)


def test_hue_and_saturation_of_any_space():
    assert RgbColor(0, 0, 255).hue == pytest.approx(240)
    assert CmykColor(100, 0, 0, 0).hue == pytest.approx(180)
    assert RgbColor(255, 0, 0).saturation == pytest.approx(100)
    assert RgbColor(128, 128, 128).saturation == 0
    assert HslColor(10, 20, 30).hue == 10


def test_distance_to():
    assert HslColor(10, 50, 50).distance_to(HslColor(350, 50, 50)) == pytest.approx(20)
    assert RgbColor(255, 0, 0).distance_to(RgbColor(0, 255, 255)) == pytest.approx(180)


def test_inverted():
    assert CmykColor(10, 20, 30, 40).inverted == CmykColor(90, 80, 70, 60)
    assert HslColor(200, 30, 40).inverted == HslColor(20, 70, 60)
    assert HsiColor(90, 10, 0).inverted == HsiColor(270, 90, 100)
    assert HspColor(300, 0, 25).inverted == HspColor(120, 100, 75)
    assert LabColor(30, 20, -10).inverted == LabColor(70, -21, 9)
    assert LabColor(0, -128, 127).inverted == LabColor(100, 127, -128)
    assert OklabColor(0.3, 0.1, -0.2).inverted == OklabColor(0.7, -0.1, 0.2)
    assert XyzColor(120, 50, 0).inverted == XyzColor(0, 50, 100)
    assert RgbColor(0, 0, 0, alpha=3).inverted == RgbColor(255, 255, 255, alpha=3)


def test_equals_compares_rgb():
    assert RgbColor(255, 0, 0).equals(HslColor(0, 100, 50))
    assert HsbColor(0, 100, 100).equals(CmykColor(0, 100, 100, 0))
    assert not RgbColor(255, 0, 0).equals(RgbColor(255, 0, 0, alpha=0))
