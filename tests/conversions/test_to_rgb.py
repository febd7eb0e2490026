import pytest

from polychroma.conversions import (
    cmyk_to_unit_rgb,
    hsb_to_unit_rgb,
    hsi_to_unit_rgb,
    hsl_to_unit_rgb,
    hsp_to_unit_rgb,
    lab_to_unit_rgb,
    lab_to_xyz,
    oklab_to_unit_rgb,
    unit_rgb_to_hsp,
    xyz_to_lab,
    xyz_to_unit_rgb,
)
from ..samples import samples_rgb_hsb, samples_rgb_hsi, samples_rgb_hsl

tolerance = 1e-9


def test_hsl_to_rgb():
    for expected, (h, s, l) in samples_rgb_hsl.items():
        assert hsl_to_unit_rgb(h, s, l) == pytest.approx(expected, abs=tolerance)


def test_hsb_to_rgb():
    for expected, (h, s, v) in samples_rgb_hsb.items():
        assert hsb_to_unit_rgb(h, s, v) == pytest.approx(expected, abs=tolerance)


def test_hsi_to_rgb():
    for expected, (h, s, i) in samples_rgb_hsi.items():
        assert hsi_to_unit_rgb(h, s, i) == pytest.approx(expected, abs=tolerance)


def test_hue_360_matches_hue_0():
    for fn in (hsl_to_unit_rgb, hsb_to_unit_rgb, hsi_to_unit_rgb, hsp_to_unit_rgb):
        assert fn(360.0, 0.5, 0.5) == pytest.approx(fn(0.0, 0.5, 0.5), abs=tolerance)


def test_hsi_to_rgb_clamps_overshoot():
    # fully saturated, full intensity asks for channels above 1
    r, g, b = hsi_to_unit_rgb(0.0, 1.0, 1.0)
    assert r == 1.0
    assert 0.0 <= g <= 1.0 and 0.0 <= b <= 1.0


def test_hsp_to_rgb():
    for rgb in [(1.0, 0.0, 0.0), (0.2, 0.8, 0.4), (0.9, 0.3, 0.6), (0.1, 0.2, 0.7)]:
        h, s, p = unit_rgb_to_hsp(*rgb)
        assert hsp_to_unit_rgb(h, s, p) == pytest.approx(rgb, abs=1e-9)


def test_cmyk_to_rgb():
    assert cmyk_to_unit_rgb(1.0, 0.0, 0.0, 0.0) == pytest.approx((0.0, 1.0, 1.0))
    assert cmyk_to_unit_rgb(0.0, 0.0, 0.0, 1.0) == pytest.approx((0.0, 0.0, 0.0))
    assert cmyk_to_unit_rgb(0.0, 0.0, 0.0, 0.0) == pytest.approx((1.0, 1.0, 1.0))


def test_xyz_lab_direct_path():
    assert xyz_to_lab(1.0, 1.0, 1.0) == pytest.approx((100.0, 0.0, 0.0))
    assert lab_to_xyz(100.0, 0.0, 0.0) == pytest.approx((1.0, 1.0, 1.0))
    assert xyz_to_unit_rgb(1.0, 1.0, 1.0) == pytest.approx((1.0, 1.0, 1.0), abs=1e-9)


def test_lab_to_xyz_floors_negative_intermediates():
    x, y, z = lab_to_xyz(0.0, -128.0, 127.0)
    assert x == 0.0 and z == 0.0
    assert y == 0.0


def test_lab_output_is_clamped():
    lightness, a, b = xyz_to_lab(2.0, 0.0, 0.0)
    assert lightness == pytest.approx(0.0, abs=1e-9)
    assert a == 127.0


def test_out_of_gamut_lab_clamps_rgb():
    for lab in [(100, 127, 127), (100, -128, -128), (60, 127, -128), (0, -128, 127)]:
        assert all(0.0 <= v <= 1.0 for v in lab_to_unit_rgb(*lab))


def test_oklab_to_rgb():
    assert oklab_to_unit_rgb(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    assert oklab_to_unit_rgb(1.0, 0.0, 0.0) == (1.0, 1.0, 1.0)
    assert oklab_to_unit_rgb(0.62796, 0.22486, 0.12585) == pytest.approx((1.0, 0.0, 0.0), abs=1e-3)
