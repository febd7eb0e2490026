import pytest

from polychroma import (
    ChannelCountError,
    ChannelRangeError,
    HslColor,
    RgbColor,
    augment,
    convert_colors,
    get_color_at,
)

red = RgbColor(255, 0, 0)
green = RgbColor(0, 255, 0)
blue = RgbColor(0, 0, 255)


def test_augment_evenly():
    palette = augment([red, blue], 3)
    assert palette[0] == red
    assert palette[1].to_precise_list() == [127.5, 0.0, 127.5]
    assert palette[2] == blue


def test_augment_keeps_colors_on_stops():
    palette = augment([red, green, blue], 5)
    assert palette[0] is red
    assert palette[2] is green
    assert palette[4] is blue
    assert palette[1].to_precise_list() == [127.5, 127.5, 0.0]


def test_augment_sorts_stops():
    palette = augment([red, green, blue], 3, stops=[0, 1, 0.5])
    assert palette == [red, blue, green]


def test_augment_stops_inside_gradient():
    palette = augment([red, blue], 5, stops=[0.25, 0.75])
    assert palette[0] == red
    assert palette[1] == red
    assert palette[2].to_precise_list() == [127.5, 0.0, 127.5]
    assert palette[3] == blue
    assert palette[4] == blue


def test_augment_invert_reverses_traversal():
    palette = augment([red, green, blue], 3, invert=True)
    assert palette == [blue, green, red]

    skewed = augment([red, blue], 3, stops=[0, 0.25], invert=True)
    assert skewed[0] == blue
    assert skewed[-1] == red


def test_augment_color_space():
    palette = augment([red, blue], 3, color_space="hsl")
    assert all(isinstance(c, HslColor) for c in palette)
    assert palette[1] == HslColor(120, 100, 50)


def test_augment_segment_space():
    hsl_red = HslColor(0, 100, 50)
    assert isinstance(augment([hsl_red, blue], 3)[1], HslColor)
    assert isinstance(augment([hsl_red, blue], 3, from_end_space=True)[1], RgbColor)
    # a forced space wins over the segment space
    assert isinstance(augment([hsl_red, blue], 3, color_space="rgb", from_end_space=True)[1], RgbColor)


def test_augment_degenerate_lengths():
    assert augment([red, blue], 1) == [red]
    assert augment([green], 4) == [green] * 4
    assert augment([green], 2, color_space="hsl") == [HslColor(120, 100, 50)] * 2


def test_augment_errors():
    with pytest.raises(ValueError):
        augment([], 3)
    with pytest.raises(ChannelRangeError):
        augment([red, blue], 0)
    with pytest.raises(ChannelCountError):
        augment([red, blue], 3, stops=[0.0])
    with pytest.raises(ChannelRangeError):
        augment([red, blue], 3, stops=[0.0, 1.5])


def test_get_color_at():
    assert get_color_at([red, blue], 0) == red
    assert get_color_at([red, blue], 1) == blue
    assert get_color_at([red, blue], 0.5) == RgbColor(128, 0, 128)
    assert get_color_at([red, green, blue], 0.75).to_precise_list() == [0.0, 127.5, 127.5]
    with pytest.raises(ChannelRangeError):
        get_color_at([red, blue], 2)


def test_get_color_at_palette_positions_keep_their_space():
    hsl_green = HslColor(120, 100, 50)
    mixed = [red, hsl_green, blue]
    assert get_color_at(mixed, 0.5) is hsl_green
    assert get_color_at([red, hsl_green], 1.0) is hsl_green
    assert get_color_at(mixed, 1.0) is blue
    assert get_color_at(mixed, 0) is red
    # between positions the blend is in the starting color's space
    assert isinstance(get_color_at(mixed, 0.75), HslColor)
    assert isinstance(get_color_at(mixed, 0.25), RgbColor)


def test_convert_colors():
    converted = convert_colors([red, green], "hsl")
    assert converted == [HslColor(0, 100, 50), HslColor(120, 100, 50)]
