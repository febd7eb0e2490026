from polychroma import LabColor, RgbColor

# black, 50% gray, white, primaries and secondaries, one color per 60 degree sextant
reference_rgb = [
    (0, 0, 0),
    (144, 144, 144),
    (255, 255, 255),
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
    (255, 255, 0),
    (0, 255, 255),
    (255, 0, 255),
    (240, 111, 12),
    (102, 204, 51),
    (51, 204, 153),
    (12, 102, 153),
    (120, 42, 212),
    (209, 16, 110),
    (0, 49, 66),
]

# LAB colors outside the sRGB gamut; they enter the tables through their
# clamped RGB projection.
out_of_gamut_lab = [
    (100, 127, 127),
    (100, -128, -128),
    (60, 127, -128),
    (0, -128, 127),
]


def reference_colors():
    colors = [RgbColor(*rgb) for rgb in reference_rgb]
    colors += [LabColor(*lab).to_rgb() for lab in out_of_gamut_lab]
    return colors


# unit RGB -> (h, s, l) with hue in degrees
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (0.0, 1.0, 1.0): (180.0, 1.0, 0.5),
    (0.4, 0.8, 0.2): (100.0, 0.6, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
}

# unit RGB -> (h, s, v)
samples_rgb_hsb = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.4, 0.8, 0.2): (100.0, 0.75, 0.8),
    (0.0, 0.0, 0.5): (240.0, 1.0, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# unit RGB -> (h, s, i)
samples_rgb_hsi = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1 / 3),
    (1.0, 1.0, 0.0): (60.0, 1.0, 2 / 3),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1 / 3),
    (1.0, 0.5, 0.5): (0.0, 0.25, 2 / 3),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
}

# RGB (0-255) -> CMYK (0-100)
samples_rgb_cmyk = {
    (0, 255, 255): (100.0, 0.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0, 100.0),
    (255, 255, 255): (0.0, 0.0, 0.0, 0.0),
    (240, 111, 12): (0.0, 53.75, 95.0, 100 * 15 / 255),
}
