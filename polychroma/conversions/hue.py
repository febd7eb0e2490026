from ..types.color_types import HUE_360


def get_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees [0, 360) of a unit RGB color, 0 for achromatic colors.

    Shared by HSL, HSP and HSB. HSI derives its hue separately.
    """
    maximum = max(r, g, b)
    minimum = min(r, g, b)
    delta = maximum - minimum
    if delta == 0:
        return 0.0

    if maximum == r:
        hue = (g - b) / delta + (6 if g < b else 0)
    elif maximum == g:
        hue = (b - r) / delta + 2
    else:
        hue = (r - g) / delta + 4

    return hue / 6 * HUE_360
