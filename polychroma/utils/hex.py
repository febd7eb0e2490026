import re
from typing import Sequence, Tuple

from ..exceptions import HexFormatError

_HEX_PATTERN = re.compile(r"^[0-9a-f]{3}([0-9a-f]{3})?$")


def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    """
    Parse `#RRGGBB` or `#RGB` (case-insensitive, `#` optional) into RGB ints.
    """
    digits = hex_str.strip().replace("#", "", 1).lower()
    if not _HEX_PATTERN.match(digits):
        raise HexFormatError(hex_str)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def rgb_to_hex(rgb: Sequence[int]) -> str:
    return "#" + "".join(f"{int(v):02x}" for v in rgb)
