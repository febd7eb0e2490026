"""
Exceptions raised throughout polychroma.

Every error here is a caller contract violation, raised synchronously at the
point of the invalid call. The value errors subclass ``ValueError`` so code
that already guards with ``except ValueError`` keeps working.
"""


class ColorModelError(Exception):
    """
    Base exception for all polychroma exceptions.
    """


class ChannelRangeError(ColorModelError, ValueError):
    """
    Raised when a channel, alpha, step, hue or stop lies outside its range.
    """

    def __init__(self, name, value, minimum=None, maximum=None):
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        lo = "-inf" if minimum is None else minimum
        hi = "inf" if maximum is None else maximum
        super().__init__(f"{name} must be within [{lo}, {hi}], got {value!r}")


class ChannelCountError(ColorModelError, ValueError):
    """
    Raised when a channel list has the wrong number of values.
    """

    def __init__(self, space, expected, got):
        self.space = space
        self.expected = expected
        self.got = got
        super().__init__(f"{space} expects {expected} values, got {got}")


class HexFormatError(ColorModelError, ValueError):
    """
    Raised when a hex string is not in #RGB or #RRGGBB format.
    """

    def __init__(self, hex_str):
        self.hex_str = hex_str
        super().__init__(f"input {hex_str!r} is not in #RGB or #RRGGBB format")


class UndefinedConversionError(ColorModelError):
    """
    Raised when a conversion is requested to or from an unknown color space.
    """

    def __init__(self, space):
        self.space = space
        super().__init__(f"Conversion to/from {space!r} is not defined.")
