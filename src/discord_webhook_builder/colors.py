"""Convert color representations to Discord color integers.

Discord represents the accent color of an embed as a single 24-bit
integer, packed as ``R << 16 | G << 8 | B``. Colors are accepted as a
hex string (``"ff8800"`` or ``"#ff8800"``), as an integer, or as an
`RGB` triple, and all of them are resolved to that integer.
"""

import string
from typing import Final, TypeAlias

import attrs

from discord_webhook_builder import exceptions

MIN_COLOR_VALUE: Final = 0
MAX_COLOR_VALUE: Final = 0xFFFFFF
MIN_CHANNEL_VALUE: Final = 0
MAX_CHANNEL_VALUE: Final = 255

_HEX_LENGTH: Final = 6
_HEX_DIGITS: Final = frozenset(string.hexdigits)


@attrs.define(frozen=True)
class RGB:
    """A color given as red, green, and blue channels."""

    r: int
    g: int
    b: int

    @property
    def value(self) -> int:
        """The packed color integer.

        This value is only meaningful if all channels are in range, use
        `resolve_color` to get a validated value.
        """
        return (self.r << 16) | (self.g << 8) | self.b

    @classmethod
    def from_int(cls, value: int) -> "RGB":
        """Unpack a color integer into its channels."""
        value = _resolve_int(value)
        return cls(r=(value >> 16) & 0xFF, g=(value >> 8) & 0xFF, b=value & 0xFF)


Color: TypeAlias = str | int | RGB


def resolve_color(color: Color) -> int:
    """Resolve a color to a Discord color integer.

    :param color: A hex string, an integer, or an `RGB` instance
    :return: An integer in [0, 16777215]
    :raises exceptions.InvalidColorError: If the color is malformed or
      out of range
    """
    # bool is an int subclass, but True is not a color
    if isinstance(color, bool):
        raise exceptions.UnsupportedColorTypeError(value=color)
    if isinstance(color, str):
        return _resolve_hex(color)
    if isinstance(color, int):
        return _resolve_int(color)
    if isinstance(color, RGB):
        return _resolve_rgb(color)
    raise exceptions.UnsupportedColorTypeError(value=color)


def to_hex(color: Color) -> str:
    """Format a color as ``#rrggbb``."""
    return f"#{resolve_color(color):06x}"


def _resolve_hex(hex_color: str) -> int:
    digits = hex_color.removeprefix("#")
    if len(digits) != _HEX_LENGTH:
        raise exceptions.HexColorFormatError(value=hex_color)

    # int() would also accept signs, underscores, and whitespace
    if not _HEX_DIGITS.issuperset(digits):
        raise exceptions.HexColorParseError(value=hex_color)
    return int(digits, 16)


def _resolve_int(value: int) -> int:
    if not MIN_COLOR_VALUE <= value <= MAX_COLOR_VALUE:
        raise exceptions.ColorRangeError(
            value=value, minimum=MIN_COLOR_VALUE, maximum=MAX_COLOR_VALUE
        )
    return value


def _resolve_rgb(rgb: RGB) -> int:
    for channel in ("r", "g", "b"):
        channel_value = getattr(rgb, channel)
        if not MIN_CHANNEL_VALUE <= channel_value <= MAX_CHANNEL_VALUE:
            raise exceptions.RGBChannelRangeError(
                channel=channel,
                value=channel_value,
                minimum=MIN_CHANNEL_VALUE,
                maximum=MAX_CHANNEL_VALUE,
            )
    return rgb.value
