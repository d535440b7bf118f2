"""
color.py
--------
RGBA color with CSS string and hex parsing.
"""
from __future__ import annotations

import re
from typing import Optional, Union

from vecmath.color_names import CSS_COLORS

_RGBA_PATTERN = re.compile(
    r"^rgba?\s*\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*(\d+\.?\d*?)\s*)?\)\s*$"
)
_HEX_PATTERN = re.compile(r"^[0-9a-fA-F]{6}$")


def _format_number(value: float) -> str:
    """Render integral floats without a trailing '.0' (``255.0`` -> ``'255'``)."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class Color:
    """RGBA color with every channel in ``[0, 1]``.

    Parameters
    ----------
    color : str | int | None
        CSS color string (``'red'``, ``'#FF0000'``, ``'#f00'``,
        ``'rgba(255, 0, 0, 0.5)'``, ``'transparent'``) or a hex integer
        such as ``0xFF0000``.  Defaults to opaque black.
    """

    def __init__(self, color: Optional[Union[str, int]] = None) -> None:
        self.r: float = 0.0
        self.g: float = 0.0
        self.b: float = 0.0
        self.a: float = 1.0
        if isinstance(color, str):
            self.set_style(color)
        elif isinstance(color, int):
            self.set_hex(color)

    def __repr__(self) -> str:
        return f"Color(r={self.r}, g={self.g}, b={self.b}, a={self.a})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.equal(other)

    def set(self, r: float, g: float, b: float, a: float) -> Color:
        self.r = r
        self.g = g
        self.b = b
        self.a = a
        return self

    def set_hex(self, hex_value: int) -> Color:
        """Set r, g and b from ``0xRRGGBB``. Alpha is left untouched."""
        self.r = (hex_value >> 16 & 255) / 255
        self.g = (hex_value >> 8 & 255) / 255
        self.b = (hex_value & 255) / 255
        return self

    def get_hex(self) -> int:
        return (int(self.r * 255) << 16) + (int(self.g * 255) << 8) + int(self.b * 255)

    def get_hex_string(self) -> str:
        """Upper-case ``RRGGBB`` without the leading '#'."""
        return "".join(f"{int(channel * 255):02X}" for channel in (self.r, self.g, self.b))

    def set_style(self, color: str) -> Color:
        """Parse a CSS color string.

        Strings that match none of the supported forms leave the color
        unchanged.
        """
        named = CSS_COLORS.get(color)
        if named is not None:
            self.r = named[0] / 255
            self.g = named[1] / 255
            self.b = named[2] / 255
            self.a = 1.0
        elif color == "transparent":
            self.set(0.0, 0.0, 0.0, 0.0)
        elif color.startswith("#"):
            value = color[1:]
            if len(value) == 3:
                value = "".join(ch * 2 for ch in value)
            if _HEX_PATTERN.match(value):
                self.set_hex(int(value, 16))
        else:
            match = _RGBA_PATTERN.match(color)
            if match:
                self.r = int(match.group(1)) / 255
                self.g = int(match.group(2)) / 255
                self.b = int(match.group(3)) / 255
                self.a = float(match.group(4)) if match.group(4) else 1.0
        return self

    def get_style(self) -> str:
        """CSS ``rgba(R, G, B, a)`` string with 0-255 color channels."""
        channels = ", ".join(_format_number(c * 255) for c in (self.r, self.g, self.b))
        return f"rgba({channels}, {_format_number(self.a)})"

    def to_array(self) -> list[float]:
        return [self.r, self.g, self.b, self.a]

    def equal(self, color: Color) -> bool:
        return (self.r == color.r and self.g == color.g
                and self.b == color.b and self.a == color.a)

    def copy(self, source: Color) -> Color:
        return self.set(source.r, source.g, source.b, source.a)

    def clone(self) -> Color:
        return Color().copy(self)
