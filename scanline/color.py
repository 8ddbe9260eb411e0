"""RGBA colors with 8-bit channels."""

from __future__ import annotations

import string
from typing import NamedTuple


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def checked(cls, r, g, b, a=255) -> Color:
        """Build a color, rejecting channels outside 0..255."""
        channels = (int(r), int(g), int(b), int(a))
        for value in channels:
            if not 0 <= value <= 255:
                raise ValueError(f"color channel out of range 0..255: {value}")
        return cls(*channels)


TRANSPARENT = Color(0, 0, 0, 0)
WHITE = Color(255, 255, 255, 255)


def parse_hex_color(text: str) -> Color:
    """Parse ``#rrggbb`` (opaque) or ``#rrggbbaa``."""
    if not text.startswith("#"):
        raise ValueError(f"hex color must start with '#': {text!r}")
    digits = text[1:]
    if len(digits) not in (6, 8):
        raise ValueError(f"hex color must have 6 or 8 digits: {text!r}")
    if any(c not in string.hexdigits for c in digits):
        raise ValueError(f"invalid hex color: {text!r}")
    return Color(*(int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)))
