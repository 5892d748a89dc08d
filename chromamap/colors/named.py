"""Named colors and color-string parsing."""
from __future__ import annotations
from string import hexdigits

from ..types.color_types import Color
from .packed import argb, rgb

BLACK = rgb(0, 0, 0)
DKGRAY = rgb(0x44, 0x44, 0x44)
GRAY = rgb(0x88, 0x88, 0x88)
LTGRAY = rgb(0xCC, 0xCC, 0xCC)
WHITE = rgb(255, 255, 255)
RED = rgb(255, 0, 0)
GREEN = rgb(0, 255, 0)
BLUE = rgb(0, 0, 255)
YELLOW = rgb(255, 255, 0)
CYAN = rgb(0, 255, 255)
MAGENTA = rgb(255, 0, 255)
TRANSPARENT = argb(0, 0, 0, 0)

COLOR_NAMES: dict[str, Color] = {
    "black": BLACK,
    "darkgray": DKGRAY,
    "gray": GRAY,
    "lightgray": LTGRAY,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
    "cyan": CYAN,
    "magenta": MAGENTA,
    "aqua": CYAN,
    "fuchsia": MAGENTA,
    "darkgrey": DKGRAY,
    "grey": GRAY,
    "lightgrey": LTGRAY,
    "lime": GREEN,
    "maroon": rgb(0x80, 0, 0),
    "navy": rgb(0, 0, 0x80),
    "olive": rgb(0x80, 0x80, 0),
    "purple": rgb(0x80, 0, 0x80),
    "silver": rgb(0xC0, 0xC0, 0xC0),
    "teal": rgb(0, 0x80, 0x80),
    "transparent": TRANSPARENT,
}


def parse_color(text: str) -> Color:
    """
    Parse ``#RRGGBB``, ``#AARRGGBB`` or a color name into a packed color.

    Names are case-insensitive. ``#RRGGBB`` is fully opaque.

    Raises:
        ValueError: if the string is not a recognized color
    """
    value = text.strip()
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) not in (6, 8) or not all(c in hexdigits for c in digits):
            raise ValueError(f"Unknown color: {text!r}")
        packed = int(digits, 16)
        if len(digits) == 6:
            packed |= 0xFF000000
        return packed
    try:
        return COLOR_NAMES[value.lower()]
    except KeyError:
        raise ValueError(f"Unknown color: {text!r}") from None
