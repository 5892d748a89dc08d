"""
chromamap color model
=====================

Colors are plain ``int`` values packed as ``0xAARRGGBB``. This subpackage
packs and unpacks channels (scalar and vectorized) and parses color strings.

>>> from chromamap.colors import argb, alpha, parse_color
>>> c = argb(128, 255, 0, 0)
>>> alpha(c)
128
>>> parse_color("#80ff0000") == c
True
"""

from .packed import (
    COLOR_MASK,
    argb,
    rgb,
    alpha,
    red,
    green,
    blue,
    unpack_argb,
    with_alpha,
    as_color,
    np_pack_argb,
    np_unpack_argb,
)
from .named import (
    BLACK, DKGRAY, GRAY, LTGRAY, WHITE,
    RED, GREEN, BLUE, YELLOW, CYAN, MAGENTA,
    TRANSPARENT,
    COLOR_NAMES,
    parse_color,
)

__all__ = [
    "COLOR_MASK",
    "argb", "rgb",
    "alpha", "red", "green", "blue",
    "unpack_argb", "with_alpha", "as_color",
    "np_pack_argb", "np_unpack_argb",
    "BLACK", "DKGRAY", "GRAY", "LTGRAY", "WHITE",
    "RED", "GREEN", "BLUE", "YELLOW", "CYAN", "MAGENTA",
    "TRANSPARENT",
    "COLOR_NAMES",
    "parse_color",
]
