"""
Packed ARGB colors.

A color is a single ``int`` laid out as ``0xAARRGGBB``. Signed 32-bit values
(as produced by Java/Android style APIs) are accepted and masked to the
unsigned range.
"""
from __future__ import annotations
from numbers import Integral
from typing import cast

import numpy as np
from numpy import ndarray
from boundednumbers.functions import clamp
from boundednumbers.np_functions import clamp as np_clamp

from ..types.color_types import ARGBTuple, ArrayOrScalar, Color, ColorLike, Scalar
from ..types.format_type import CHANNEL_MAX, FormatType, max_non_hue

COLOR_MASK = 0xFFFFFFFF
_SIGNED_MIN = -(1 << 31)
_UNSIGNED_LIMIT = 1 << 32


def _channel(value: Scalar) -> int:
    return cast(int, clamp(int(value), 0, CHANNEL_MAX))


def argb(a: Scalar, r: Scalar, g: Scalar, b: Scalar) -> Color:
    """Pack four 0-255 channels into a color. Channels are truncated and clamped."""
    return (_channel(a) << 24) | (_channel(r) << 16) | (_channel(g) << 8) | _channel(b)


def rgb(r: Scalar, g: Scalar, b: Scalar) -> Color:
    """Pack an opaque color."""
    return argb(CHANNEL_MAX, r, g, b)


def alpha(color: Color) -> int:
    return (color >> 24) & 0xFF


def red(color: Color) -> int:
    return (color >> 16) & 0xFF


def green(color: Color) -> int:
    return (color >> 8) & 0xFF


def blue(color: Color) -> int:
    return color & 0xFF


def unpack_argb(color: Color, format_type: FormatType = FormatType.INT) -> ARGBTuple:
    """
    Split a color into its ``(a, r, g, b)`` channels.

    Args:
        color: Packed color
        format_type: INT gives 0-255 ints, FLOAT unit floats, PERCENTAGE 0-100 floats

    Returns:
        Tuple of four channels in the requested format
    """
    channels = (alpha(color), red(color), green(color), blue(color))
    format_type = FormatType(format_type)
    if format_type == FormatType.INT:
        return channels
    maxval = max_non_hue[format_type]
    return cast(ARGBTuple, tuple(c / CHANNEL_MAX * maxval for c in channels))


def with_alpha(color: Color, a: Scalar) -> Color:
    """Return ``color`` with its alpha channel replaced."""
    return (_channel(a) << 24) | (color & 0x00FFFFFF)


def as_color(value: ColorLike) -> Color:
    """
    Normalize a color given as an int or a string into a packed color.

    Raises:
        TypeError: for anything that is neither an integer nor a string
        ValueError: for integers outside the signed/unsigned 32-bit range
    """
    if isinstance(value, str):
        from .named import parse_color
        return parse_color(value)
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"Expected a packed color int or a color string, got {type(value).__name__}")
    value = int(value)
    if not _SIGNED_MIN <= value < _UNSIGNED_LIMIT:
        raise ValueError(f"Color value {value:#x} does not fit in 32 bits")
    return value & COLOR_MASK


def np_pack_argb(a: ArrayOrScalar, r: ArrayOrScalar, g: ArrayOrScalar, b: ArrayOrScalar) -> ndarray:
    """Vectorized: pack channel arrays (truncated, clamped to 0-255) into uint32 colors."""
    a, r, g, b = np.broadcast_arrays(
        *(np_clamp(np.trunc(np.asarray(c, dtype=np.float64)), 0, CHANNEL_MAX) for c in (a, r, g, b))
    )
    a, r, g, b = (c.astype(np.uint32) for c in (a, r, g, b))
    return (a << 24) | (r << 16) | (g << 8) | b


def np_unpack_argb(colors: ArrayOrScalar) -> ndarray:
    """
    Vectorized: split packed colors into channels.

    Args:
        colors: array-like of packed colors

    Returns:
        uint8 array of shape (..., 4) ordered (a, r, g, b)
    """
    arr = np.asarray(colors, dtype=np.int64) & COLOR_MASK
    arr = arr.astype(np.uint32)
    shifts = np.array([24, 16, 8, 0], dtype=np.uint32)
    return ((arr[..., None] >> shifts) & 0xFF).astype(np.uint8)
