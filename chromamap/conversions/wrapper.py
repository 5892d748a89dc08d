"""Conversions between packed ARGB colors and HSV."""
import math
import numpy as np
from typing import Sequence

from ..colors.packed import argb, np_pack_argb, np_unpack_argb, unpack_argb
from ..types.color_types import ArrayOrScalar, Color, HSVTuple, Scalar
from ..types.format_type import CHANNEL_MAX, FormatType
from .to_hsv import np_unit_rgb_to_hsv, unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb


def _to_byte(x: float) -> int:
    return math.floor(x * CHANNEL_MAX + 0.5)


def color_to_hsv(color: Color) -> HSVTuple:
    """HSV of the RGB channels of a packed color. Alpha is ignored."""
    _, r, g, b = unpack_argb(color, FormatType.FLOAT)
    return unit_rgb_to_hsv(r, g, b)


def hsv_to_color(hsv: Sequence[float], alpha: Scalar = CHANNEL_MAX) -> Color:
    """
    Build a packed color from HSV and an alpha channel.

    Args:
        hsv: (hue in degrees, saturation, value); hue is wrapped modulo 360
        alpha: 0-255, truncated and clamped

    Returns:
        Packed ARGB color
    """
    h, s, v = hsv
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return argb(alpha, _to_byte(r), _to_byte(g), _to_byte(b))


def np_color_to_hsv(colors: ArrayOrScalar) -> np.ndarray:
    """Vectorized ``color_to_hsv``: returns shape (..., 3)."""
    channels = np_unpack_argb(colors).astype(np.float64) / CHANNEL_MAX
    return np_unit_rgb_to_hsv(channels[..., 1], channels[..., 2], channels[..., 3])


def np_hsv_to_color(hsv: np.ndarray, alpha: ArrayOrScalar = CHANNEL_MAX) -> np.ndarray:
    """Vectorized ``hsv_to_color``: ``hsv`` has shape (..., 3), result is uint32."""
    hsv = np.asarray(hsv, dtype=np.float64)
    rgb = np_hsv_to_unit_rgb(hsv[..., 0], hsv[..., 1], hsv[..., 2])
    rgb = np.floor(rgb * CHANNEL_MAX + 0.5)
    return np_pack_argb(alpha, rgb[..., 0], rgb[..., 1], rgb[..., 2])
