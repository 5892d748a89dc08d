"""
chromamap Color Space Conversions
=================================

RGB ↔ HSV conversions with scalar and vectorized (numpy) implementations,
plus helpers that go straight between packed ARGB colors and HSV.

Hue is in degrees [0, 360); saturation and value are unit floats.

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
    np_unit_rgb_to_hsv(r, g, b)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
        Hue is wrapped modulo 360, saturation/value clamped to [0, 1]
    np_hsv_to_unit_rgb(h, s, v)

Packed colors:
    color_to_hsv(color), np_color_to_hsv(colors)
    hsv_to_color(hsv, alpha=255), np_hsv_to_color(hsv, alpha=255)
"""

from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, np_hsv_to_unit_rgb
from .wrapper import color_to_hsv, hsv_to_color, np_color_to_hsv, np_hsv_to_color

__all__ = [
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'color_to_hsv',
    'hsv_to_color',
    'np_color_to_hsv',
    'np_hsv_to_color',
]
