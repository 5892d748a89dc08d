"""
chromamap - heatmap color maps from sparse gradients
====================================================

Build a dense color lookup table from a handful of (color, intensity)
control points. Colors are packed ``0xAARRGGBB`` ints; neighbouring control
points are blended in HSV space along the shortest hue arc.

Quick Start
-----------
>>> from chromamap import Gradient, rgb, color_for_intensity
>>> gradient = Gradient([rgb(102, 225, 0), rgb(255, 0, 0)], [0.2, 1.0])
>>> color_map = gradient.generate_color_map(opacity=0.7)
>>> hot = color_for_intensity(color_map, 0.95)

Modules
-------
- colors: packing/unpacking ARGB channels, named colors, color parsing
- conversions: RGB <-> HSV conversions (scalar and numpy)
- gradients: Gradient, interval builder, HSV interpolation, lookups
"""

from .colors import (
    COLOR_MASK,
    argb, rgb,
    alpha, red, green, blue,
    unpack_argb, with_alpha, as_color,
    np_pack_argb, np_unpack_argb,
    BLACK, DKGRAY, GRAY, LTGRAY, WHITE,
    RED, GREEN, BLUE, YELLOW, CYAN, MAGENTA,
    TRANSPARENT,
    parse_color,
)
from .conversions import (
    unit_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
    color_to_hsv,
    hsv_to_color,
    np_color_to_hsv,
    np_hsv_to_color,
)
from .gradients import (
    DEFAULT_COLOR_MAP_SIZE,
    Gradient,
    apply_opacity,
    ColorInterval,
    build_color_intervals,
    interpolate_color,
    np_interpolate_color,
    shortest_hue_pair,
    color_for_intensity,
    np_colors_for_intensities,
)
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # Color model
    "COLOR_MASK",
    "argb", "rgb",
    "alpha", "red", "green", "blue",
    "unpack_argb", "with_alpha", "as_color",
    "np_pack_argb", "np_unpack_argb",
    "BLACK", "DKGRAY", "GRAY", "LTGRAY", "WHITE",
    "RED", "GREEN", "BLUE", "YELLOW", "CYAN", "MAGENTA",
    "TRANSPARENT",
    "parse_color",

    # Conversions
    "unit_rgb_to_hsv", "np_unit_rgb_to_hsv",
    "hsv_to_unit_rgb", "np_hsv_to_unit_rgb",
    "color_to_hsv", "hsv_to_color",
    "np_color_to_hsv", "np_hsv_to_color",

    # Gradients
    "DEFAULT_COLOR_MAP_SIZE",
    "Gradient",
    "apply_opacity",
    "ColorInterval",
    "build_color_intervals",
    "interpolate_color",
    "np_interpolate_color",
    "shortest_hue_pair",
    "color_for_intensity",
    "np_colors_for_intensities",

    # Types
    "FormatType",

    # Version
    "__version__",
]
