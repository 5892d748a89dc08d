from .gradient import DEFAULT_COLOR_MAP_SIZE, Gradient, apply_opacity
from .intervals import ColorInterval, build_color_intervals
from .interpolation import interpolate_color, np_interpolate_color, shortest_hue_pair
from .lookup import color_for_intensity, np_colors_for_intensities

__all__ = [
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
]
