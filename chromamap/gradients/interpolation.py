from __future__ import annotations

import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..colors.packed import alpha
from ..conversions.wrapper import color_to_hsv, hsv_to_color, np_hsv_to_color
from ..types.color_types import ArrayOrScalar, Color
from ..types.format_type import HUE_360


def shortest_hue_pair(h1: float, h2: float) -> Tuple[float, float]:
    """
    Shift one of two hues by a full turn so that a straight lerp between
    them follows the shorter arc of the color wheel.

    The shifted hue may end up in [360, 720); converting back to a color
    wraps it.
    """
    if h1 - h2 > HUE_360 / 2:
        h2 += HUE_360
    elif h2 - h1 > HUE_360 / 2:
        h1 += HUE_360
    return h1, h2


def interpolate_color(color1: Color, color2: Color, ratio: float) -> Color:
    """
    Interpolate between two packed colors using their HSV values.

    Alpha is interpolated linearly and truncated to an int. Hue, saturation
    and value are interpolated independently along the shortest hue arc.

    Args:
        color1: First color
        color2: Second color
        ratio: Fraction of the distance from color1 to color2. Values slightly
            outside [0, 1] extrapolate.

    Returns:
        The interpolated packed color
    """
    a1 = alpha(color1)
    a = (alpha(color2) - a1) * ratio + a1

    h1, s1, v1 = color_to_hsv(color1)
    h2, s2, v2 = color_to_hsv(color2)
    h1, h2 = shortest_hue_pair(h1, h2)

    result = tuple(
        (end - start) * ratio + start
        for start, end in ((h1, h2), (s1, s2), (v1, v2))
    )
    return hsv_to_color(result, a)


def np_interpolate_color(color1: Color, color2: Color, ratios: ArrayOrScalar) -> NDArray:
    """
    Vectorized ``interpolate_color`` over many ratios for one color pair.

    Returns:
        uint32 array of packed colors with the shape of ``ratios``
    """
    ratios = np.asarray(ratios, dtype=np.float64)
    a1 = alpha(color1)
    alphas = (alpha(color2) - a1) * ratios + a1

    h1, s1, v1 = color_to_hsv(color1)
    h2, s2, v2 = color_to_hsv(color2)
    h1, h2 = shortest_hue_pair(h1, h2)

    hsv = np.stack(
        [(end - start) * ratios + start for start, end in ((h1, h2), (s1, s2), (v1, v2))],
        axis=-1,
    )
    return np_hsv_to_color(hsv, alphas)
