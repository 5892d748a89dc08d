"""Intensity lookups on a generated color map."""
import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Sequence, Union
from boundednumbers.functions import clamp01
from boundednumbers.np_functions import clamp01 as np_clamp01

from ..types.color_types import ArrayOrScalar, Color

ColorMapLike = Union[NDArray, Sequence[Color]]


def _check_not_empty(color_map: ColorMapLike) -> None:
    if len(color_map) == 0:
        raise ValueError("color_map is empty")


def color_for_intensity(color_map: ColorMapLike, intensity: float) -> Color:
    """Color at ``floor(intensity * (len - 1))``; intensity is clamped to [0, 1]."""
    _check_not_empty(color_map)
    if math.isnan(intensity):
        raise ValueError("intensity must not be NaN")
    index = int(clamp01(intensity) * (len(color_map) - 1))
    return int(color_map[index])


def np_colors_for_intensities(color_map: ColorMapLike, intensities: ArrayOrScalar) -> NDArray:
    """Vectorized ``color_for_intensity``; the result has the shape of ``intensities``."""
    _check_not_empty(color_map)
    table = np.asarray(color_map, dtype=np.uint32)
    intensities = np.asarray(intensities, dtype=np.float64)
    if np.isnan(intensities).any():
        raise ValueError("intensity must not be NaN")
    scaled = np_clamp01(intensities) * (len(table) - 1)
    return table[scaled.astype(np.int64)]
