"""
Heatmap gradients
=================

A ``Gradient`` is a sparse definition of a color ramp: parallel sequences of
colors and the intensity fractions at which they start. From it a dense
color map (lookup table) is generated, interpolating between neighbouring
colors in HSV space.

>>> from chromamap import Gradient, RED, GREEN, BLUE
>>> gradient = Gradient([RED, GREEN, BLUE], [0.0, 0.5, 1.0], table_size=10)
>>> color_map = gradient.generate_color_map()
>>> len(color_map)
10
"""
from __future__ import annotations

import math
import warnings
from numbers import Integral
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..colors.packed import as_color, np_pack_argb, np_unpack_argb
from ..types.color_types import Color, ColorLike
from .interpolation import np_interpolate_color
from .intervals import ColorInterval, build_color_intervals

DEFAULT_COLOR_MAP_SIZE = 1000


class Gradient:
    """
    Immutable gradient definition.

    Args:
        colors: Colors of the gradient, as packed ARGB ints or color strings
        start_points: Starting point of each color as a fraction of the maximum
            intensity, strictly increasing, normally within [0, 1]
        table_size: Number of entries in generated color maps

    Raises:
        ValueError: if the sequences differ in length, are empty, or the start
            points are not strictly increasing or not finite; if ``table_size`` < 1
        TypeError: if ``table_size`` is not an integer or a color has an
            unsupported type
    """
    __slots__ = ('_colors', '_start_points', '_table_size', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        colors: Sequence[ColorLike],
        start_points: Sequence[float],
        table_size: Optional[int] = DEFAULT_COLOR_MAP_SIZE,
    ) -> None:
        colors = list(colors)
        start_points = [float(p) for p in start_points]

        if len(colors) != len(start_points):
            raise ValueError("colors and startPoints should be same length")
        if not colors:
            raise ValueError("No colors have been defined")
        for i in range(1, len(start_points)):
            if start_points[i] <= start_points[i - 1]:
                raise ValueError("startPoints should be in increasing order")
        if not all(math.isfinite(p) for p in start_points):
            raise ValueError("startPoints must be finite")

        if table_size is None:
            table_size = DEFAULT_COLOR_MAP_SIZE
        if isinstance(table_size, bool) or not isinstance(table_size, Integral):
            raise TypeError("table_size must be an integer")
        if table_size < 1:
            raise ValueError("table_size must be positive")

        self._colors: Tuple[Color, ...] = tuple(as_color(c) for c in colors)
        self._start_points: Tuple[float, ...] = tuple(start_points)
        self._table_size = int(table_size)

        # freeze instance
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def colors(self) -> Tuple[Color, ...]:
        return self._colors

    @property
    def start_points(self) -> Tuple[float, ...]:
        return self._start_points

    @property
    def table_size(self) -> int:
        return self._table_size

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return (
            self._colors == other._colors
            and self._start_points == other._start_points
            and self._table_size == other._table_size
        )

    def __hash__(self) -> int:
        return hash((self._colors, self._start_points, self._table_size))

    def __repr__(self) -> str:
        colors = ", ".join(f"0x{c:08X}" for c in self._colors)
        return (
            f"{self.__class__.__name__}(colors=[{colors}], "
            f"start_points={list(self._start_points)}, table_size={self._table_size})"
        )

    def color_intervals(self) -> Dict[int, ColorInterval]:
        """Color intervals keyed by the color-map index at which each begins."""
        return build_color_intervals(self._colors, self._start_points, self._table_size)

    def generate_color_map(self, opacity: float = 1.0) -> NDArray:
        """
        Generate the color map for this gradient.

        Entry ``i`` belongs to the interval with the greatest key ``<= i`` and is
        interpolated with ratio ``(i - key) / duration``.

        Args:
            opacity: Overall opacity; every alpha value is multiplied by it.

        Returns:
            uint32 array of packed colors with ``table_size`` entries
        """
        intervals = self.color_intervals()
        size = self._table_size
        color_map = np.zeros(size, dtype=np.uint32)

        keys = sorted(k for k in intervals if 0 <= k < size)
        for start, stop in zip(keys, keys[1:] + [size]):
            interval = intervals[start]
            ratios = np.arange(stop - start, dtype=np.float64) / interval.duration
            color_map[start:stop] = np_interpolate_color(
                interval.start_color, interval.end_color, ratios
            )

        if opacity != 1:
            color_map = apply_opacity(color_map, opacity)
        return color_map


def apply_opacity(color_map: NDArray, opacity: float) -> NDArray:
    """
    Multiply every alpha channel of ``color_map`` by ``opacity``.

    Alpha is truncated to an int and clamped to [0, 255]; RGB is untouched.
    An opacity outside [0, 1] is accepted with a warning.

    Returns:
        New uint32 array
    """
    if not 0.0 <= opacity <= 1.0:
        warnings.warn(
            f"opacity {opacity} is outside [0, 1]; alpha values will be clamped",
            stacklevel=2,
        )
    channels = np_unpack_argb(color_map)
    alphas = channels[..., 0].astype(np.float64) * opacity
    return np_pack_argb(alphas, channels[..., 1], channels[..., 2], channels[..., 3])
