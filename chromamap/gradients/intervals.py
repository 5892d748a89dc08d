from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Sequence

from ..colors.packed import with_alpha
from ..types.color_types import Color


@dataclass(frozen=True)
class ColorInterval:
    """A run of color-map entries blending from ``start_color`` to ``end_color``."""
    start_color: Color
    end_color: Color
    duration: float  # length in color-map entries, may be fractional


def _start_index(table_size: int, point: float) -> int:
    # round off float noise so 100 * 0.57 lands on 57, not 56
    return int(round(table_size * point, 9))


def build_color_intervals(
    colors: Sequence[Color],
    start_points: Sequence[float],
    table_size: int,
) -> Dict[int, ColorInterval]:
    """
    Partition ``range(table_size)`` into color intervals keyed by the index
    at which each one begins.

    Below the first start point the first color fades in from fully
    transparent. Above the last start point the last color is held flat.
    A later interval whose key collides with an earlier one replaces it.
    """
    intervals: Dict[int, ColorInterval] = {}

    if start_points[0] != 0:
        intervals[0] = ColorInterval(
            with_alpha(colors[0], 0),
            colors[0],
            table_size * start_points[0],
        )

    for i in range(1, len(colors)):
        intervals[_start_index(table_size, start_points[i - 1])] = ColorInterval(
            colors[i - 1],
            colors[i],
            table_size * (start_points[i] - start_points[i - 1]),
        )

    if start_points[-1] != 1:
        last = len(start_points) - 1
        intervals[_start_index(table_size, start_points[last])] = ColorInterval(
            colors[last],
            colors[last],
            table_size * (1 - start_points[last]),
        )

    return intervals
