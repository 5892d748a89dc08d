import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
from boundednumbers.functions import clamp01, cyclic_wrap_float
from boundednumbers.np_functions import (
    clamp01 as np_clamp01,
    cyclic_wrap_float as np_cyclic_wrap_float,
)
from ..types.format_type import HUE_360


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to unit RGB (0..1).

    Hue may lie outside [0, 360) (e.g. after shortest-arc interpolation);
    it is wrapped back onto the circle. Saturation and value are clamped to [0, 1].
    """
    h = cyclic_wrap_float(h, 0.0, HUE_360)
    s = clamp01(s)
    v = clamp01(v)
    if s <= 0:
        return v, v, v

    hx = h / 60.0
    sector = math.floor(hx)
    f = hx - sector
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    # h == 360.0 can survive float modulo for tiny negative hues
    sector %= 6
    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: convert HSV to unit RGB (0..1).

    Args:
        h: array-like or scalar, degrees (wrapped modulo 360)
        s: array-like or scalar, [0,1] saturation (clamped)
        v: array-like or scalar, [0,1] value (clamped)

    Returns:
        rgb: array of shape (..., 3)
    """
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=np.float64),
        np.asarray(s, dtype=np.float64),
        np.asarray(v, dtype=np.float64),
    )
    h = np_cyclic_wrap_float(h, 0.0, HUE_360)
    s = np_clamp01(s)
    v = np_clamp01(v)

    hx = h / 60.0
    sector = np.floor(hx)
    f = hx - sector
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))
    sector = sector.astype(np.int64) % 6

    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [v, q, p, p, t, v])
    g = np.select(conditions, [t, v, v, q, p, p])
    b = np.select(conditions, [p, p, t, v, v, q])

    gray = s <= 0
    rgb = np.stack([r, g, b], axis=-1)
    return np.where(gray[..., None], v[..., None], rgb)
