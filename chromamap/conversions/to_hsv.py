import numpy as np
from numpy import ndarray as NDArray
from ..types.color_types import HSVTuple


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVTuple:
    """
    Convert unit RGB (0..1) to HSV.

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]

    Achromatic input (r == g == b) has h = s = 0.
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn
    v = mx
    if delta == 0:
        return 0.0, 0.0, float(v)

    s = delta / mx
    if r == mx:
        h = (g - b) / delta
    elif g == mx:
        h = 2 + (b - r) / delta
    else:
        h = 4 + (r - g) / delta
    h = h * 60
    if h < 0:
        h += 360
    return float(h), float(s), float(v)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: convert unit RGB (0..1) to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r, g, b = np.broadcast_arrays(
        np.asarray(r, dtype=np.float64),
        np.asarray(g, dtype=np.float64),
        np.asarray(b, dtype=np.float64),
    )

    mx = np.maximum.reduce([r, g, b])
    mn = np.minimum.reduce([r, g, b])
    delta = mx - mn
    chromatic = delta != 0
    safe_delta = np.where(chromatic, delta, 1.0)

    h = np.where(
        r == mx,
        (g - b) / safe_delta,
        np.where(g == mx, 2 + (b - r) / safe_delta, 4 + (r - g) / safe_delta),
    )
    h = h * 60
    h = np.where(h < 0, h + 360, h)
    h = np.where(chromatic, h, 0.0)

    s = np.where(chromatic, delta / np.where(mx > 0, mx, 1.0), 0.0)

    return np.stack([h, s, mx], axis=-1)
