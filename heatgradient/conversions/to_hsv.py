import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..types.format_type import FormatType, max_non_hue
# Hexcone model: hue in degrees [0, 360), saturation and value in [0, 1].
# Achromatic colors get hue 0 and black gets saturation 0.


def unit_rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert unit RGB (0..1) to HSV.

    Output:
        h ∈ [0, 360)
        s ∈ [0, 1]
        v ∈ [0, 1]
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    v = mx
    s = 0.0 if mx == 0 else delta / mx

    if delta == 0:
        return 0.0, s, v

    if r == mx:
        h = (g - b) / delta
    elif g == mx:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta

    h *= 60.0
    if h < 0:
        h += 360.0
    return h, s, v


def int_rgb_to_hsv(r: int, g: int, b: int) -> Tuple[float, float, float]:
    """Convert 0..255 RGB channels to HSV."""
    maxval = max_non_hue[FormatType.INT]
    return unit_rgb_to_hsv(r / maxval, g / maxval, b / maxval)


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized unit RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,1], value [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    mx = np.maximum.reduce([r, g, b])
    mn = np.minimum.reduce([r, g, b])
    delta = mx - mn

    S = np.zeros_like(mx)
    nonzero = mx > 0
    S[nonzero] = delta[nonzero] / mx[nonzero]

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)
    h = np.select(
        [r == mx, g == mx],
        [(g - b) / safe_delta, 2.0 + (b - r) / safe_delta],
        default=4.0 + (r - g) / safe_delta,
    )
    h = np.where(chromatic, h * 60.0, 0.0)
    h = np.where(h < 0, h + 360.0, h)

    return np.stack([h, S, mx], axis=-1)


def np_int_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized 0..255 RGB to HSV."""
    maxval = float(max_non_hue[FormatType.INT])
    return np_unit_rgb_to_hsv(
        np.asarray(r, dtype=float) / maxval,
        np.asarray(g, dtype=float) / maxval,
        np.asarray(b, dtype=float) / maxval,
    )
