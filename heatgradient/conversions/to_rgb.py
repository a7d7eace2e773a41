import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp, cyclic_wrap_float

from ..types.format_type import FormatType, max_non_hue, HUE_360


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV to unit RGB (0..1).

    Hue wraps cyclically, so values produced by shortest-arc interpolation
    past 360 land back on the wheel. Saturation and value are clamped to
    [0, 1].
    """
    h = cyclic_wrap_float(h, 0.0, float(HUE_360))
    s = clamp(s, 0.0, 1.0)
    v = clamp(v, 0.0, 1.0)

    if s <= 0:
        return v, v, v

    hx = h / 60.0
    sector = int(math.floor(hx)) % 6
    f = hx - math.floor(hx)

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

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


def _round_channel(c: float) -> int:
    # Round half up, matching 8-bit color pickers.
    return int(math.floor(c * max_non_hue[FormatType.INT] + 0.5))


def hsv_to_int_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    """Convert HSV to 0..255 RGB channels."""
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return _round_channel(r), _round_channel(g), _round_channel(b)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized HSV to unit RGB.

    Args:
        h: array-like or scalar, hue in degrees (wrapped into [0,360))
        s: array-like or scalar, saturation (clamped to [0,1])
        v: array-like or scalar, value (clamped to [0,1])

    Returns:
        rgb: array of shape (..., 3) in [0,1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    out_shape = np.broadcast(h, s, v).shape
    wrap = bound_type_to_np_function[BoundType.CYCLIC]
    unit_clamp = bound_type_to_np_function[BoundType.CLAMP]
    h = np.broadcast_to(wrap(h, 0.0, float(HUE_360)), out_shape)
    s = np.broadcast_to(unit_clamp(s, 0.0, 1.0), out_shape)
    v = np.broadcast_to(unit_clamp(v, 0.0, 1.0), out_shape)

    hx = h / 60.0
    floor_hx = np.floor(hx)
    sector = floor_hx.astype(np.int64) % 6
    f = hx - floor_hx

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    conditions = [sector == i for i in range(5)]
    r = np.select(conditions, [v, q, p, p, t], default=v)
    g = np.select(conditions, [t, v, v, q, p], default=p)
    b = np.select(conditions, [p, p, t, v, v], default=q)

    gray = s <= 0
    r = np.where(gray, v, r)
    g = np.where(gray, v, g)
    b = np.where(gray, v, b)

    return np.stack([r, g, b], axis=-1)


def np_hsv_to_int_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized HSV to 0..255 RGB, shape (..., 3), dtype ``int64``."""
    unit = np_hsv_to_unit_rgb(h, s, v)
    return np.floor(unit * max_non_hue[FormatType.INT] + 0.5).astype(np.int64)
