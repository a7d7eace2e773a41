"""
Hue-space color interpolation.

Channel-wise RGB interpolation between colors far apart on the hue wheel
(red to blue, say) passes through desaturated grays. Interpolating hue,
saturation and value instead sweeps through the vivid intermediate hues a
heatmap is expected to show.
"""
from __future__ import annotations
import math
from typing import Tuple, Union
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import PackedColor
from ..types.format_type import HUE_360
from ..colors.argb import argb, unpack_argb, np_pack_argb
from ..conversions import int_rgb_to_hsv, hsv_to_int_rgb, np_hsv_to_int_rgb

_HALF_TURN = HUE_360 / 2


def shortest_hue_arc(h1: float, h2: float) -> Tuple[float, float]:
    """
    Shift one of two hues by a full turn so the arc between them is <= 180°.

    Args:
        h1: Start hue in degrees [0, 360)
        h2: End hue in degrees [0, 360)

    Returns:
        ``(h1, h2)`` with at most one of them moved up by 360.
    """
    if h1 - h2 > _HALF_TURN:
        h2 += HUE_360
    elif h2 - h1 > _HALF_TURN:
        h1 += HUE_360
    return h1, h2


def _lerp(start, end, ratio):
    return (end - start) * ratio + start


def interpolate_color(color1: int, color2: int, ratio: float) -> PackedColor:
    """
    Interpolate two packed ARGB colors through HSV space.

    Alpha is interpolated linearly and truncated; hue travels the shortest
    way around the wheel. ``ratio`` is not clamped, so values outside
    [0, 1] extrapolate (channels still saturate at 0 and 255).

    Args:
        color1: Color at ratio 0
        color2: Color at ratio 1
        ratio: Fraction of the way from color1 to color2

    Returns:
        Packed ARGB color
    """
    if math.isnan(ratio):
        raise ValueError("Interpolation ratio cannot be NaN")
    a1, r1, g1, b1 = unpack_argb(color1)
    a2, r2, g2, b2 = unpack_argb(color2)

    a = math.trunc(_lerp(a1, a2, ratio))

    h1, s1, v1 = int_rgb_to_hsv(r1, g1, b1)
    h2, s2, v2 = int_rgb_to_hsv(r2, g2, b2)
    h1, h2 = shortest_hue_arc(h1, h2)

    r, g, b = hsv_to_int_rgb(
        _lerp(h1, h2, ratio),
        _lerp(s1, s2, ratio),
        _lerp(v1, v2, ratio),
    )
    return argb(a, r, g, b)


def np_interpolate_colors(
    color1: int,
    color2: int,
    ratios: Union[NDArray, float],
) -> NDArray:
    """
    Vectorized :func:`interpolate_color` over many ratios between one pair.

    Returns:
        ``uint32`` array shaped like ``ratios``
    """
    ratios = np.asarray(ratios, dtype=np.float64)
    if np.any(np.isnan(ratios)):
        raise ValueError("Interpolation ratios cannot be NaN")
    a1, r1, g1, b1 = unpack_argb(color1)
    a2, r2, g2, b2 = unpack_argb(color2)

    a = np.trunc(_lerp(a1, a2, ratios))

    h1, s1, v1 = int_rgb_to_hsv(r1, g1, b1)
    h2, s2, v2 = int_rgb_to_hsv(r2, g2, b2)
    h1, h2 = shortest_hue_arc(h1, h2)

    channels = np_hsv_to_int_rgb(
        _lerp(h1, h2, ratios),
        _lerp(s1, s2, ratios),
        _lerp(v1, v2, ratios),
    )
    return np_pack_argb(a, channels[..., 0], channels[..., 1], channels[..., 2])
