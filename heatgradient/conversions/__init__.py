"""
heatgradient Color Space Conversions
====================================

RGB <-> HSV conversions used by hue-space interpolation, with scalar
functions for single colors and ``np_`` twins for batches.

Conversion Functions
-------------------

RGB → HSV:
    unit_rgb_to_hsv(r, g, b) / np_unit_rgb_to_hsv(r, g, b)
        RGB channels in [0, 1]
    int_rgb_to_hsv(r, g, b) / np_int_rgb_to_hsv(r, g, b)
        RGB channels in 0..255

HSV → RGB:
    hsv_to_unit_rgb(h, s, v) / np_hsv_to_unit_rgb(h, s, v)
    hsv_to_int_rgb(h, s, v) / np_hsv_to_int_rgb(h, s, v)
        Hue wraps cyclically; saturation and value are clamped to [0, 1].

Examples
--------
>>> from heatgradient.conversions import int_rgb_to_hsv, hsv_to_int_rgb
>>> int_rgb_to_hsv(255, 255, 0)
(60.0, 1.0, 1.0)
>>> hsv_to_int_rgb(420.0, 1.0, 1.0)
(255, 255, 0)
"""

from .to_hsv import (
    unit_rgb_to_hsv,
    int_rgb_to_hsv,
    np_unit_rgb_to_hsv,
    np_int_rgb_to_hsv,
)
from .to_rgb import (
    hsv_to_unit_rgb,
    hsv_to_int_rgb,
    np_hsv_to_unit_rgb,
    np_hsv_to_int_rgb,
)

__all__ = [
    'unit_rgb_to_hsv',
    'int_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'np_int_rgb_to_hsv',
    'hsv_to_unit_rgb',
    'hsv_to_int_rgb',
    'np_hsv_to_unit_rgb',
    'np_hsv_to_int_rgb',
]
