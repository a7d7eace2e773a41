"""
Packed ARGB Colors
==================

Colors travel through heatgradient as single 32-bit integers laid out as
``0xAARRGGBB``, the form heatmap tile renderers consume directly.

Scalar helpers work on Python ints; ``np_`` twins work on ``uint32``
arrays. Signed 32-bit inputs (negative whenever alpha >= 128) are accepted
and normalized to the unsigned form.

>>> from heatgradient.colors import argb, unpack_argb
>>> c = argb(128, 255, 0, 0)
>>> hex(c)
'0x80ff0000'
>>> unpack_argb(c)
(128, 255, 0, 0)
"""

from .argb import (
    argb,
    rgb,
    alpha,
    red,
    green,
    blue,
    unpack_argb,
    with_alpha,
    transparent_variant,
    normalize_argb,
    np_normalize_argb,
    np_unpack_argb,
    np_pack_argb,
    np_with_alpha,
    np_alpha,
)
from .named import (
    TRANSPARENT,
    BLACK,
    WHITE,
    RED,
    GREEN,
    BLUE,
    YELLOW,
    CYAN,
    MAGENTA,
)

__all__ = [
    "argb",
    "rgb",
    "alpha",
    "red",
    "green",
    "blue",
    "unpack_argb",
    "with_alpha",
    "transparent_variant",
    "normalize_argb",
    "np_normalize_argb",
    "np_unpack_argb",
    "np_pack_argb",
    "np_with_alpha",
    "np_alpha",
    "TRANSPARENT",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
]
