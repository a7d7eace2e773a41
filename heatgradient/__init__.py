"""
heatgradient - Heatmap Colormap Generation
==========================================

Precomputes the lookup table a heatmap renderer uses to color intensities:
a few color stops at normalized breakpoints become a fixed-size array of
packed ARGB colors, interpolated through HSV space along the shortest hue
arc.

Quick Start
-----------
>>> from heatgradient import GradientSpec, argb
>>>
>>> spec = GradientSpec(
...     [argb(255, 102, 225, 0), argb(255, 255, 0, 0)],
...     [0.2, 1.0],
... )
>>> colormap = spec.generate(opacity=0.7)
>>> colormap.shape
(1000,)

Modules
-------
- colors: packed ARGB packing/unpacking and named colors
- conversions: RGB <-> HSV
- interpolation: hue-space color interpolation
- gradients: gradient stops, interval builder, colormap generator
- utils: out-of-bounds policies
"""

from .colors import (
    argb,
    rgb,
    alpha,
    red,
    green,
    blue,
    unpack_argb,
    with_alpha,
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
from .conversions import (
    unit_rgb_to_hsv,
    int_rgb_to_hsv,
    hsv_to_unit_rgb,
    hsv_to_int_rgb,
    np_unit_rgb_to_hsv,
    np_hsv_to_unit_rgb,
)
from .interpolation import shortest_hue_arc, interpolate_color, np_interpolate_colors
from .gradients import (
    GradientSpec,
    ColorRange,
    ColorInterval,
    IntervalCollisionWarning,
    build_color_intervals,
    generate_colormap,
    apply_opacity,
    color_for_intensity,
    np_colors_for_intensities,
    DEFAULT_COLORMAP_SIZE,
    DEFAULT_GRADIENT,
    DEFAULT_OPACITY,
)
from .types import FormatType
from .utils import OutOfBoundsBehavior

__version__ = "1.0.0"

__all__ = [
    # Packed colors
    "argb", "rgb",
    "alpha", "red", "green", "blue",
    "unpack_argb", "with_alpha",
    "TRANSPARENT", "BLACK", "WHITE",
    "RED", "GREEN", "BLUE",
    "YELLOW", "CYAN", "MAGENTA",

    # Conversions
    "unit_rgb_to_hsv", "int_rgb_to_hsv",
    "hsv_to_unit_rgb", "hsv_to_int_rgb",
    "np_unit_rgb_to_hsv", "np_hsv_to_unit_rgb",

    # Interpolation
    "shortest_hue_arc", "interpolate_color", "np_interpolate_colors",

    # Gradients
    "GradientSpec", "ColorRange", "ColorInterval",
    "IntervalCollisionWarning",
    "build_color_intervals", "generate_colormap", "apply_opacity",
    "color_for_intensity", "np_colors_for_intensities",
    "DEFAULT_COLORMAP_SIZE", "DEFAULT_GRADIENT", "DEFAULT_OPACITY",

    # Policies and formats
    "FormatType", "OutOfBoundsBehavior",

    # Version
    "__version__",
]
