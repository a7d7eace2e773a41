"""
Heatmap Gradients
=================

Turn a handful of color stops into a precomputed heatmap colormap.

>>> from heatgradient.colors import RED, GREEN, BLUE
>>> from heatgradient.gradients import GradientSpec
>>> spec = GradientSpec([RED, GREEN, BLUE], [0.0, 0.5, 1.0], size=10)
>>> colormap = spec.generate()
>>> len(colormap)
10
>>> hex(colormap[0])
'0xffff0000'

Pipeline
--------
- ``build_color_intervals``: stops -> ordered ``(start_index, ColorRange)`` pairs
- ``generate_colormap``: ranges -> ``uint32`` colormap via hue-space interpolation
- ``apply_opacity``: optional global alpha scaling
"""

from .exceptions import IntervalCollisionWarning
from .intervals import ColorRange, ColorInterval, build_color_intervals
from .colormap import generate_colormap, apply_opacity, render_range
from .spec import GradientSpec, DEFAULT_COLORMAP_SIZE
from .presets import DEFAULT_GRADIENT, DEFAULT_OPACITY
from .lookup import color_for_intensity, np_colors_for_intensities

__all__ = [
    "IntervalCollisionWarning",
    "ColorRange",
    "ColorInterval",
    "build_color_intervals",
    "generate_colormap",
    "apply_opacity",
    "render_range",
    "GradientSpec",
    "DEFAULT_COLORMAP_SIZE",
    "DEFAULT_GRADIENT",
    "DEFAULT_OPACITY",
    "color_for_intensity",
    "np_colors_for_intensities",
]
