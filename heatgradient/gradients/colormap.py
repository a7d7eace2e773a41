"""
Table generator: renders a gradient into a fixed-size colormap.

Index ``i`` of a colormap represents normalized intensity ``i / size``. The
active range for an index is the last range starting at or before it, and
the entry is ``interpolate_color(start, end, (i - start_index) / span)``.
"""
from __future__ import annotations
import math
from typing import TYPE_CHECKING
import numpy as np
from numpy import ndarray as NDArray

from ..colors.argb import np_unpack_argb, np_pack_argb
from ..interpolation.hue import np_interpolate_colors
from ..types.color_types import Colormap
from ..utils.bounds import OutOfBoundsBehavior, apply_unit_bounds
from .intervals import ColorRange, build_color_intervals

if TYPE_CHECKING:
    from .spec import GradientSpec


def render_range(color_range: ColorRange, offsets: NDArray) -> NDArray:
    """
    Colors for entries ``offsets`` steps past the start of a range.

    A zero-span range has no defined ratio and renders as its start color.
    """
    offsets = np.asarray(offsets, dtype=np.float64)
    if color_range.span == 0:
        return np.full(offsets.shape, color_range.start_color, dtype=np.uint32)
    ratios = offsets / np.float64(color_range.span)
    return np_interpolate_colors(color_range.start_color, color_range.end_color, ratios)


def apply_opacity(colormap: NDArray, opacity: float) -> Colormap:
    """Scale every alpha by ``opacity`` (truncated to an integer channel), RGB untouched."""
    channels = np_unpack_argb(colormap)
    scaled_alpha = np.trunc(channels[..., 0].astype(np.float64) * opacity)
    return np_pack_argb(scaled_alpha, channels[..., 1], channels[..., 2], channels[..., 3])


def generate_colormap(
    spec: GradientSpec,
    opacity: float = 1.0,
    *,
    opacity_bounds: OutOfBoundsBehavior = OutOfBoundsBehavior.CLAMP,
) -> Colormap:
    """
    Generate the colormap of a gradient.

    Args:
        spec: Gradient to render
        opacity: Global opacity every alpha is multiplied by
        opacity_bounds: What to do with an opacity outside [0, 1]

    Returns:
        Fresh ``uint32`` array of ``spec.size`` packed ARGB colors
    """
    opacity = float(opacity)
    if math.isnan(opacity):
        raise ValueError("opacity cannot be NaN")
    opacity = apply_unit_bounds(opacity, opacity_bounds, name="opacity")

    intervals = build_color_intervals(spec)
    starts = np.array([interval.start_index for interval in intervals], dtype=np.int64)

    indices = np.arange(spec.size, dtype=np.int64)
    # Ranges are sorted, so the active one is the last start <= index.
    active = np.searchsorted(starts, indices, side="right") - 1

    colormap = np.zeros(spec.size, dtype=np.uint32)
    for position, (start_index, color_range) in enumerate(intervals):
        mask = active == position
        if not np.any(mask):
            continue
        colormap[mask] = render_range(color_range, indices[mask] - start_index)

    if opacity != 1.0:
        colormap = apply_opacity(colormap, opacity)
    return colormap
