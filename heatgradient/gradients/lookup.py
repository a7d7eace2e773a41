from __future__ import annotations
import math
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp

from ..types.color_types import PackedColor


def _check_colormap(colormap: NDArray) -> NDArray:
    colormap = np.asarray(colormap)
    if colormap.ndim != 1 or len(colormap) == 0:
        raise ValueError("colormap must be a non-empty one-dimensional array")
    return colormap


def color_for_intensity(colormap: NDArray, intensity: float) -> PackedColor:
    """
    Look up the color of a normalized intensity.

    Intensities are clamped to [0, 1] and mapped onto
    ``colormap[floor(intensity * (len(colormap) - 1))]``.
    """
    colormap = _check_colormap(colormap)
    if math.isnan(intensity):
        raise ValueError("intensity cannot be NaN")
    index = math.floor(clamp(intensity, 0.0, 1.0) * (len(colormap) - 1))
    return int(colormap[index])


def np_colors_for_intensities(colormap: NDArray, intensities: NDArray) -> NDArray:
    """Vectorized :func:`color_for_intensity`; returns ``uint32`` colors shaped like ``intensities``."""
    colormap = _check_colormap(colormap)
    intensities = np.asarray(intensities, dtype=np.float64)
    if np.any(np.isnan(intensities)):
        raise ValueError("intensities cannot be NaN")
    unit = bound_type_to_np_function[BoundType.CLAMP](intensities, 0.0, 1.0)
    indices = np.floor(unit * (len(colormap) - 1)).astype(np.int64)
    return colormap[indices].astype(np.uint32)
