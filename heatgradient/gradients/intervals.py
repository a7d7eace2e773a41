"""
Interval builder: turns color stops into ordered colormap ranges.

Each range covers ``span`` colormap entries from its start index and
interpolates ``start_color`` to ``end_color``. Ranges are keyed by start
index; when two ranges floor to the same index the later one replaces the
earlier one and an :class:`IntervalCollisionWarning` is issued.
"""
from __future__ import annotations
import math
import warnings
from typing import TYPE_CHECKING, Dict, List, NamedTuple
import numpy as np

from ..colors.argb import transparent_variant
from ..types.color_types import PackedColor
from .exceptions import IntervalCollisionWarning

if TYPE_CHECKING:
    from .spec import GradientSpec


class ColorRange(NamedTuple):
    start_color: PackedColor
    end_color: PackedColor
    span: float  # colormap entries covered, denominator of the interpolation ratio


class ColorInterval(NamedTuple):
    start_index: int
    color_range: ColorRange


def _floor_index(position: np.float32) -> int:
    return int(math.floor(position))


def _put(intervals: Dict[int, ColorRange], start_index: int, color_range: ColorRange) -> None:
    previous = intervals.get(start_index)
    if previous is not None:
        warnings.warn(
            f"Color ranges collide at colormap index {start_index}; "
            f"range {previous} is replaced by {color_range}. "
            "Spread the breakpoints further apart or increase the colormap size.",
            IntervalCollisionWarning,
            stacklevel=3,
        )
    intervals[start_index] = color_range


def build_color_intervals(spec: GradientSpec) -> List[ColorInterval]:
    """
    Build the colormap ranges of a gradient, ascending by start index.

    1. A first breakpoint above 0 gets a leading fade-in from a fully
       transparent copy of the first color.
    2. Every consecutive pair of stops gets a range between their colors.
    3. A last breakpoint below 1 gets a flat trailing range of the last color.

    Positions are computed in float32 (``size * breakpoint``) and floored.

    Args:
        spec: Gradient whose stops are turned into ranges

    Returns:
        List of ``(start_index, ColorRange)`` pairs sorted by start index
    """
    size = np.float32(spec.size)
    points = spec.breakpoints
    colors = [int(c) for c in spec.colors]
    last = len(colors) - 1

    intervals: Dict[int, ColorRange] = {}

    if points[0] != 0:
        _put(intervals, 0, ColorRange(
            transparent_variant(colors[0]),
            colors[0],
            float(size * points[0]),
        ))

    for i in range(1, len(colors)):
        _put(intervals, _floor_index(size * points[i - 1]), ColorRange(
            colors[i - 1],
            colors[i],
            float(size * (points[i] - points[i - 1])),
        ))

    if points[last] != 1:
        _put(intervals, _floor_index(size * points[last]), ColorRange(
            colors[last],
            colors[last],
            float(size * (np.float32(1.0) - points[last])),
        ))

    return [ColorInterval(start, color_range) for start, color_range in sorted(intervals.items())]
