from __future__ import annotations
from typing import List, Sequence, Union
import numpy as np
from numpy import ndarray as NDArray

from ..colors.argb import np_normalize_argb
from ..types.color_types import Colormap
from ..utils.bounds import OutOfBoundsBehavior, np_apply_unit_bounds
from .intervals import ColorInterval, build_color_intervals
from .colormap import generate_colormap

DEFAULT_COLORMAP_SIZE = 1000


def _readonly(arr: NDArray) -> NDArray:
    arr = np.array(arr, copy=True)
    arr.setflags(write=False)
    return arr


class GradientSpec:
    """
    Color stops of a heatmap gradient and the size of the colormap built from them.

    Parallel sequences: ``colors[i]`` is the packed ARGB color reached at
    normalized intensity ``breakpoints[i]``. Instances are frozen after
    ``__init__``; the stored arrays are read-only copies.

    Args:
        colors: Packed ARGB colors, signed or unsigned 32-bit
        breakpoints: Strictly increasing normalized intensities
        size: Number of entries in generated colormaps
        breakpoint_bounds: What to do with breakpoints outside [0, 1]

    Raises:
        ValueError: Mismatched lengths, no stops, non-finite or
            non-increasing breakpoints, size < 1, or out-of-range
            breakpoints under ``OutOfBoundsBehavior.RAISE``
        TypeError: Non-integer colors or size
    """

    __slots__ = ('_colors', '_breakpoints', '_size', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(
        self,
        colors: Union[Sequence[int], NDArray],
        breakpoints: Union[Sequence[float], NDArray],
        size: int = DEFAULT_COLORMAP_SIZE,
        *,
        breakpoint_bounds: OutOfBoundsBehavior = OutOfBoundsBehavior.RAISE,
    ) -> None:
        colors_arr = np.asarray(colors)
        points = np.asarray(breakpoints)
        if colors_arr.ndim != 1 or points.ndim != 1:
            raise ValueError("colors and breakpoints must be one-dimensional sequences")
        if len(colors_arr) != len(points):
            raise ValueError(
                f"colors and breakpoints should be same length, got {len(colors_arr)} and {len(points)}"
            )
        if len(colors_arr) == 0:
            raise ValueError("No colors have been defined")

        if isinstance(size, (bool, np.bool_)) or not isinstance(size, (int, np.integer)):
            raise TypeError(f"size must be an integer, got {type(size).__name__}")
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")

        if not np.issubdtype(points.dtype, np.number) or np.issubdtype(points.dtype, np.complexfloating):
            raise TypeError(f"breakpoints must be real numbers, got dtype {points.dtype}")
        points = points.astype(np.float64)
        if not np.all(np.isfinite(points)):
            raise ValueError("breakpoints must be finite")
        points = np_apply_unit_bounds(points, breakpoint_bounds, name="breakpoints")
        points = points.astype(np.float32)
        if np.any(np.diff(points) <= 0):
            raise ValueError("breakpoints should be in strictly increasing order")

        self._colors = _readonly(np_normalize_argb(colors_arr))
        self._breakpoints = _readonly(points)
        self._size = int(size)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def colors(self) -> NDArray:
        """Packed ARGB colors as a read-only ``uint32`` array."""
        return self._colors

    @property
    def breakpoints(self) -> NDArray:
        """Breakpoints as a read-only ``float32`` array."""
        return self._breakpoints

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_stops(self) -> int:
        return len(self._colors)

    # ------------------ OPERATIONS ------------------
    def color_intervals(self) -> List[ColorInterval]:
        """Ranges of the colormap, ascending by start index."""
        return build_color_intervals(self)

    def generate(
        self,
        opacity: float = 1.0,
        *,
        opacity_bounds: OutOfBoundsBehavior = OutOfBoundsBehavior.CLAMP,
    ) -> Colormap:
        """Build a fresh colormap of ``size`` packed ARGB colors."""
        return generate_colormap(self, opacity, opacity_bounds=opacity_bounds)

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GradientSpec):
            return NotImplemented
        return (
            self._size == other._size
            and np.array_equal(self._colors, other._colors)
            and np.array_equal(self._breakpoints, other._breakpoints)
        )

    def __hash__(self) -> int:
        return hash((self._size, tuple(self._colors.tolist()), tuple(self._breakpoints.tolist())))

    def __repr__(self) -> str:
        colors = ", ".join(f"0x{int(c):08x}" for c in self._colors)
        points = ", ".join(f"{float(p):g}" for p in self._breakpoints)
        return f"GradientSpec(colors=[{colors}], breakpoints=[{points}], size={self._size})"
