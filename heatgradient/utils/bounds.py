from __future__ import annotations
from enum import Enum
from typing import Sequence
import numpy as np
from numpy import ndarray as NDArray
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp


class OutOfBoundsBehavior(Enum):
    """Behavior when a normalized value falls outside [0, 1]."""
    CLAMP = "clamp"
    RAISE = "raise"
    IGNORE = "ignore"  # Continue extrapolation


def apply_unit_bounds(value: float, behavior: OutOfBoundsBehavior, name: str = "value") -> float:
    """Apply out-of-bounds behavior to a single normalized value."""
    behavior = OutOfBoundsBehavior(behavior)
    if behavior == OutOfBoundsBehavior.CLAMP:
        return clamp(value, 0.0, 1.0)
    if behavior == OutOfBoundsBehavior.RAISE:
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name}={value} is outside [0, 1]")
        return value
    return value


def np_apply_unit_bounds(
    values: Sequence[float] | NDArray,
    behavior: OutOfBoundsBehavior,
    name: str = "values",
) -> NDArray:
    """Vectorized :func:`apply_unit_bounds`; preserves the input dtype."""
    values = np.asarray(values)
    behavior = OutOfBoundsBehavior(behavior)
    if behavior == OutOfBoundsBehavior.CLAMP:
        clamped = bound_type_to_np_function[BoundType.CLAMP](values, 0.0, 1.0)
        return np.asarray(clamped, dtype=values.dtype)
    if behavior == OutOfBoundsBehavior.RAISE:
        outside = (values < 0.0) | (values > 1.0)
        if np.any(outside):
            raise ValueError(
                f"{name} must lie in [0, 1], got {values[outside].tolist()}"
            )
    return values
