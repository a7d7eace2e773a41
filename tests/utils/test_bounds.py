import numpy as np
import pytest
from heatgradient.utils import OutOfBoundsBehavior, apply_unit_bounds, np_apply_unit_bounds


def test_clamp():
    assert apply_unit_bounds(1.5, OutOfBoundsBehavior.CLAMP) == 1.0
    assert apply_unit_bounds(-0.5, OutOfBoundsBehavior.CLAMP) == 0.0
    assert apply_unit_bounds(0.25, OutOfBoundsBehavior.CLAMP) == 0.25

def test_raise():
    with pytest.raises(ValueError, match="opacity"):
        apply_unit_bounds(1.01, OutOfBoundsBehavior.RAISE, name="opacity")
    assert apply_unit_bounds(1.0, OutOfBoundsBehavior.RAISE) == 1.0

def test_ignore():
    assert apply_unit_bounds(3.0, OutOfBoundsBehavior.IGNORE) == 3.0

def test_accepts_values():
    assert apply_unit_bounds(2.0, "clamp") == 1.0
    with pytest.raises(ValueError):
        apply_unit_bounds(0.5, "wrap")

def test_numpy_variants():
    values = np.array([-1.0, 0.5, 2.0], dtype=np.float32)
    clamped = np_apply_unit_bounds(values, OutOfBoundsBehavior.CLAMP)
    assert clamped.dtype == np.float32
    assert clamped.tolist() == [0.0, 0.5, 1.0]
    assert np_apply_unit_bounds(values, OutOfBoundsBehavior.IGNORE).tolist() == [-1.0, 0.5, 2.0]
    with pytest.raises(ValueError, match=r"\[-1.0, 2.0\]"):
        np_apply_unit_bounds(values, OutOfBoundsBehavior.RAISE)
