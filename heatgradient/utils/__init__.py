from .bounds import OutOfBoundsBehavior, apply_unit_bounds, np_apply_unit_bounds

__all__ = ["OutOfBoundsBehavior", "apply_unit_bounds", "np_apply_unit_bounds"]
