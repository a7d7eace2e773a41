class IntervalCollisionWarning(UserWarning):
    """Two color ranges start at the same colormap index; the later one wins."""
