from ..colors.argb import argb
from .spec import GradientSpec, DEFAULT_COLORMAP_SIZE

# Green fading in from 20% intensity into red at full intensity.
DEFAULT_GRADIENT_COLORS = (
    argb(255, 102, 225, 0),
    argb(255, 255, 0, 0),
)
DEFAULT_GRADIENT_BREAKPOINTS = (0.2, 1.0)

DEFAULT_GRADIENT = GradientSpec(
    DEFAULT_GRADIENT_COLORS,
    DEFAULT_GRADIENT_BREAKPOINTS,
    DEFAULT_COLORMAP_SIZE,
)

DEFAULT_OPACITY = 0.7
