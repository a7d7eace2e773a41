"""Basic heatgradient usage examples.

Run directly with:
    python examples/basic_usage.py

Saving the colormap strips needs Pillow (``pip install heatgradient[examples]``).
"""
import numpy as np
from PIL import Image

from heatgradient import (
    GradientSpec,
    DEFAULT_GRADIENT,
    DEFAULT_OPACITY,
    RED,
    GREEN,
    BLUE,
    argb,
    unpack_argb,
    interpolate_color,
    color_for_intensity,
)
from heatgradient.colors import np_unpack_argb


def demonstrate_interpolation() -> None:
    # Hue-space interpolation keeps midpoints vivid.
    print("RED -> GREEN midpoint:", hex(interpolate_color(RED, GREEN, 0.5)))
    print("RED -> BLUE midpoint:", hex(interpolate_color(RED, BLUE, 0.5)))


def demonstrate_colormaps() -> None:
    colormap = DEFAULT_GRADIENT.generate(DEFAULT_OPACITY)
    print("Default colormap size:", len(colormap))
    for intensity in (0.0, 0.1, 0.5, 1.0):
        print(f"  intensity {intensity:.1f} ->", unpack_argb(color_for_intensity(colormap, intensity)))

    spectrum = GradientSpec(
        [argb(255, 0, 0, 255), argb(255, 0, 255, 255), argb(255, 255, 255, 0), RED],
        [0.1, 0.4, 0.7, 1.0],
        size=256,
    )
    print("Spectrum colormap sample:", [hex(c) for c in spectrum.generate()[::64]])


def colormap_strip(colormap: np.ndarray, height: int = 32) -> Image.Image:
    """Render a colormap as a horizontal RGBA strip."""
    argb_channels = np_unpack_argb(colormap)
    rgba = argb_channels[:, [1, 2, 3, 0]]
    pixels = np.repeat(rgba[np.newaxis, :, :], height, axis=0)
    return Image.fromarray(pixels.astype(np.uint8), 'RGBA')


if __name__ == "__main__":
    demonstrate_interpolation()
    demonstrate_colormaps()
    colormap_strip(DEFAULT_GRADIENT.generate(DEFAULT_OPACITY)).save("default_gradient.png")
    print("Saved default_gradient.png")
