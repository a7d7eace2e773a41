import math
from concurrent.futures import ThreadPoolExecutor
import numpy as np
import pytest
from heatgradient.colors import argb, unpack_argb, np_unpack_argb, RED, GREEN, BLUE, YELLOW
from heatgradient.conversions import int_rgb_to_hsv
from heatgradient.gradients import (
    GradientSpec, ColorRange, generate_colormap, apply_opacity, render_range, IntervalCollisionWarning,
)
from heatgradient.utils import OutOfBoundsBehavior


def hue_of(color):
    _, r, g, b = unpack_argb(int(color))
    return int_rgb_to_hsv(r, g, b)[0]


@pytest.mark.filterwarnings("ignore::heatgradient.gradients.IntervalCollisionWarning")
@pytest.mark.parametrize("size", [1, 2, 10, 257, 1000])
def test_length_matches_size(size):
    spec = GradientSpec([RED, GREEN, BLUE], [0.1, 0.5, 0.9], size=size)
    colormap = generate_colormap(spec, 1.0)
    assert colormap.shape == (size,)
    assert colormap.dtype == np.uint32

def test_rgb_scenario(rgb_gradient):
    colormap = rgb_gradient.generate(1.0)
    assert colormap[0] == RED
    assert 0.0 < hue_of(colormap[4]) < 120.0
    assert colormap[5] == GREEN
    # Index 9 sits 4/5 of the way from GREEN to BLUE.
    assert 180.0 < hue_of(colormap[9]) < 240.0
    assert unpack_argb(int(colormap[9])) == (255, 0, 102, 255)

def test_hues_advance_monotonically(rgb_gradient):
    hues = [hue_of(c) for c in rgb_gradient.generate()]
    assert hues == sorted(hues)

def test_leading_fade(faded_gradient):
    colormap = faded_gradient.generate()
    assert unpack_argb(int(colormap[0])) == (0, 0, 255, 0)
    alphas = np_unpack_argb(colormap[:25])[:, 0].tolist()
    assert alphas == [math.trunc(255 * (i / 25)) for i in range(25)]
    assert colormap[25] == GREEN

def test_trailing_flat(faded_gradient):
    colormap = faded_gradient.generate()
    assert all(c == RED for c in colormap[75:])
    assert colormap[50] == YELLOW

def test_single_stop_gradients():
    flat = GradientSpec([BLUE], [0.0], size=6).generate()
    assert flat.tolist() == [BLUE] * 6

    fade = GradientSpec([BLUE], [1.0], size=4).generate()
    assert fade.tolist() == [argb(a, 0, 0, 255) for a in (0, 63, 127, 191)]

    half = GradientSpec([BLUE], [0.5], size=4).generate()
    assert half.tolist() == [argb(0, 0, 0, 255), argb(127, 0, 0, 255), BLUE, BLUE]


class TestOpacity:
    @pytest.mark.parametrize("opacity", [0.0, 0.3, 0.7, 0.99])
    def test_alpha_scaled_rgb_untouched(self, faded_gradient, opacity):
        full = np_unpack_argb(faded_gradient.generate(1.0)).astype(np.int64)
        scaled = np_unpack_argb(faded_gradient.generate(opacity)).astype(np.int64)
        assert np.array_equal(scaled[:, 1:], full[:, 1:])
        assert np.array_equal(scaled[:, 0], np.trunc(full[:, 0] * opacity).astype(np.int64))

    def test_default_clamps(self, rgb_gradient):
        assert np.array_equal(rgb_gradient.generate(1.5), rgb_gradient.generate(1.0))
        assert np.all(np_unpack_argb(rgb_gradient.generate(-0.5))[:, 0] == 0)

    def test_raise(self, rgb_gradient):
        with pytest.raises(ValueError, match="opacity"):
            rgb_gradient.generate(1.5, opacity_bounds=OutOfBoundsBehavior.RAISE)
        assert len(rgb_gradient.generate(0.5, opacity_bounds=OutOfBoundsBehavior.RAISE)) == 10

    def test_ignore_saturates_channel(self, faded_gradient):
        colormap = faded_gradient.generate(2.0, opacity_bounds=OutOfBoundsBehavior.IGNORE)
        alphas = np_unpack_argb(colormap)[:, 0]
        assert alphas[10] == min(255, math.trunc(255 * (10 / 25)) * 2)
        assert alphas[60] == 255

    def test_nan_rejected(self, rgb_gradient):
        with pytest.raises(ValueError):
            rgb_gradient.generate(float("nan"))

    def test_apply_opacity_direct(self):
        colormap = np.array([argb(200, 1, 2, 3), argb(255, 4, 5, 6)], dtype=np.uint32)
        assert apply_opacity(colormap, 0.5).tolist() == [argb(100, 1, 2, 3), argb(127, 4, 5, 6)]


def test_zero_span_renders_start_color():
    offsets = np.arange(4)
    rendered = render_range(ColorRange(RED, BLUE, 0.0), offsets)
    assert rendered.tolist() == [RED] * 4

def test_collision_outcome_is_fixed():
    spec = GradientSpec([RED, GREEN, BLUE], [0.0, 0.05, 1.0], size=10)
    with pytest.warns(IntervalCollisionWarning):
        colormap = spec.generate()
    # GREEN -> BLUE won index 0, RED never appears.
    assert colormap[0] == GREEN
    assert RED not in colormap.tolist()

def test_concurrent_generation_is_consistent(faded_gradient):
    expected = faded_gradient.generate(0.6)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: faded_gradient.generate(0.6), range(8)))
    for result in results:
        assert np.array_equal(result, expected)
