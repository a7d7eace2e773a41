import numpy as np
from heatgradient.conversions import (
    hsv_to_int_rgb, hsv_to_unit_rgb, np_hsv_to_int_rgb, np_hsv_to_unit_rgb, int_rgb_to_hsv,
)
from ..samples import samples_rgb_hsv


def test_hsv_to_int_rgb():
    for rgb_exp, (h, s, v) in samples_rgb_hsv.items():
        assert hsv_to_int_rgb(h, s, v) == rgb_exp

def test_hsv_to_int_rgb_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.values()))
    expected = np.array(list(samples_rgb_hsv.keys()))
    result = np_hsv_to_int_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)

def test_round_trip_every_gray_and_primary_mix():
    for r in range(0, 256, 17):
        for g in range(0, 256, 51):
            for b in (0, 99, 255):
                assert hsv_to_int_rgb(*int_rgb_to_hsv(r, g, b)) == (r, g, b)

def test_hue_wraps_cyclically():
    assert hsv_to_int_rgb(360.0, 1.0, 1.0) == (255, 0, 0)
    assert hsv_to_int_rgb(480.0, 1.0, 1.0) == (0, 255, 0)
    assert hsv_to_int_rgb(-120.0, 1.0, 1.0) == (0, 0, 255)

def test_saturation_and_value_clamped():
    assert hsv_to_unit_rgb(0.0, 2.0, 1.5) == (1.0, 0.0, 0.0)
    assert hsv_to_unit_rgb(0.0, -1.0, 0.5) == (0.5, 0.5, 0.5)

def test_numpy_matches_scalar():
    hues = np.linspace(-90.0, 450.0, 37)
    sats = np.linspace(0.0, 1.0, 37)
    vals = np.linspace(1.0, 0.2, 37)
    vectorized = np_hsv_to_unit_rgb(hues, sats, vals)
    for i in range(len(hues)):
        assert np.allclose(vectorized[i], hsv_to_unit_rgb(hues[i], sats[i], vals[i]))
