import numpy as np
import pytest
from chromamap.colors.packed import argb, alpha, red, green, blue, np_unpack_argb
from chromamap.colors.named import RED, GREEN, BLUE, WHITE, BLACK
from chromamap.conversions.wrapper import color_to_hsv, hsv_to_color
from chromamap.gradients.interpolation import (
    interpolate_color, np_interpolate_color, shortest_hue_pair,
)

SAMPLE_COLORS = [RED, GREEN, BLUE, WHITE, BLACK, 0x80336699, 0xFF66E100, 0x00FF00FF, 0xC0123456]


@pytest.mark.parametrize("h1, h2, expected", [
    (350.0, 10.0, (350.0, 370.0)),
    (10.0, 350.0, (370.0, 350.0)),
    (100.0, 200.0, (100.0, 200.0)),
    (0.0, 180.0, (0.0, 180.0)),
    (240.0, 0.0, (240.0, 360.0)),
])
def test_shortest_hue_pair(h1, h2, expected):
    assert shortest_hue_pair(h1, h2) == expected

@pytest.mark.parametrize("ratio", [0.0, 0.3, 0.5, 1.0, 1.0000001])
def test_interpolating_a_color_with_itself_is_identity(ratio):
    for color in SAMPLE_COLORS:
        assert interpolate_color(color, color, ratio) == color

def test_endpoints():
    for c1 in SAMPLE_COLORS:
        for c2 in SAMPLE_COLORS:
            assert interpolate_color(c1, c2, 0.0) == c1
            assert interpolate_color(c1, c2, 1.0) == c2

def test_hue_wraps_through_red():
    c350 = hsv_to_color((350.0, 1.0, 1.0))
    c10 = hsv_to_color((10.0, 1.0, 1.0))
    for mid in (interpolate_color(c350, c10, 0.5), interpolate_color(c10, c350, 0.5)):
        assert red(mid) == 255
        assert green(mid) <= 1
        assert blue(mid) <= 1
        h, _, _ = color_to_hsv(mid)
        assert min(h, 360.0 - h) < 1.0

def test_midpoint_red_to_green_is_yellowish():
    mid = interpolate_color(RED, GREEN, 0.5)
    assert mid == 0xFFFFFF00

def test_alpha_is_linear_and_truncated():
    c1 = argb(0, 255, 0, 0)
    c2 = argb(255, 255, 0, 0)
    assert alpha(interpolate_color(c1, c2, 0.5)) == 127
    assert alpha(interpolate_color(c2, c1, 0.5)) == 127
    assert alpha(interpolate_color(c1, c2, 0.999)) == 254

def test_small_overshoot_does_not_fail():
    c1 = argb(0, 0, 0, 255)
    c2 = argb(255, 255, 0, 0)
    over = interpolate_color(c1, c2, 1.01)
    assert alpha(over) == 255
    under = interpolate_color(c1, c2, -0.01)
    assert alpha(under) == 0

def test_numpy_matches_scalar():
    ratios = np.linspace(0.0, 1.0, 37)
    for c1, c2 in [(RED, BLUE), (0x80336699, 0xFF66E100), (WHITE, 0x00FF00FF), (0xFF00FF00, RED)]:
        vectorized = np_interpolate_color(c1, c2, ratios)
        assert vectorized.dtype == np.uint32
        assert vectorized.shape == ratios.shape
        expected = [interpolate_color(c1, c2, float(r)) for r in ratios]
        diff = np.abs(
            np_unpack_argb(vectorized).astype(int) - np_unpack_argb(expected).astype(int)
        )
        assert diff.max() <= 1
