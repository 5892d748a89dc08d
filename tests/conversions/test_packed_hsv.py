import numpy as np
from chromamap.colors.packed import argb, alpha, unpack_argb
from chromamap.colors.named import RED, GREEN, BLUE
from chromamap.conversions.wrapper import (
    color_to_hsv, hsv_to_color, np_color_to_hsv, np_hsv_to_color,
)
from color_samples import grid_channels


def test_color_to_hsv_primaries():
    assert color_to_hsv(RED) == (0.0, 1.0, 1.0)
    assert color_to_hsv(GREEN) == (120.0, 1.0, 1.0)
    assert color_to_hsv(BLUE) == (240.0, 1.0, 1.0)

def test_color_to_hsv_ignores_alpha():
    assert color_to_hsv(argb(0, 255, 128, 0)) == color_to_hsv(argb(255, 255, 128, 0))
    h, s, v = color_to_hsv(argb(0x80, 255, 128, 0))
    assert abs(h - 60 * 128 / 255) < 1e-9
    assert (s, v) == (1.0, 1.0)

def test_hsv_to_color():
    assert hsv_to_color((0.0, 1.0, 1.0)) == RED
    assert hsv_to_color((120.0, 1.0, 1.0), alpha=128) == 0x8000FF00
    # half-up rounding of 127.5
    assert hsv_to_color((30.0, 1.0, 1.0)) == 0xFFFF8000
    assert hsv_to_color((960.0, 1.0, 1.0)) == BLUE

def test_hsv_to_color_alpha_is_truncated_and_clamped():
    assert alpha(hsv_to_color((0.0, 1.0, 1.0), alpha=127.9)) == 127
    assert alpha(hsv_to_color((0.0, 1.0, 1.0), alpha=300)) == 255
    assert alpha(hsv_to_color((0.0, 1.0, 1.0), alpha=-4)) == 0

def test_round_trip_over_rgb_grid():
    for r in grid_channels:
        for g in grid_channels:
            for b in grid_channels:
                color = argb(200, r, g, b)
                assert hsv_to_color(color_to_hsv(color), alpha(color)) == color

def test_numpy_round_trip_over_rgb_grid():
    r, g, b = np.meshgrid(grid_channels, grid_channels, grid_channels, indexing="ij")
    colors = (0xFF << 24) | (r << 16) | (g << 8) | b
    colors = colors.astype(np.uint32).ravel()
    hsv = np_color_to_hsv(colors)
    assert hsv.shape == (colors.size, 3)
    assert np.array_equal(np_hsv_to_color(hsv), colors)

def test_numpy_agrees_with_scalar():
    colors = [RED, 0x80FF8000, 0xFF336699, 0x00000000, 0xFFFFFFFF]
    hsv = np_color_to_hsv(colors)
    for color, row in zip(colors, hsv):
        assert np.allclose(color_to_hsv(color), row, atol=1e-12)
        assert unpack_argb(int(np_hsv_to_color(row, alpha(color)))) == unpack_argb(color)
