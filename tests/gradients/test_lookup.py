import math
import numpy as np
import pytest
from chromamap.colors.named import RED, BLUE
from chromamap.gradients.gradient import Gradient
from chromamap.gradients.lookup import color_for_intensity, np_colors_for_intensities


@pytest.fixture
def color_map():
    return Gradient([RED, BLUE], [0.0, 1.0], 10).generate_color_map()


def test_lookup_ends(color_map):
    assert color_for_intensity(color_map, 0.0) == RED
    assert color_for_intensity(color_map, 1.0) == int(color_map[-1])

def test_lookup_floors_index(color_map):
    assert color_for_intensity(color_map, 0.5) == int(color_map[4])

def test_lookup_clamps_intensity(color_map):
    assert color_for_intensity(color_map, -0.3) == int(color_map[0])
    assert color_for_intensity(color_map, 7.0) == int(color_map[-1])

def test_lookup_returns_python_int(color_map):
    assert type(color_for_intensity(color_map, 0.2)) is int

def test_lookup_on_plain_list():
    assert color_for_intensity([RED, BLUE], 1.0) == BLUE

def test_np_lookup(color_map):
    intensities = np.array([[0.0, 0.5], [1.0, 2.0]])
    colors = np_colors_for_intensities(color_map, intensities)
    assert colors.shape == (2, 2)
    assert colors.tolist() == [
        [int(color_map[0]), int(color_map[4])],
        [int(color_map[-1]), int(color_map[-1])],
    ]

def test_empty_map():
    with pytest.raises(ValueError, match="color_map is empty"):
        color_for_intensity([], 0.5)
    with pytest.raises(ValueError, match="color_map is empty"):
        np_colors_for_intensities(np.array([], dtype=np.uint32), [0.5])

def test_nan_intensity_is_rejected(color_map):
    with pytest.raises(ValueError, match="intensity must not be NaN"):
        color_for_intensity(color_map, math.nan)
    with pytest.raises(ValueError, match="intensity must not be NaN"):
        np_colors_for_intensities(color_map, [0.5, math.nan])
