from chromagen.distance import color_distance, np_color_distance
from .samples import sample_palette
import math
import numpy as np
import pytest


def test_identity():
    for color in sample_palette:
        assert color_distance(color, color) == 0.0


def test_symmetry():
    for a in sample_palette:
        for b in sample_palette:
            assert color_distance(a, b) == color_distance(b, a)


def test_positive_for_distinct_colors():
    for a in sample_palette:
        for b in sample_palette:
            if a != b:
                assert color_distance(a, b) > 0


def test_black_white():
    expected = math.sqrt(65025 * ((512 + 127.5) / 256 + 4 + (767 - 127.5) / 256))
    assert color_distance((0, 0, 0), (255, 255, 255)) == pytest.approx(expected)


def test_green_weighted_most():
    # a unit step in green costs more than in red or blue
    base = (100, 100, 100)
    d_red = color_distance(base, (110, 100, 100))
    d_green = color_distance(base, (100, 110, 100))
    d_blue = color_distance(base, (100, 100, 110))
    assert d_green > d_red
    assert d_green > d_blue


def test_accepts_lists_and_arrays():
    assert color_distance([10, 20, 30], np.array([10, 20, 30])) == 0.0


def test_numpy_matches_scalar():
    palette = np.array(sample_palette)
    target = (40, 90, 200)
    result = np_color_distance(palette, target)
    expected = [color_distance(c, target) for c in sample_palette]
    assert result.shape == (len(sample_palette),)
    assert np.allclose(result, expected)


def test_numpy_pairwise_matrix():
    palette = np.array(sample_palette)
    matrix = np_color_distance(palette[:, None, :], palette[None, :, :])
    assert matrix.shape == (len(sample_palette), len(sample_palette))
    assert np.allclose(matrix, matrix.T)
    assert np.allclose(np.diag(matrix), 0.0)
