from chromagen.conversions.to_rgb import hsb_to_rgb, np_hsb_to_rgb, HSB_SECTORS
from chromagen.errors import InvalidColorValue, InternalConversionError
from ..samples import samples_hsb_rgb
import numpy as np
import pytest


def test_hsb_to_rgb():
    for (h, s, b), expected in samples_hsb_rgb.items():
        assert hsb_to_rgb(h, s, b) == expected


def test_hsb_to_rgb_returns_python_ints():
    r, g, b = hsb_to_rgb(0.1, 0.7, 0.9)
    assert all(type(c) is int for c in (r, g, b))


def test_hue_wraps():
    assert hsb_to_rgb(1.5, 1, 1) == hsb_to_rgb(0.5, 1, 1)
    assert hsb_to_rgb(-0.5, 1, 1) == (0, 255, 255)
    assert hsb_to_rgb(3.0, 1, 1) == (255, 0, 0)


def test_tiny_negative_hue_lands_in_first_sector():
    assert hsb_to_rgb(-1e-18, 1, 1) == (255, 0, 0)


def test_grey_ignores_hue():
    for hue in (0.0, 0.2, 0.77, 4.2):
        assert hsb_to_rgb(hue, 0, 0.5) == (128, 128, 128)


@pytest.mark.parametrize("sat, bri", [(1.2, 0.5), (-0.1, 0.5), (0.5, 1.01), (0.5, -1), (0, 2.0)])
def test_bad_hsb_value(sat, bri):
    with pytest.raises(InvalidColorValue):
        hsb_to_rgb(0.3, sat, bri)


def test_bad_hsb_value_is_value_error():
    with pytest.raises(ValueError):
        hsb_to_rgb(0.3, 1.5, 0.5)


def test_missing_sector_is_internal_error(monkeypatch):
    monkeypatch.delitem(HSB_SECTORS, 0)
    with pytest.raises(InternalConversionError):
        hsb_to_rgb(0.0, 1, 1)


def test_hsb_to_rgb_numpy():
    the_matrix = np.array(list(samples_hsb_rgb.keys()))
    expected = np.array(list(samples_hsb_rgb.values()))
    result = np_hsb_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)


def test_numpy_matches_scalar():
    h, s, b = np.meshgrid(
        np.linspace(-1, 2, 37), np.linspace(0, 1, 9), np.linspace(0, 1, 9), indexing="ij"
    )
    result = np_hsb_to_rgb(h, s, b)
    assert result.shape == h.shape + (3,)
    for idx in np.ndindex(h.shape):
        assert tuple(result[idx]) == hsb_to_rgb(h[idx], s[idx], b[idx])


def test_numpy_broadcasts_scalar_sat_bri():
    result = np_hsb_to_rgb(np.array([0.0, 0.5]), 1.0, 1.0)
    assert np.array_equal(result, [[255, 0, 0], [0, 255, 255]])


def test_numpy_bad_hsb_value():
    with pytest.raises(InvalidColorValue):
        np_hsb_to_rgb(np.array([0.1, 0.2]), np.array([0.5, 1.5]), 1.0)
