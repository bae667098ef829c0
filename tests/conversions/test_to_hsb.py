from chromagen.conversions.to_hsb import rgb_to_hsb, np_rgb_to_hsb
from ..samples import samples_rgb_hsb
import numpy as np


def test_rgb_to_hsb():
    for (r, g, b), (h_exp, s_exp, b_exp) in samples_rgb_hsb.items():
        h_out, s_out, b_out = rgb_to_hsb(r, g, b)

        assert abs(h_out - h_exp) < 1e-9
        assert abs(s_out - s_exp) < 1e-9
        assert abs(b_out - b_exp) < 1e-9


def test_rgb_to_hsb_hue_in_unit_range():
    for rgb in [(255, 0, 1), (200, 10, 250), (1, 0, 0), (3, 7, 5)]:
        h, s, b = rgb_to_hsb(*rgb)
        assert 0.0 <= h < 1.0
        assert 0.0 <= s <= 1.0
        assert 0.0 <= b <= 1.0


def test_rgb_to_hsb_numpy():
    the_matrix = np.array(list(samples_rgb_hsb.keys()))
    expected = np.array(list(samples_rgb_hsb.values()))
    hsb = np_rgb_to_hsb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(hsb, expected, atol=1e-9)


def test_numpy_matches_scalar():
    rng = np.random.default_rng(5)
    rgb = rng.integers(0, 256, size=(200, 3))
    hsb = np_rgb_to_hsb(rgb[:, 0], rgb[:, 1], rgb[:, 2])
    for color, out in zip(rgb, hsb):
        assert np.allclose(out, rgb_to_hsb(*(int(c) for c in color)), atol=1e-12)


def test_rgb_to_hsb_uint8_channels():
    r, g, b = np.array([10, 200, 30], dtype=np.uint8)
    h, s, v = rgb_to_hsb(r, g, b)

    assert abs(h - (1 / 3 + 20 / (190 * 6))) < 1e-9
    assert abs(s - 190 / 200) < 1e-9
    assert abs(v - 200 / 255) < 1e-9
    assert all(type(c) is float for c in (h, s, v))
