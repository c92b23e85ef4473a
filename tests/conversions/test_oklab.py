from colorjourney.conversions import rgb_to_oklab, oklab_to_rgb, np_rgb_to_oklab, np_oklab_to_rgb
from colorjourney.types import LabColor, RGBColor
from ..samples import samples_rgb_oklab, samples_rgb
import numpy as np

oklab_tolerance = 1e-4
rgb_tolerance = 1e-3


def test_rgb_to_oklab():
    for (r, g, b), (L_exp, a_exp, b_exp) in samples_rgb_oklab.items():
        L, a, b_out = rgb_to_oklab((r, g, b))

        assert abs(L - L_exp) < oklab_tolerance
        assert abs(a - a_exp) < oklab_tolerance
        assert abs(b_out - b_exp) < oklab_tolerance


def test_rgb_to_oklab_returns_named_tuple():
    lab = rgb_to_oklab(RGBColor(0.3, 0.5, 0.8))
    assert isinstance(lab, LabColor)
    assert isinstance(lab.L, float)


def test_oklab_to_rgb():
    for (r_exp, g_exp, b_exp), lab in samples_rgb_oklab.items():
        r, g, b = oklab_to_rgb(lab)

        assert abs(r - r_exp) < rgb_tolerance
        assert abs(g - g_exp) < rgb_tolerance
        assert abs(b - b_exp) < rgb_tolerance


def test_round_trip_rgb_oklab():
    for rgb in samples_rgb:
        out = oklab_to_rgb(rgb_to_oklab(rgb))
        for c_in, c_out in zip(rgb, out):
            assert abs(c_in - c_out) < 0.01


def test_oklab_to_rgb_can_leave_gamut():
    # very saturated green at low lightness has no in-gamut RGB
    r, g, b = oklab_to_rgb((0.3, -0.3, 0.2))
    assert min(r, g, b) < 0.0 or max(r, g, b) > 1.0


def test_negative_rgb_stays_finite():
    lab = rgb_to_oklab((-0.1, 0.5, 0.5))
    assert all(np.isfinite(lab))


def test_rgb_to_oklab_numpy():
    the_matrix = np.array(list(samples_rgb_oklab.keys()))
    expected = np.array(list(samples_rgb_oklab.values()))
    result = np_rgb_to_oklab(the_matrix)

    assert result.shape == the_matrix.shape
    assert np.allclose(result, expected, atol=oklab_tolerance)


def test_round_trip_numpy():
    the_matrix = np.array(samples_rgb)
    result = np_oklab_to_rgb(np_rgb_to_oklab(the_matrix))
    assert np.allclose(result, the_matrix, atol=1e-6)


def test_numpy_matches_scalar():
    the_matrix = np.array(samples_rgb).reshape(1, -1, 3)
    result = np_rgb_to_oklab(the_matrix)
    for i, rgb in enumerate(samples_rgb):
        assert np.allclose(result[0, i], rgb_to_oklab(rgb), atol=1e-12)
