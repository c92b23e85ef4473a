import numpy as np
from typing import Union

from ..types.color_types import RGBColor, LabColor, ColorTriple, element_to_array

# Linear RGB -> LMS cone response (Ottosson, 2020)
RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS' (cube-rooted) -> OKLab opponent axes
LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

LMS_TO_RGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def np_rgb_to_oklab(rgb: np.ndarray) -> np.ndarray:
    """
    Vectorized linear RGB to OKLab.

    Uses ``np.cbrt`` (full double precision, sign preserving) for the
    perceptual compression step, so negative LMS responses from
    out-of-gamut input stay finite.

    Args:
        rgb: Array of shape (..., 3)

    Returns:
        Array of shape (..., 3) with L, a, b channels
    """
    rgb = element_to_array(rgb)
    lms = rgb @ RGB_TO_LMS.T
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def np_oklab_to_rgb(lab: np.ndarray) -> np.ndarray:
    """
    Vectorized OKLab to linear RGB.

    Exact algebraic inverse of :func:`np_rgb_to_oklab`. The result is not
    clamped and may fall outside ``[0, 1]``.
    """
    lab = element_to_array(lab)
    lms_ = lab @ OKLAB_TO_LMS.T
    return (lms_ ** 3) @ LMS_TO_RGB.T


def rgb_to_oklab(rgb: Union[RGBColor, ColorTriple]) -> LabColor:
    """Convert a single linear RGB color to OKLab."""
    L, a, b = np_rgb_to_oklab(rgb).tolist()
    return LabColor(L, a, b)


def oklab_to_rgb(lab: Union[LabColor, ColorTriple]) -> RGBColor:
    """Convert a single OKLab color to (possibly out-of-gamut) linear RGB."""
    r, g, b = np_oklab_to_rgb(lab).tolist()
    return RGBColor(r, g, b)
