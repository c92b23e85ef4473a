"""
ColorJourney Color Space Conversions
====================================

Conversions between linear RGB, OKLab and its cylindrical form OKLCh, with
both scalar and vectorized (numpy) implementations.

Features
--------
- Bidirectional conversions: linear RGB ↔ OKLab ↔ LCh
- Scalar functions returning ``RGBColor`` / ``LabColor`` / ``LChColor``
- Vectorized numpy functions over arrays of shape (..., 3)
- Perceptual distance (ΔE), gamut clamping and readability checks

Conversion Functions
-------------------

RGB ↔ OKLab:
    rgb_to_oklab(rgb) / np_rgb_to_oklab(arr)
        Linear RGB → LMS → cube root → opponent axes
    oklab_to_rgb(lab) / np_oklab_to_rgb(arr)
        Exact inverse; may leave the [0, 1] gamut

OKLab ↔ LCh:
    oklab_to_lch(lab) / np_oklab_to_lch(arr)
        Chroma = hypot(a, b), hue = atan2(b, a) in [0, 2π)
    lch_to_oklab(lch) / np_lch_to_oklab(arr)

Utilities:
    delta_e(lab1, lab2), np_delta_e(arr1, arr2)
    clamp_rgb(rgb), np_clamp_rgb(arr)
    is_readable(lab)

High-Level API
-------------
    convert(color, from_space, to_space)
    np_convert(color, from_space, to_space)

Precision
---------
The cube root is computed with ``numpy.cbrt`` at full double precision.
Independent implementations using a fast approximation differ at the
1e-3 level, so comparisons should use tolerances.

Examples
--------
>>> from colorjourney.conversions import rgb_to_oklab, oklab_to_rgb
>>> lab = rgb_to_oklab((1.0, 0.5, 0.0))
>>> rgb = oklab_to_rgb(lab)
"""

# RGB ↔ OKLab
from .oklab import (
    rgb_to_oklab,
    oklab_to_rgb,
    np_rgb_to_oklab,
    np_oklab_to_rgb,
)

# OKLab ↔ LCh
from .lch import (
    oklab_to_lch,
    lch_to_oklab,
    np_oklab_to_lch,
    np_lch_to_oklab,
)

# Distance and gamut utilities
from ..utils.color_utils import (
    delta_e,
    np_delta_e,
    clamp_rgb,
    np_clamp_rgb,
    is_readable,
)

# High-level API
from .wrapper import convert, np_convert

from ..types.color_types import ColorSpace


def rgb_to_lch(rgb):
    """Linear RGB straight to LCh."""
    return oklab_to_lch(rgb_to_oklab(rgb))


def lch_to_rgb(lch):
    """LCh straight to (unclamped) linear RGB."""
    return oklab_to_rgb(lch_to_oklab(lch))


__all__ = [
    'rgb_to_oklab',
    'oklab_to_rgb',
    'np_rgb_to_oklab',
    'np_oklab_to_rgb',

    'oklab_to_lch',
    'lch_to_oklab',
    'np_oklab_to_lch',
    'np_lch_to_oklab',
    'rgb_to_lch',
    'lch_to_rgb',

    'delta_e',
    'np_delta_e',
    'clamp_rgb',
    'np_clamp_rgb',
    'is_readable',

    'convert',
    'np_convert',
    'ColorSpace',
]
