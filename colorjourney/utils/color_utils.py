"""Distance, gamut and display helpers for OKLab / linear RGB colors."""

import math
import string
import numpy as np
from typing import Union
from boundednumbers.functions import clamp

from ..types.color_types import RGBColor, LabColor, ColorTriple, element_to_array

READABLE_L_MIN = 0.2
READABLE_L_MAX = 0.95


def delta_e(lab1: Union[LabColor, ColorTriple], lab2: Union[LabColor, ColorTriple]) -> float:
    """
    Perceptual distance between two OKLab colors.

    Plain Euclidean distance in OKLab; 0 only for identical colors.
    """
    dL = lab1[0] - lab2[0]
    da = lab1[1] - lab2[1]
    db = lab1[2] - lab2[2]
    return math.sqrt(dL * dL + da * da + db * db)


def np_delta_e(lab1: np.ndarray, lab2: np.ndarray) -> np.ndarray:
    """Vectorized :func:`delta_e` over the last axis (broadcasting)."""
    diff = element_to_array(lab1) - element_to_array(lab2)
    return np.sqrt(np.sum(diff * diff, axis=-1))


def clamp_rgb(rgb: Union[RGBColor, ColorTriple]) -> RGBColor:
    """Clamp every channel into ``[0, 1]``."""
    r, g, b = rgb
    return RGBColor(
        float(clamp(r, 0.0, 1.0)),
        float(clamp(g, 0.0, 1.0)),
        float(clamp(b, 0.0, 1.0)),
    )


def np_clamp_rgb(rgb: np.ndarray) -> np.ndarray:
    return np.clip(element_to_array(rgb), 0.0, 1.0)


def is_readable(lab: Union[LabColor, ColorTriple]) -> bool:
    """True when lightness avoids the very dark and very light extremes."""
    return READABLE_L_MIN <= lab[0] <= READABLE_L_MAX


def rgb_to_hex(rgb: Union[RGBColor, ColorTriple]) -> str:
    """
    Format a color as ``#rrggbb``.

    Channels are clamped and quantized to 8 bits; no transfer curve is
    applied, the hex digits encode the linear channel values directly.
    """
    r, g, b = (round(c * 255) for c in clamp_rgb(rgb))
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(value: str) -> RGBColor:
    """Parse ``#rgb`` / ``#rrggbb`` (leading ``#`` optional) into unit floats."""
    if not isinstance(value, str):
        raise TypeError(f"hex color must be a string, got {type(value).__name__}")
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6 or not all(ch in string.hexdigits for ch in digits):
        raise ValueError(f"Invalid hex color: {value!r}")
    channels = [int(digits[i:i + 2], 16) for i in (0, 2, 4)]
    return RGBColor(*(c / 255.0 for c in channels))
