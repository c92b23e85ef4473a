from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Tuple, Union
import numpy as np
from numpy import ndarray


class RGBColor(NamedTuple):
    """Linear RGB, nominally in ``[0, 1]`` per channel."""
    r: float
    g: float
    b: float


class LabColor(NamedTuple):
    """OKLab: perceptual lightness ``L`` and opponent axes ``a``/``b``."""
    L: float
    a: float
    b: float


class LChColor(NamedTuple):
    """Cylindrical OKLab: lightness, chroma and hue angle in radians."""
    L: float
    C: float
    h: float


class ColorSpace(str, Enum):
    RGB = "rgb"
    OKLAB = "oklab"
    LCH = "lch"


ColorTriple = Union[RGBColor, LabColor, LChColor, Tuple[float, float, float]]

space_to_class = {
    ColorSpace.RGB: RGBColor,
    ColorSpace.OKLAB: LabColor,
    ColorSpace.LCH: LChColor,
}


def element_to_array(element: Union[ColorTriple, ndarray]) -> np.ndarray:
    """
    Convert a color triple to a float64 numpy array.

    Args:
        element: Tuple, NamedTuple or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(np.float64, copy=False)
    return np.asarray(element, dtype=np.float64)


def resolve_space(color_space: Union[ColorSpace, str]) -> ColorSpace:
    """Resolve a color space name (case-insensitive) to a ``ColorSpace``."""
    if isinstance(color_space, ColorSpace):
        return color_space
    try:
        return ColorSpace(color_space.lower())
    except (ValueError, AttributeError):
        raise ValueError(f"Unknown space: {color_space}") from None
