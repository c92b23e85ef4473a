import math
import numpy as np
from typing import Union

from ..types.color_types import LabColor, LChColor, ColorTriple, element_to_array
from ..utils.num_utils import normalize_hue, TAU


def oklab_to_lch(lab: Union[LabColor, ColorTriple]) -> LChColor:
    """OKLab to cylindrical LCh, hue in ``[0, 2π)``."""
    L, a, b = lab
    return LChColor(L, math.hypot(a, b), normalize_hue(math.atan2(b, a)))


def lch_to_oklab(lch: Union[LChColor, ColorTriple]) -> LabColor:
    L, C, h = lch
    return LabColor(L, C * math.cos(h), C * math.sin(h))


def np_oklab_to_lch(lab: np.ndarray) -> np.ndarray:
    """Vectorized OKLab to LCh over the last axis."""
    lab = element_to_array(lab)
    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]
    h = np.mod(np.arctan2(b, a), TAU)
    # mod can round a tiny negative angle up to exactly 2π
    h = np.where(h >= TAU, 0.0, h)
    return np.stack([L, np.hypot(a, b), h], axis=-1)


def np_lch_to_oklab(lch: np.ndarray) -> np.ndarray:
    lch = element_to_array(lch)
    L = lch[..., 0]
    C = lch[..., 1]
    h = lch[..., 2]
    return np.stack([L, C * np.cos(h), C * np.sin(h)], axis=-1)
