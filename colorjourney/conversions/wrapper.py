import numpy as np
from typing import Callable, Union

from .oklab import np_rgb_to_oklab, np_oklab_to_rgb
from .lch import np_oklab_to_lch, np_lch_to_oklab
from ..types.color_types import (
    ColorSpace,
    ColorTriple,
    element_to_array,
    resolve_space,
    space_to_class,
)

# Direct hops; anything else is routed through OKLab
CONVERT_NUMPY_DIRECT: dict[tuple[ColorSpace, ColorSpace], Callable[[np.ndarray], np.ndarray]] = {
    (ColorSpace.RGB, ColorSpace.OKLAB): np_rgb_to_oklab,
    (ColorSpace.OKLAB, ColorSpace.RGB): np_oklab_to_rgb,
    (ColorSpace.OKLAB, ColorSpace.LCH): np_oklab_to_lch,
    (ColorSpace.LCH, ColorSpace.OKLAB): np_lch_to_oklab,
}


def _convert_core(color: np.ndarray, fs: ColorSpace, ts: ColorSpace) -> np.ndarray:
    if color.shape[-1] != 3:
        raise ValueError(f"{fs.value} expects last dimension to be 3, got shape {color.shape}")
    if fs == ts:
        return color
    key = (fs, ts)
    if key in CONVERT_NUMPY_DIRECT:
        return CONVERT_NUMPY_DIRECT[key](color)
    lab = CONVERT_NUMPY_DIRECT[(fs, ColorSpace.OKLAB)](color)
    return CONVERT_NUMPY_DIRECT[(ColorSpace.OKLAB, ts)](lab)


def convert(
    color: ColorTriple,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> ColorTriple:
    """
    Convert a single color between ``"rgb"``, ``"oklab"`` and ``"lch"``.

    Returns the NamedTuple type of the target space. RGB output is not
    clamped.
    """
    fs, ts = resolve_space(from_space), resolve_space(to_space)
    result = _convert_core(element_to_array(color), fs, ts)
    return space_to_class[ts](*result.tolist())


def np_convert(
    color: np.ndarray,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> np.ndarray:
    """Vectorized :func:`convert` over arrays of shape (..., 3)."""
    return _convert_core(
        np.asarray(color, dtype=float),
        resolve_space(from_space),
        resolve_space(to_space),
    )
