from .num_utils import TAU, lerp, smoothstep, normalize_hue, shortest_hue_delta
from .color_utils import (
    delta_e,
    np_delta_e,
    clamp_rgb,
    np_clamp_rgb,
    is_readable,
    rgb_to_hex,
    hex_to_rgb,
)

__all__ = [
    "TAU",
    "lerp",
    "smoothstep",
    "normalize_hue",
    "shortest_hue_delta",
    "delta_e",
    "np_delta_e",
    "clamp_rgb",
    "np_clamp_rgb",
    "is_readable",
    "rgb_to_hex",
    "hex_to_rgb",
]
