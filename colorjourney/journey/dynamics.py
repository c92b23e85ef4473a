from boundednumbers.functions import clamp

from ..types.color_types import LChColor
from ..types.config_types import LightnessBias, ChromaBias, chroma_multipliers
from ..utils.num_utils import lerp
from .config import JourneyConfig

MAX_CHROMA = 0.4

# Triangular mid-journey boost: 1 + vibrancy * GAIN * max(0, 1 - |t - 0.5| / WIDTH)
VIBRANCY_GAIN = 0.6
VIBRANCY_WIDTH = 0.35


def apply_lightness_bias(L: float, bias: LightnessBias, custom_weight: float = 0.0) -> float:
    if bias == LightnessBias.LIGHTER:
        return lerp(L, 1.0, 0.2)
    if bias == LightnessBias.DARKER:
        return lerp(L, 0.0, 0.2)
    if bias == LightnessBias.CUSTOM:
        return L + custom_weight * 0.2
    return L


def apply_chroma_bias(C: float, bias: ChromaBias, custom_multiplier: float = 1.0) -> float:
    if bias == ChromaBias.CUSTOM:
        return C * custom_multiplier
    return C * chroma_multipliers.get(bias, 1.0)


def vibrancy_boost(t: float, vibrancy: float) -> float:
    """Chroma multiplier peaking at ``t = 0.5`` and equal to 1 outside the window."""
    return 1.0 + vibrancy * VIBRANCY_GAIN * max(0.0, 1.0 - abs(t - 0.5) / VIBRANCY_WIDTH)


def apply_dynamics(color: LChColor, t: float, config: JourneyConfig) -> LChColor:
    """
    Apply lightness/chroma bias and the mid-journey vibrancy boost.

    ``t`` is the loop-mapped position in [0, 1]. The result is clamped to
    L in [0, 1] and C in [0, 0.4]; hue is left untouched.
    """
    L = apply_lightness_bias(color.L, config.lightness_bias, config.lightness_custom_weight)
    C = apply_chroma_bias(color.C, config.chroma_bias, config.chroma_custom_multiplier)
    C *= vibrancy_boost(t, config.mid_journey_vibrancy)
    return LChColor(float(clamp(L, 0.0, 1.0)), float(clamp(C, 0.0, MAX_CHROMA)), color.h)
