"""
Seeded micro-variation.

Every sample derives its own generator state from the journey seed and the
sample position, so variation is reproducible and independent of call
order. The mixer below is part of the public contract: changing a single
shift changes every seeded palette.
"""

import math
from typing import Iterator, Tuple

from boundednumbers.functions import clamp

from ..types.color_types import LChColor
from ..types.config_types import VariationDimension, VariationStrength, variation_magnitudes
from ..utils.num_utils import normalize_hue
from .config import JourneyConfig
from .dynamics import MAX_CHROMA

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF
DRAW_BITS = 0xFFFFFF
DRAW_SCALE = 16777216.0
POSITION_SCALE = 1_000_000


def mix_next(state: int) -> Tuple[int, int]:
    """
    Advance the 64-bit mixer one step.

    The state is split into two 32-bit halves; all arithmetic wraps at
    64 bits.

    Returns:
        ``(output, new_state)``
    """
    s0 = state & MASK32
    s1 = state >> 32
    result = (s0 + s1) & MASK64

    s1 ^= s0
    s0 = (((s0 << 24) | (s0 >> 8)) ^ s1 ^ (s1 << 16)) & MASK64
    s1 = ((s1 << 37) | (s1 >> 27)) & MASK64

    return result, ((s1 << 32) | s0) & MASK64


def draw_unit(state: int) -> Tuple[float, int]:
    """Map the next mixer output to ``[0, 1)`` using its low 24 bits."""
    result, state = mix_next(state)
    return (result & DRAW_BITS) / DRAW_SCALE, state


def iter_draws(state: int) -> Iterator[float]:
    while True:
        value, state = draw_unit(state)
        yield value


def position_seed(seed: int, t: float) -> int:
    """Seed for the sample at ``t``: ``seed XOR floor(t * 1e6)`` in 64 bits."""
    return (seed ^ (math.floor(t * POSITION_SCALE) & MASK64)) & MASK64


def variation_magnitude(config: JourneyConfig) -> float:
    if config.variation_strength == VariationStrength.CUSTOM:
        return config.variation_custom_magnitude
    return variation_magnitudes.get(
        config.variation_strength, variation_magnitudes[VariationStrength.SUBTLE]
    )


def apply_variation(color: LChColor, t: float, config: JourneyConfig, seed: int) -> LChColor:
    """
    Perturb hue, lightness and/or chroma by a small seeded amount.

    Draws are consumed in hue, lightness, chroma order and only for the
    dimensions enabled in ``config.variation_dimensions``.
    """
    if not config.variation_enabled:
        return color

    dims = VariationDimension(config.variation_dimensions)
    magnitude = variation_magnitude(config)
    draws = iter_draws(position_seed(seed, t))
    L, C, h = color

    if dims & VariationDimension.HUE:
        h = normalize_hue(h + (next(draws) - 0.5) * magnitude * math.pi)
    if dims & VariationDimension.LIGHTNESS:
        L = float(clamp(L + (next(draws) - 0.5) * magnitude, 0.0, 1.0))
    if dims & VariationDimension.CHROMA:
        C = float(clamp(C + (next(draws) - 0.5) * magnitude * 0.5, 0.0, MAX_CHROMA))

    return LChColor(L, C, h)
