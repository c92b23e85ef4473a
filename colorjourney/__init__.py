"""
ColorJourney - Perceptual Color Journeys
========================================

Generate color sequences that travel through OKLab from one or more anchor
colors. A journey can be sampled continuously for gradients and animation,
or discretely for palettes whose neighbours stay perceptually distinct.

Key Features
------------
- Linear RGB ↔ OKLab ↔ LCh conversions (scalar and numpy)
- Designed waypoints: a full hue revolution for one anchor, anchor-to-anchor
  paths for 2-8 anchors
- Open, closed and ping-pong loop modes with eased, shortest-arc hue blending
- Lightness/chroma/temperature biases and a mid-journey vibrancy boost
- Deterministic seeded micro-variation
- Contrast-enforced discrete palettes with index/range/stream access
- Immutable journeys, safe to share between threads

Quick Start
-----------
>>> from colorjourney import init_default_config, create_journey, LoopMode
>>>
>>> config = init_default_config([(0.30, 0.50, 0.80)])
>>> config.loop_mode = LoopMode.CLOSED
>>> journey = create_journey(config)
>>>
>>> journey.sample(0.25)           # continuous
>>> palette = journey.discrete(8)  # evenly spread palette
>>> journey[12]                    # incremental index stream

Modules
-------
- conversions: color space conversions and ΔE
- journey: configuration, waypoint design, sampling and palettes
- types: color value types and configuration enums
- utils: easing, hue wrapping and color helpers
"""

from .types import (
    RGBColor,
    LabColor,
    LChColor,
    ColorSpace,
    LightnessBias,
    ChromaBias,
    ContrastLevel,
    TemperatureBias,
    LoopMode,
    VariationStrength,
    VariationDimension,
)
from .conversions import (
    rgb_to_oklab,
    oklab_to_rgb,
    oklab_to_lch,
    lch_to_oklab,
    rgb_to_lch,
    lch_to_rgb,
    np_rgb_to_oklab,
    np_oklab_to_rgb,
    np_oklab_to_lch,
    np_lch_to_oklab,
    delta_e,
    np_delta_e,
    clamp_rgb,
    is_readable,
    convert,
    np_convert,
)
from .utils import rgb_to_hex, hex_to_rgb
from .journey import (
    Journey,
    JourneyConfig,
    InvalidConfigError,
    Waypoint,
    DEFAULT_SEED,
    init_default_config,
    create_journey,
    destroy_journey,
    sample,
    discrete,
    discrete_at,
    discrete_range,
    iter_discrete,
    enforce_minimum,
)

__version__ = "1.0.0"

__all__ = [
    # color types
    "RGBColor",
    "LabColor",
    "LChColor",
    "ColorSpace",

    # configuration enums
    "LightnessBias",
    "ChromaBias",
    "ContrastLevel",
    "TemperatureBias",
    "LoopMode",
    "VariationStrength",
    "VariationDimension",

    # conversions
    "rgb_to_oklab",
    "oklab_to_rgb",
    "oklab_to_lch",
    "lch_to_oklab",
    "rgb_to_lch",
    "lch_to_rgb",
    "np_rgb_to_oklab",
    "np_oklab_to_rgb",
    "np_oklab_to_lch",
    "np_lch_to_oklab",
    "delta_e",
    "np_delta_e",
    "clamp_rgb",
    "is_readable",
    "convert",
    "np_convert",
    "rgb_to_hex",
    "hex_to_rgb",

    # journeys
    "Journey",
    "JourneyConfig",
    "InvalidConfigError",
    "Waypoint",
    "DEFAULT_SEED",
    "init_default_config",
    "create_journey",
    "destroy_journey",
    "sample",
    "discrete",
    "discrete_at",
    "discrete_range",
    "iter_discrete",
    "enforce_minimum",

    # Version
    "__version__",
]
