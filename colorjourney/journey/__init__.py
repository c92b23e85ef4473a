"""
Journey engine: anchors in, perceptually paced color sequences out.

Pipeline per sample: waypoints -> sampler (loop mode, easing, shortest-arc
hue) -> dynamics (biases, vibrancy) -> variation (seeded) -> RGB. Discrete
palettes add contrast enforcement between neighbours.
"""

from .config import (
    JourneyConfig,
    InvalidConfigError,
    init_default_config,
    validate_config,
    DEFAULT_SEED,
    MAX_ANCHORS,
)
from .waypoints import Waypoint, build_waypoints
from .sampler import apply_loop_mode, interpolate_waypoints, hue_lerp_shortest
from .dynamics import apply_dynamics
from .variation import apply_variation, mix_next, position_seed
from .contrast import (
    enforce_minimum,
    enforce_contrast_single_step,
    apply_minimum_contrast,
)
from .palette import DiscreteStream, generate_palette, palette_position, index_position
from .journey import (
    Journey,
    create_journey,
    destroy_journey,
    sample,
    discrete,
    discrete_at,
    discrete_range,
    iter_discrete,
)

__all__ = [
    "JourneyConfig",
    "InvalidConfigError",
    "init_default_config",
    "validate_config",
    "DEFAULT_SEED",
    "MAX_ANCHORS",
    "Waypoint",
    "build_waypoints",
    "apply_loop_mode",
    "interpolate_waypoints",
    "hue_lerp_shortest",
    "apply_dynamics",
    "apply_variation",
    "mix_next",
    "position_seed",
    "enforce_minimum",
    "enforce_contrast_single_step",
    "apply_minimum_contrast",
    "DiscreteStream",
    "generate_palette",
    "palette_position",
    "index_position",
    "Journey",
    "create_journey",
    "destroy_journey",
    "sample",
    "discrete",
    "discrete_at",
    "discrete_range",
    "iter_discrete",
]
