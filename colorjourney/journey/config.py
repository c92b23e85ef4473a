from __future__ import annotations
import copy
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..types.color_types import RGBColor, ColorTriple
from ..types.config_types import (
    LightnessBias,
    ChromaBias,
    ContrastLevel,
    TemperatureBias,
    LoopMode,
    VariationStrength,
    VariationDimension,
)

MAX_ANCHORS = 8
DEFAULT_SEED = 0x123456789ABCDEF0
UINT64_MAX = (1 << 64) - 1


class InvalidConfigError(ValueError):
    """Raised when a journey configuration cannot be turned into a journey."""


@dataclass
class JourneyConfig:
    """
    Everything that shapes a color journey.

    Build one with :func:`init_default_config` (or the constructor), tweak
    the fields, then hand it to :func:`create_journey`. The journey keeps its
    own copy, so later edits to this object do not affect it.

    Custom values only apply when the matching enum is ``CUSTOM``:
    ``lightness_custom_weight`` in [-1, 1], ``chroma_custom_multiplier`` in
    [0.5, 2], ``contrast_custom_threshold`` (minimum OKLab ΔE) >= 0 and
    ``variation_custom_magnitude`` >= 0.

    A ``variation_seed`` of 0 selects ``DEFAULT_SEED``.
    """
    anchors: List[ColorTriple] = field(default_factory=list)
    lightness_bias: LightnessBias = LightnessBias.NEUTRAL
    lightness_custom_weight: float = 0.0
    chroma_bias: ChromaBias = ChromaBias.NEUTRAL
    chroma_custom_multiplier: float = 1.0
    contrast_level: ContrastLevel = ContrastLevel.MEDIUM
    contrast_custom_threshold: float = 0.1
    mid_journey_vibrancy: float = 0.3
    temperature_bias: TemperatureBias = TemperatureBias.NEUTRAL
    loop_mode: LoopMode = LoopMode.OPEN
    variation_enabled: bool = False
    variation_dimensions: VariationDimension = VariationDimension.ALL
    variation_strength: VariationStrength = VariationStrength.SUBTLE
    variation_custom_magnitude: float = 0.02
    variation_seed: int = DEFAULT_SEED

    @property
    def anchor_count(self) -> int:
        return len(self.anchors)

    @property
    def resolved_seed(self) -> int:
        return self.variation_seed if self.variation_seed != 0 else DEFAULT_SEED

    def copy(self) -> JourneyConfig:
        return copy.deepcopy(self)


def init_default_config(anchors: Optional[Sequence[ColorTriple]] = None) -> JourneyConfig:
    """
    Return a configuration with the engine defaults.

    No anchors (so it is not yet usable), neutral biases, MEDIUM contrast,
    OPEN loop, variation disabled, vibrancy 0.3 and the fixed default seed.
    """
    return JourneyConfig(anchors=list(anchors) if anchors is not None else [])


def _coerce_anchor(index: int, anchor: ColorTriple) -> RGBColor:
    try:
        r, g, b = anchor
        return RGBColor(float(r), float(g), float(b))
    except (TypeError, ValueError):
        raise InvalidConfigError(
            f"anchor {index} must be an (r, g, b) triple of numbers, got {anchor!r}"
        ) from None


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise InvalidConfigError(f"{name} must be in [{low}, {high}], got {value}")


def validate_config(config: JourneyConfig) -> JourneyConfig:
    """
    Validate ``config`` and return a normalized copy of it.

    The copy holds anchors as ``RGBColor`` values and enum fields as enum
    members (so ``"ping-pong"`` becomes ``LoopMode.PINGPONG``).

    Raises:
        InvalidConfigError: anchor count outside [1, 8], malformed anchors,
            unknown enum values or out-of-range numeric fields.
    """
    if not isinstance(config, JourneyConfig):
        raise TypeError(f"expected JourneyConfig, got {type(config).__name__}")

    count = config.anchor_count
    if not 1 <= count <= MAX_ANCHORS:
        raise InvalidConfigError(
            f"anchor_count must be between 1 and {MAX_ANCHORS}, got {count}"
        )

    normalized = config.copy()
    normalized.anchors = [_coerce_anchor(i, a) for i, a in enumerate(config.anchors)]

    enum_fields = (
        ("lightness_bias", LightnessBias),
        ("chroma_bias", ChromaBias),
        ("contrast_level", ContrastLevel),
        ("temperature_bias", TemperatureBias),
        ("loop_mode", LoopMode),
        ("variation_strength", VariationStrength),
    )
    for name, enum_cls in enum_fields:
        value = getattr(config, name)
        try:
            setattr(normalized, name, enum_cls(value))
        except ValueError:
            raise InvalidConfigError(f"invalid {name}: {value!r}") from None

    try:
        dims = int(config.variation_dimensions)
    except (TypeError, ValueError):
        raise InvalidConfigError(f"invalid variation_dimensions: {config.variation_dimensions!r}") from None
    if not 0 <= dims <= int(VariationDimension.ALL):
        raise InvalidConfigError(f"invalid variation_dimensions: {config.variation_dimensions!r}")
    normalized.variation_dimensions = VariationDimension(dims)

    _check_range("mid_journey_vibrancy", normalized.mid_journey_vibrancy, 0.0, 1.0)
    if normalized.lightness_bias == LightnessBias.CUSTOM:
        _check_range("lightness_custom_weight", normalized.lightness_custom_weight, -1.0, 1.0)
    if normalized.chroma_bias == ChromaBias.CUSTOM:
        _check_range("chroma_custom_multiplier", normalized.chroma_custom_multiplier, 0.5, 2.0)
    if normalized.contrast_level == ContrastLevel.CUSTOM and normalized.contrast_custom_threshold < 0:
        raise InvalidConfigError(
            f"contrast_custom_threshold must be non-negative, got {normalized.contrast_custom_threshold}"
        )
    if normalized.variation_strength == VariationStrength.CUSTOM and normalized.variation_custom_magnitude < 0:
        raise InvalidConfigError(
            f"variation_custom_magnitude must be non-negative, got {normalized.variation_custom_magnitude}"
        )
    seed = normalized.variation_seed
    if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= UINT64_MAX:
        raise InvalidConfigError(
            f"variation_seed must be an unsigned 64-bit integer, got {seed!r}"
        )
    return normalized
