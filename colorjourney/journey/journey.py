from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Tuple, Union
import numpy as np

from ..types.color_types import RGBColor, LChColor
from ..conversions import rgb_to_lch, lch_to_rgb
from ..utils.color_utils import clamp_rgb
from .config import JourneyConfig, InvalidConfigError, validate_config, init_default_config
from .waypoints import Waypoint, build_waypoints
from .sampler import apply_loop_mode, interpolate_waypoints
from .dynamics import apply_dynamics
from .variation import apply_variation
from .palette import DiscreteStream, contrast_threshold, generate_palette

BLACK = RGBColor(0.0, 0.0, 0.0)


class Journey:
    """
    An immutable color path built from a :class:`JourneyConfig`.

    Construction converts the anchors to LCh and designs the waypoints
    once; every sampling call afterwards is read-only, so two journeys
    built from equal configs return identical colors for every ``t`` and
    index regardless of call order.

    >>> config = init_default_config([(0.3, 0.5, 0.8)])
    >>> journey = Journey(config)
    >>> journey.sample(0.25)
    >>> journey.discrete(5)
    >>> journey[3], journey[2:6]
    """

    __slots__ = ("_config", "_anchor_lch", "_waypoints", "_seed", "_stream", "_destroyed", "_is_frozen")

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, config: JourneyConfig) -> None:
        self._config = validate_config(config)
        self._anchor_lch: Tuple[LChColor, ...] = tuple(rgb_to_lch(a) for a in self._config.anchors)
        self._waypoints: Tuple[Waypoint, ...] = build_waypoints(
            self._anchor_lch, self._config.temperature_bias
        )
        self._seed = self._config.resolved_seed
        self._stream = DiscreteStream(self.sample, contrast_threshold(self._config))
        self._destroyed = False

        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def config(self) -> JourneyConfig:
        """A copy of the configuration this journey was built from."""
        return self._config.copy()

    @property
    def anchor_lch(self) -> Tuple[LChColor, ...]:
        return self._anchor_lch

    @property
    def waypoints(self) -> Tuple[Waypoint, ...]:
        return self._waypoints

    @property
    def waypoint_count(self) -> int:
        return len(self._waypoints)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def min_delta_e(self) -> float:
        return contrast_threshold(self._config)

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    # ------------------ LIFETIME ------------------
    def destroy(self) -> None:
        """Release cached palette state. Calling it again does nothing."""
        if self._destroyed:
            return
        self._stream.clear()
        super().__setattr__('_destroyed', True)

    def __enter__(self) -> Journey:
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()

    def _check_alive(self) -> None:
        if self._destroyed:
            raise ValueError("journey has been destroyed")

    # ------------------ CONTINUOUS ------------------
    def sample_lch(self, t: float) -> LChColor:
        """
        Waypoint interpolation, dynamics and variation at ``t``, in LCh.

        Every stage sees the loop-mapped position, so wrapped and mirrored
        parameters produce the same color as their image in ``[0, 1]``.
        """
        u = apply_loop_mode(t, self._config.loop_mode)
        lch = interpolate_waypoints(self._waypoints, u, self._config.loop_mode)
        lch = apply_dynamics(lch, u, self._config)
        return apply_variation(lch, u, self._config, self._seed)

    def sample(self, t: float) -> RGBColor:
        """Color at journey parameter ``t``, clamped to the RGB gamut."""
        self._check_alive()
        return clamp_rgb(lch_to_rgb(self.sample_lch(float(t))))

    def sample_many(self, ts: Iterable[float]) -> np.ndarray:
        """Sample every parameter in ``ts``; returns an array of shape (n, 3)."""
        ts = np.asarray(list(ts) if not isinstance(ts, np.ndarray) else ts, dtype=np.float64).ravel()
        out = np.empty((ts.shape[0], 3), dtype=np.float64)
        for i, t in enumerate(ts):
            out[i] = self.sample(float(t))
        return out

    def gradient(self, stops: int = 10) -> np.ndarray:
        """Evenly spaced gradient stops from ``t = 0`` to ``t = 1``."""
        if stops < 2:
            raise ValueError(f"gradient needs at least 2 stops, got {stops}")
        return self.sample_many(np.linspace(0.0, 1.0, stops))

    # ------------------ DISCRETE ------------------
    def discrete(self, count: int) -> List[RGBColor]:
        """``count`` mutually distinguishable colors spread over the journey."""
        self._check_alive()
        return generate_palette(self.sample, count, self._config.loop_mode, self.min_delta_e)

    def discrete_at(self, index: int) -> RGBColor:
        """Entry ``index`` of the index stream; black for negative indices."""
        if self._destroyed or index < 0:
            return BLACK
        return self._stream.at(index)

    def discrete_range(self, start: int, count: int) -> List[RGBColor]:
        """Entries ``start .. start + count - 1``; empty when the request is invalid."""
        if self._destroyed or start < 0 or count <= 0:
            return []
        return self._stream.range(start, count)

    def iter_discrete(self) -> Iterator[RGBColor]:
        """Lazy, unbounded iteration over the index stream."""
        self._check_alive()
        return iter(self._stream)

    def __getitem__(self, key: Union[int, slice]) -> Union[RGBColor, List[RGBColor]]:
        if isinstance(key, slice):
            if key.step not in (None, 1):
                raise ValueError("journey slices do not support a step")
            start = 0 if key.start is None else key.start
            if key.stop is None:
                raise ValueError("journey slices need an explicit stop")
            if start < 0 or key.stop < 0:
                raise IndexError("journey slices must be non-negative")
            return self.discrete_range(start, key.stop - start)
        if isinstance(key, (int, np.integer)):
            if key < 0:
                raise IndexError("journey index must be non-negative")
            return self.discrete_at(int(key))
        raise TypeError(f"journey indices must be integers or slices, not {type(key).__name__}")

    def __repr__(self) -> str:
        return (
            f"Journey(anchors={self._config.anchor_count}, "
            f"waypoints={self.waypoint_count}, loop_mode={self._config.loop_mode.value})"
        )


# ------------------ FUNCTIONAL API ------------------

def create_journey(config: JourneyConfig) -> Journey:
    """
    Build a journey from ``config``.

    Raises:
        InvalidConfigError: anchor count outside [1, 8] or invalid fields
    """
    return Journey(config)


def destroy_journey(journey: Optional[Journey]) -> None:
    """Release a journey; ``None`` and already-destroyed journeys are ignored."""
    if journey is None:
        return
    journey.destroy()


def sample(journey: Journey, t: float) -> RGBColor:
    return journey.sample(t)


def discrete(journey: Journey, count: int) -> List[RGBColor]:
    return journey.discrete(count)


def discrete_at(journey: Optional[Journey], index: int) -> RGBColor:
    """Index-stream entry; black for a missing journey or negative index."""
    if journey is None:
        return BLACK
    return journey.discrete_at(index)


def discrete_range(journey: Optional[Journey], start: int, count: int) -> List[RGBColor]:
    """Consecutive index-stream entries; empty for a missing journey or invalid range."""
    if journey is None:
        return []
    return journey.discrete_range(start, count)


def iter_discrete(journey: Journey) -> Iterator[RGBColor]:
    return journey.iter_discrete()


__all__ = [
    "Journey",
    "JourneyConfig",
    "InvalidConfigError",
    "init_default_config",
    "create_journey",
    "destroy_journey",
    "sample",
    "discrete",
    "discrete_at",
    "discrete_range",
    "iter_discrete",
]
