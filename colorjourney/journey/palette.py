"""
Discrete palettes built on top of continuous sampling.

Two access patterns exist:

- ``generate_palette`` spreads ``count`` positions over the journey
  according to the loop mode, so the whole palette covers the path.
- The *index stream* assigns index ``i`` the fixed position
  ``(i * 0.05) mod 1`` and never needs to know a final count. ``at``,
  ``range`` and iteration all read the same stream, each entry
  contrast-enforced against the entry before it.
"""

import math
import threading
from typing import Callable, Iterator, List, Optional

from boundednumbers.functions import clamp

from ..types.color_types import RGBColor
from ..types.config_types import LoopMode, ContrastLevel, contrast_thresholds
from ..conversions import rgb_to_lch, lch_to_rgb
from ..utils.color_utils import clamp_rgb
from .config import JourneyConfig
from .contrast import apply_minimum_contrast
from .dynamics import MAX_CHROMA

SampleFn = Callable[[float], RGBColor]

INDEX_SPACING = 0.05
PULSE_MIN_COUNT = 20
PULSE_DEPTH = 0.1
PULSE_PERIOD = 10
CHECKPOINT_INTERVAL = 64


def contrast_threshold(config: JourneyConfig) -> float:
    """Minimum ΔE between neighbouring palette entries."""
    if config.contrast_level == ContrastLevel.CUSTOM:
        return config.contrast_custom_threshold
    return contrast_thresholds.get(config.contrast_level, contrast_thresholds[ContrastLevel.MEDIUM])


def palette_position(index: int, count: int, loop_mode: LoopMode) -> float:
    """
    Journey position of entry ``index`` in a palette of ``count`` colors.

    CLOSED divides by ``count`` (the end wraps onto the start), OPEN by
    ``count - 1`` (both endpoints included) and PINGPONG runs out and back.
    A single color sits at the midpoint in every mode.
    """
    if index < 0 or count <= 0:
        return 0.0
    if count == 1:
        return 0.5
    if loop_mode == LoopMode.CLOSED:
        return index / count
    t = index / (count - 1)
    if loop_mode == LoopMode.PINGPONG:
        t *= 2.0
        if t > 1.0:
            t = 2.0 - t
    return t


def index_position(index: int) -> float:
    if index < 0:
        return 0.0
    return math.fmod(index * INDEX_SPACING, 1.0)


def chroma_pulse(rgb: RGBColor, index: int) -> RGBColor:
    """Scale chroma by ``1 + 0.1 cos(i π / 5)`` for a slow saturation rhythm."""
    lch = rgb_to_lch(rgb)
    factor = 1.0 + PULSE_DEPTH * math.cos(index * math.pi / (PULSE_PERIOD / 2))
    C = float(clamp(lch.C * factor, 0.0, MAX_CHROMA))
    return clamp_rgb(lch_to_rgb(lch._replace(C=C)))


def generate_palette(
    sample: SampleFn,
    count: int,
    loop_mode: LoopMode,
    min_delta_e: float,
) -> List[RGBColor]:
    """
    Sample ``count`` loop-aware positions, enforcing contrast along the way.

    Palettes longer than 20 colors additionally get a periodic chroma
    pulse, applied after contrast enforcement.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    colors: List[RGBColor] = []
    previous = None
    for i in range(count):
        color = sample(palette_position(i, count, loop_mode))
        color = apply_minimum_contrast(color, previous, min_delta_e)
        colors.append(color)
        previous = color

    if count > PULSE_MIN_COUNT:
        colors = [chroma_pulse(color, i) for i, color in enumerate(colors)]
    return colors


class DiscreteStream:
    """
    Checkpointed index stream of a journey.

    Entry ``i`` depends on every entry before it. Instead of keeping the
    whole prefix, the stream remembers the entry just before every
    ``CHECKPOINT_INTERVAL``-th index and replays forward from the nearest
    resume point, so memory grows with ``index / CHECKPOINT_INTERVAL``.
    Results are identical to replaying the stream from index 0.
    """

    __slots__ = ("_sample", "_min_delta_e", "_resume", "_lock")

    def __init__(self, sample: SampleFn, min_delta_e: float):
        self._sample = sample
        self._min_delta_e = min_delta_e
        # _resume[k] is entry k * CHECKPOINT_INTERVAL - 1 (None before index 0)
        self._resume: List[Optional[RGBColor]] = [None]
        self._lock = threading.Lock()

    @property
    def checkpoint_count(self) -> int:
        """Number of resume points held, the start of the stream included."""
        return len(self._resume)

    def _next(self, index: int, previous: Optional[RGBColor]) -> RGBColor:
        color = self._sample(index_position(index))
        return apply_minimum_contrast(color, previous, self._min_delta_e)

    def _entries(self, start: int, stop: int) -> List[RGBColor]:
        with self._lock:
            resume = self._resume
            k = min(start // CHECKPOINT_INTERVAL, len(resume) - 1)
            index, previous = k * CHECKPOINT_INTERVAL, resume[k]
            out: List[RGBColor] = []
            while index < stop:
                previous = self._next(index, previous)
                index += 1
                if index % CHECKPOINT_INTERVAL == 0 and index // CHECKPOINT_INTERVAL == len(resume):
                    resume.append(previous)
                if index > start:
                    out.append(previous)
            return out

    def at(self, index: int) -> RGBColor:
        if index < 0:
            return RGBColor(0.0, 0.0, 0.0)
        return self._entries(index, index + 1)[0]

    def range(self, start: int, count: int) -> List[RGBColor]:
        if start < 0 or count <= 0:
            return []
        return self._entries(start, start + count)

    def __iter__(self) -> Iterator[RGBColor]:
        start = 0
        while True:
            yield from self._entries(start, start + CHECKPOINT_INTERVAL)
            start += CHECKPOINT_INTERVAL

    def clear(self) -> None:
        with self._lock:
            del self._resume[1:]
