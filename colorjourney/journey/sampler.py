import math
from typing import Sequence

from boundednumbers.functions import clamp

from ..types.color_types import LChColor
from ..types.config_types import LoopMode
from ..utils.num_utils import lerp, smoothstep, normalize_hue, shortest_hue_delta
from .waypoints import Waypoint

NEUTRAL_GRAY = LChColor(0.5, 0.1, 0.0)


def apply_loop_mode(t: float, loop_mode: LoopMode) -> float:
    """
    Map a raw journey parameter into ``[0, 1]`` according to the loop mode.

    OPEN clamps, CLOSED wraps (so 0 and 1 land on the same color) and
    PINGPONG reflects every other unit interval.
    """
    if loop_mode == LoopMode.CLOSED:
        t = ((t % 1.0) + 1.0) % 1.0
    elif loop_mode == LoopMode.PINGPONG:
        t = t % 2.0
        if t > 1.0:
            t = 2.0 - t
    return float(clamp(t, 0.0, 1.0))


def hue_lerp_shortest(h0: float, h1: float, u: float) -> float:
    """Blend two hues along the shorter arc, result in ``[0, 2π)``."""
    return normalize_hue(h0 + shortest_hue_delta(h0, h1) * u)


def lch_lerp(a: LChColor, b: LChColor, u: float) -> LChColor:
    return LChColor(
        lerp(a.L, b.L, u),
        lerp(a.C, b.C, u),
        hue_lerp_shortest(a.h, b.h, u),
    )


def interpolate_waypoints(
    waypoints: Sequence[Waypoint],
    t: float,
    loop_mode: LoopMode = LoopMode.OPEN,
) -> LChColor:
    """
    Sample the waypoint path at ``t``.

    The path is split into ``len(waypoints) - 1`` segments of equal width;
    inside a segment the local parameter is smoothstep-eased before L and C
    are blended linearly and hue along the shortest arc.
    """
    count = len(waypoints)
    if count == 0:
        return NEUTRAL_GRAY
    if count == 1:
        return waypoints[0].anchor

    t = apply_loop_mode(t, loop_mode)

    segment_size = 1.0 / (count - 1)
    segment = min(int(math.floor(t / segment_size)), count - 2)
    local_t = smoothstep((t - segment * segment_size) / segment_size)

    return lch_lerp(waypoints[segment].anchor, waypoints[segment + 1].anchor, local_t)
