import math
from typing import NamedTuple, Sequence, Tuple

from ..types.color_types import LChColor
from ..types.config_types import TemperatureBias, temperature_shifts
from ..utils.num_utils import smoothstep, normalize_hue, TAU

MAX_WAYPOINTS = 16
SINGLE_ANCHOR_WAYPOINTS = 8


class Waypoint(NamedTuple):
    """A designed interpolation control point."""
    anchor: LChColor
    weight: float = 1.0


def _single_anchor_waypoints(base: LChColor) -> Tuple[Waypoint, ...]:
    """
    Full hue revolution around one anchor.

    Hue advances on a smoothstep schedule, chroma follows a single hump
    peaking mid-journey and lightness makes one gentle oscillation.
    """
    last = SINGLE_ANCHOR_WAYPOINTS - 1
    waypoints = []
    for i in range(SINGLE_ANCHOR_WAYPOINTS):
        t = i / last
        # steps stay below π so shortest-arc blending keeps the full turn
        h = normalize_hue(base.h + smoothstep(t) * TAU)
        C = base.C * (1.0 + 0.2 * math.sin(t * math.pi))
        L = base.L * (1.0 + 0.1 * math.sin(t * TAU))
        waypoints.append(Waypoint(LChColor(L, C, h)))
    return tuple(waypoints)


def build_waypoints(
    anchors: Sequence[LChColor],
    temperature_bias: TemperatureBias = TemperatureBias.NEUTRAL,
) -> Tuple[Waypoint, ...]:
    """
    Build the waypoint list a journey travels through.

    Args:
        anchors: Anchor colors already converted to LCh, in input order
        temperature_bias: WARM/COOL rotate every waypoint hue by ±0.3 rad

    Returns:
        Tuple of waypoints (8 for a single anchor, one per anchor otherwise)
    """
    if len(anchors) == 1:
        waypoints = _single_anchor_waypoints(anchors[0])
    else:
        waypoints = tuple(Waypoint(LChColor(*a)) for a in anchors)

    if len(waypoints) > MAX_WAYPOINTS:
        raise ValueError(f"at most {MAX_WAYPOINTS} waypoints supported, got {len(waypoints)}")

    shift = temperature_shifts.get(TemperatureBias(temperature_bias))
    if shift is not None:
        waypoints = tuple(
            Waypoint(wp.anchor._replace(h=normalize_hue(wp.anchor.h + shift)), wp.weight)
            for wp in waypoints
        )
    return waypoints
