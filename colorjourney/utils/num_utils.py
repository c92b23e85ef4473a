import math
from boundednumbers.functions import clamp

TAU = 2.0 * math.pi


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def smoothstep(t: float) -> float:
    """Cubic ease ``3t² - 2t³`` with ``t`` clamped to ``[0, 1]`` first."""
    t = float(clamp(t, 0.0, 1.0))
    return t * t * (3.0 - 2.0 * t)


def normalize_hue(h: float) -> float:
    """Wrap an angle in radians into the half-open range ``[0, 2π)``."""
    h = h % TAU
    # float modulo of a tiny negative angle rounds up to exactly 2π
    return 0.0 if h >= TAU else h


def shortest_hue_delta(h0: float, h1: float) -> float:
    """Signed hue difference from ``h0`` to ``h1`` wrapped into ``(-π, π]``."""
    diff = (h1 - h0) % TAU
    if diff > math.pi:
        diff -= TAU
    return diff

