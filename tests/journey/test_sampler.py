from colorjourney.journey import apply_loop_mode, interpolate_waypoints, hue_lerp_shortest, Waypoint
from colorjourney.journey.sampler import NEUTRAL_GRAY
from colorjourney.types import LChColor, LoopMode
from colorjourney.utils import TAU, shortest_hue_delta
import numpy as np
import pytest

loop_samples = {
    LoopMode.OPEN: [(-0.5, 0.0), (0.0, 0.0), (0.3, 0.3), (1.0, 1.0), (1.5, 1.0)],
    LoopMode.CLOSED: [(0.0, 0.0), (1.0, 0.0), (1.25, 0.25), (-0.25, 0.75), (3.5, 0.5)],
    LoopMode.PINGPONG: [(0.0, 0.0), (0.5, 0.5), (1.0, 1.0), (1.25, 0.75), (2.0, 0.0), (-0.25, 0.25)],
}


def test_apply_loop_mode():
    for mode, cases in loop_samples.items():
        for t, expected in cases:
            assert abs(apply_loop_mode(t, mode) - expected) < 1e-12, (mode, t)


def test_pingpong_mirrors():
    for i in range(1, 100):
        t = 1.0 + i / 100
        assert abs(apply_loop_mode(t, LoopMode.PINGPONG) - apply_loop_mode(2.0 - t, LoopMode.PINGPONG)) < 1e-12


def test_hue_shortest_path():
    # 6.2 -> 0.2 must cross 0, not sweep back through π
    previous = 6.2
    travelled = 0.0
    for i in range(1, 101):
        h = hue_lerp_shortest(6.2, 0.2, i / 100)
        assert 0.0 <= h < TAU
        travelled += abs(shortest_hue_delta(previous, h))
        previous = h

    assert travelled <= 0.4
    assert abs(shortest_hue_delta(previous, 0.2)) < 1e-9


def test_hue_lerp_endpoints():
    assert abs(hue_lerp_shortest(1.0, 2.0, 0.0) - 1.0) < 1e-12
    assert abs(hue_lerp_shortest(1.0, 2.0, 1.0) - 2.0) < 1e-12
    assert abs(hue_lerp_shortest(1.0, 2.0, 0.5) - 1.5) < 1e-12


def test_no_waypoints_gives_neutral_gray():
    assert interpolate_waypoints([], 0.5) == NEUTRAL_GRAY
    assert NEUTRAL_GRAY == (0.5, 0.1, 0.0)


def test_single_waypoint_is_constant():
    wp = Waypoint(LChColor(0.4, 0.2, 3.0))
    for t in (-1.0, 0.0, 0.5, 2.0):
        assert interpolate_waypoints([wp], t) == wp.anchor


def test_two_waypoints():
    a = Waypoint(LChColor(0.2, 0.1, 1.0))
    b = Waypoint(LChColor(0.8, 0.3, 2.0))

    assert np.allclose(interpolate_waypoints([a, b], 0.0), a.anchor, atol=1e-12)
    assert np.allclose(interpolate_waypoints([a, b], 1.0), b.anchor, atol=1e-12)

    mid = interpolate_waypoints([a, b], 0.5)
    assert abs(mid.L - 0.5) < 1e-12
    assert abs(mid.C - 0.2) < 1e-12
    assert abs(mid.h - 1.5) < 1e-12


def test_easing_slows_segment_ends():
    a = Waypoint(LChColor(0.0, 0.1, 0.0))
    b = Waypoint(LChColor(1.0, 0.1, 0.0))
    near_start = interpolate_waypoints([a, b], 0.1).L
    assert near_start < 0.1
    assert abs(near_start - (3 * 0.01 - 2 * 0.001)) < 1e-12


def test_segments_hit_waypoints():
    wps = [Waypoint(LChColor(0.1 * (i + 1), 0.1, i * 0.5)) for i in range(5)]
    for i, wp in enumerate(wps):
        out = interpolate_waypoints(wps, i / 4)
        assert abs(out.L - wp.anchor.L) < 1e-12
        assert abs(shortest_hue_delta(out.h, wp.anchor.h)) < 1e-12


@pytest.mark.parametrize("mode", list(LoopMode))
def test_loop_modes_stay_on_path(mode):
    wps = [Waypoint(LChColor(0.3, 0.1, 0.0)), Waypoint(LChColor(0.7, 0.1, 0.0))]
    for i in range(-20, 41):
        L = interpolate_waypoints(wps, i / 10, mode).L
        assert 0.3 - 1e-12 <= L <= 0.7 + 1e-12
