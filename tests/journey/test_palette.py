from colorjourney.journey import DiscreteStream, generate_palette, palette_position, index_position
from colorjourney.journey.palette import chroma_pulse, contrast_threshold, CHECKPOINT_INTERVAL
from colorjourney.journey.contrast import apply_minimum_contrast
from colorjourney.journey import init_default_config
from colorjourney.conversions import rgb_to_lch, lch_to_rgb
from colorjourney.types import LoopMode, ContrastLevel, RGBColor, LChColor
from colorjourney.utils import clamp_rgb
import math
import threading
import pytest


def rainbow(t):
    """Stand-in sample function: a hue wheel at fixed lightness/chroma."""
    return clamp_rgb(lch_to_rgb(LChColor(0.7, 0.1, t * 2 * math.pi)))


def test_palette_positions():
    assert [palette_position(i, 4, LoopMode.CLOSED) for i in range(4)] == [0.0, 0.25, 0.5, 0.75]
    assert [palette_position(i, 5, LoopMode.OPEN) for i in range(5)] == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert [palette_position(i, 5, LoopMode.PINGPONG) for i in range(5)] == [0.0, 0.5, 1.0, 0.5, 0.0]


def test_single_color_sits_at_midpoint():
    for mode in LoopMode:
        assert palette_position(0, 1, mode) == 0.5


def test_index_positions():
    assert index_position(0) == 0.0
    assert abs(index_position(3) - 0.15) < 1e-12
    assert abs(index_position(21) - 0.05) < 1e-9
    assert all(0.0 <= index_position(i) < 1.0 for i in range(500))
    assert index_position(-4) == 0.0


def test_contrast_threshold():
    config = init_default_config([(0.5, 0.5, 0.5)])
    assert contrast_threshold(config) == 0.10
    config.contrast_level = ContrastLevel.HIGH
    assert contrast_threshold(config) == 0.15
    config.contrast_level = ContrastLevel.CUSTOM
    config.contrast_custom_threshold = 0.33
    assert contrast_threshold(config) == 0.33


def test_generate_palette_count():
    for count in (1, 2, 7):
        palette = generate_palette(rainbow, count, LoopMode.OPEN, 0.05)
        assert len(palette) == count
        assert all(isinstance(c, RGBColor) for c in palette)


def test_generate_palette_rejects_empty():
    with pytest.raises(ValueError):
        generate_palette(rainbow, 0, LoopMode.OPEN, 0.05)


def test_first_entry_is_unconstrained():
    palette = generate_palette(rainbow, 4, LoopMode.CLOSED, 0.05)
    assert palette[0] == rainbow(0.0)


def test_small_palette_has_no_pulse():
    # distinct enough that contrast leaves every entry alone
    palette = generate_palette(rainbow, 5, LoopMode.CLOSED, 0.0)
    assert palette == [rainbow(i / 5) for i in range(5)]


def test_large_palette_gets_chroma_pulse():
    count = 30
    palette = generate_palette(rainbow, count, LoopMode.CLOSED, 0.0)
    raw = [rainbow(i / count) for i in range(count)]

    assert palette == [chroma_pulse(c, i) for i, c in enumerate(raw)]
    # index 0: cos(0) = 1, chroma up 10%; index 5: cos(π) = -1, chroma down 10%
    assert rgb_to_lch(palette[0]).C > rgb_to_lch(raw[0]).C
    assert rgb_to_lch(palette[5]).C < rgb_to_lch(raw[5]).C


def test_stream_matches_replay():
    stream = DiscreteStream(rainbow, 0.05)
    first = stream.range(0, 30)

    fresh = DiscreteStream(rainbow, 0.05)
    assert [fresh.at(i) for i in range(30)] == first
    assert DiscreteStream(rainbow, 0.05).at(17) == first[17]


def test_stream_range_matches_at():
    stream = DiscreteStream(rainbow, 0.05)
    window = stream.range(12, 9)
    assert window == [stream.at(12 + k) for k in range(9)]
    assert stream.checkpoint_count == 1


def test_stream_invalid_requests():
    stream = DiscreteStream(rainbow, 0.05)
    assert stream.at(-1) == (0.0, 0.0, 0.0)
    assert stream.range(-1, 3) == []
    assert stream.range(0, 0) == []
    assert stream.checkpoint_count == 1


def test_stream_iteration():
    stream = DiscreteStream(rainbow, 0.05)
    it = iter(stream)
    head = [next(it) for _ in range(10)]
    assert head == stream.range(0, 10)


def test_stream_clear():
    stream = DiscreteStream(rainbow, 0.05)
    before = stream.at(5)
    stream.at(200)
    stream.clear()
    assert stream.checkpoint_count == 1
    assert stream.at(5) == before


def test_stream_concurrent_reads():
    stream = DiscreteStream(rainbow, 0.05)
    expected = DiscreteStream(rainbow, 0.05).range(0, 60)
    results = {}

    def worker(k):
        results[k] = stream.range(0, 60)

    threads = [threading.Thread(target=worker, args=(k,)) for k in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r == expected for r in results.values())


def replay(sample, stop, min_delta_e):
    colors, previous = [], None
    for i in range(stop):
        previous = apply_minimum_contrast(sample(index_position(i)), previous, min_delta_e)
        colors.append(previous)
    return colors


def test_far_index_keeps_only_checkpoints():
    stream = DiscreteStream(rainbow, 0.05)
    expected = replay(rainbow, 1001, 0.05)

    assert stream.at(1000) == expected[1000]
    assert stream.checkpoint_count == 1000 // CHECKPOINT_INTERVAL + 1


def test_reads_across_checkpoints_match_replay():
    stream = DiscreteStream(rainbow, 0.05)
    expected = replay(rainbow, 300, 0.05)

    stream.at(299)
    assert stream.at(CHECKPOINT_INTERVAL) == expected[CHECKPOINT_INTERVAL]
    assert stream.at(CHECKPOINT_INTERVAL - 1) == expected[CHECKPOINT_INTERVAL - 1]
    assert stream.range(120, 90) == expected[120:210]
    assert stream.at(0) == expected[0]


def test_iteration_crosses_checkpoints():
    it = iter(DiscreteStream(rainbow, 0.05))
    head = [next(it) for _ in range(3 * CHECKPOINT_INTERVAL + 5)]
    assert head == replay(rainbow, 3 * CHECKPOINT_INTERVAL + 5, 0.05)
