import random

import pytest

from bufedit.buffer import BufferEditError
from bufedit.effects import (
    AmplitudeTooLowError,
    EffectError,
    fade_in,
    fade_out,
    ms_to_frames,
    normalize,
    reverse,
    ring_modulate,
    shuffle_segments,
)


def test_ms_to_frames_one_second():
    assert ms_to_frames(1000, 44100) == 44100


def test_ms_to_frames_truncates():
    assert ms_to_frames(0.5, 1000) == 0
    assert ms_to_frames(2.9, 1000) == 2


def test_normalize_peak_becomes_new_max():
    samples = [0.1, -0.4, 0.2, 0.3]
    result = normalize(samples, 0.8)
    assert max(abs(v) for v in result) == pytest.approx(0.8)
    assert samples == [0.1, -0.4, 0.2, 0.3]


def test_normalize_default_is_unity():
    result = normalize([0.25, -0.5])
    assert result == pytest.approx([0.5, -1.0])


def test_normalize_keeps_ratios():
    samples = [0.1, 0.2, -0.3]
    result = normalize(samples, 2.0)
    for before, after in zip(samples, result):
        assert after / before == pytest.approx(result[2] / samples[2])


def test_normalize_silence_raises():
    with pytest.raises(AmplitudeTooLowError) as info:
        normalize([0.0, 0.0, 1e-7])
    assert info.value.amplitude == pytest.approx(1e-7)


def test_normalize_empty_raises():
    with pytest.raises(AmplitudeTooLowError):
        normalize([])


def test_error_hierarchy():
    with pytest.raises(BufferEditError):
        normalize([0.0])
    with pytest.raises(ValueError):
        fade_in([1.0], 5)


def test_fade_in_starts_silent_and_leaves_tail():
    samples = [1.0] * 10
    result = fade_in(samples, 4)
    assert result[0] == 0.0
    assert result[4:] == samples[4:]
    assert result[:4] == sorted(result[:4])
    assert all(v < 1.0 for v in result[:4])


def test_fade_in_multichannel_frames_share_gain():
    samples = [1.0, 2.0] * 6
    result = fade_in(samples, 3, channels=2)
    for frame in range(3):
        left, right = result[2 * frame], result[2 * frame + 1]
        assert right == pytest.approx(2 * left)
    assert result[6:] == samples[6:]


def test_fade_in_zero_frames_is_identity():
    assert fade_in([0.5, 0.6], 0) == [0.5, 0.6]


def test_fade_in_too_long_raises():
    with pytest.raises(EffectError):
        fade_in([1.0, 1.0], 3)


def test_fade_out_leaves_head_and_starts_at_full():
    samples = [1.0] * 10
    result = fade_out(samples, 4)
    assert result[:6] == samples[:6]
    assert result[6] == 1.0
    assert result[6:] == sorted(result[6:], reverse=True)
    assert result[-1] > 0.0


def test_fade_out_negative_raises():
    with pytest.raises(EffectError):
        fade_out([1.0], -1)


def test_reverse_mono():
    samples = [1.0, 2.0, 3.0, 4.0, 5.0]
    assert reverse(samples) == [5.0, 4.0, 3.0, 2.0, 1.0]


def test_reverse_keeps_channel_order():
    samples = [1.0, 10.0, 2.0, 20.0, 3.0, 30.0]
    assert reverse(samples, channels=2) == [3.0, 30.0, 2.0, 20.0, 1.0, 10.0]


def test_reverse_twice_round_trips():
    samples = [0.1, -0.2, 0.3, 0.4, -0.5, 0.6]
    assert reverse(reverse(samples, 3), 3) == samples


def test_partial_frames_raise():
    with pytest.raises(EffectError):
        reverse([1.0, 2.0, 3.0], channels=2)


def test_ring_modulate_first_frame_silenced():
    result = ring_modulate([1.0, 1.0, 1.0, 1.0], 100.0, 44100.0, channels=2)
    assert result[0] == 0.0
    assert result[1] == 0.0
    assert result[2] > 0.0


def test_ring_modulate_zero_frequency_silences():
    assert ring_modulate([0.5, -0.5, 0.25], 0.0, 48000.0) == [0.0, 0.0, 0.0]


def test_ring_modulate_quarter_rate_peaks():
    result = ring_modulate([1.0] * 4, 1.0, 4.0)
    assert result == pytest.approx([0.0, 1.0, 0.0, -1.0], abs=1e-12)


def test_ring_modulate_bad_rate_raises():
    with pytest.raises(EffectError):
        ring_modulate([1.0], 10.0, 0.0)


def test_shuffle_is_permutation():
    samples = [float(i) for i in range(20)]
    result = shuffle_segments(samples, 4, random.Random(3))
    assert sorted(result) == samples


def test_shuffle_keeps_segments_contiguous():
    samples = [float(i) for i in range(12)]
    result = shuffle_segments(samples, 3, random.Random(7))
    chunks = [result[i:i + 4] for i in range(0, 12, 4)]
    expected = [samples[i:i + 4] for i in range(0, 12, 4)]
    assert sorted(chunks) == expected


def test_shuffle_one_segment_is_identity():
    samples = [0.3, 0.1, 0.2]
    assert shuffle_segments(samples, 1, random.Random(0)) == samples


def test_shuffle_is_deterministic_for_seed():
    samples = [float(i) for i in range(30)]
    first = shuffle_segments(samples, 5, random.Random(42))
    second = shuffle_segments(samples, 5, random.Random(42))
    assert first == second


def test_shuffle_keeps_frames_together():
    samples = []
    for i in range(10):
        samples.extend([float(i), float(i) + 0.5])
    result = shuffle_segments(samples, 5, random.Random(1), channels=2)
    frames = [tuple(result[i:i + 2]) for i in range(0, len(result), 2)]
    assert all(right == left + 0.5 for left, right in frames)
    assert sorted(frames) == [(float(i), float(i) + 0.5) for i in range(10)]


def test_shuffle_more_segments_than_frames_is_identity():
    samples = [1.0, 2.0]
    assert shuffle_segments(samples, 5, random.Random(0)) == samples


def test_shuffle_zero_segments_raises():
    with pytest.raises(EffectError):
        shuffle_segments([1.0, 2.0], 0, random.Random(0))