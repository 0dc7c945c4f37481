"""Pure sample-processing effects that work on interleaved sample lists.

Every function takes a sequence of samples and returns a new list. The input
is left untouched. Multichannel data is interleaved: the samples of one frame
sit next to each other, one per channel.
"""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from typing import Protocol

from bufedit.buffer import BufferEditError

AMPLITUDE_FLOOR = 1e-6


class EffectError(BufferEditError, ValueError):
    """Raised when an effect is given arguments it cannot work with."""


class AmplitudeTooLowError(EffectError):
    """Raised when the signal is too quiet to be rescaled."""

    def __init__(self, amplitude: float) -> None:
        self.amplitude = amplitude
        super().__init__(f"Amplitude is too low to rescale: {amplitude:.2f}")


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def _frame_count(samples: Sequence[float], channels: int) -> int:
    if channels < 1:
        raise EffectError(f"channel count must be at least 1, got {channels}")
    if len(samples) % channels:
        raise EffectError(
            f"{len(samples)} samples do not fill whole frames of {channels} channels"
        )
    return len(samples) // channels


def ms_to_frames(milliseconds: float, sample_rate: float) -> int:
    """Convert a time in milliseconds to a whole number of frames, truncating."""
    return int(milliseconds * 0.001 * sample_rate)


def normalize(samples: Sequence[float], new_max: float = 1.0) -> list[float]:
    """Rescale the samples so that the largest absolute value becomes ``new_max``."""
    peak = max((abs(value) for value in samples), default=0.0)
    if peak <= AMPLITUDE_FLOOR:
        raise AmplitudeTooLowError(peak)
    scale = new_max / peak
    return [value * scale for value in samples]


def _check_fade(fade_frames: int, frames: int, kind: str) -> None:
    if fade_frames < 0 or fade_frames > frames:
        raise EffectError(
            f"{fade_frames} frames is not a valid {kind} length for {frames} frames"
        )


def fade_in(samples: Sequence[float], fade_frames: int, channels: int = 1) -> list[float]:
    """Apply a linear fade-in over the first ``fade_frames`` frames."""
    frames = _frame_count(samples, channels)
    _check_fade(fade_frames, frames, "fade-in")
    result = list(samples)
    for frame in range(fade_frames):
        gain = frame / fade_frames
        for position in range(frame * channels, (frame + 1) * channels):
            result[position] *= gain
    return result


def fade_out(samples: Sequence[float], fade_frames: int, channels: int = 1) -> list[float]:
    """Apply a linear fade-out over the last ``fade_frames`` frames."""
    frames = _frame_count(samples, channels)
    _check_fade(fade_frames, frames, "fade-out")
    result = list(samples)
    first = frames - fade_frames
    for offset in range(fade_frames):
        gain = 1.0 - offset / fade_frames
        frame = first + offset
        for position in range(frame * channels, (frame + 1) * channels):
            result[position] *= gain
    return result


def reverse(samples: Sequence[float], channels: int = 1) -> list[float]:
    """Reverse the order of the frames, keeping each frame's channels in place."""
    frames = _frame_count(samples, channels)
    result: list[float] = []
    for frame in reversed(range(frames)):
        result.extend(samples[frame * channels:(frame + 1) * channels])
    return result


def ring_modulate(
    samples: Sequence[float],
    frequency: float,
    sample_rate: float,
    channels: int = 1,
) -> list[float]:
    """Multiply every frame by a sine wave of ``frequency`` Hz."""
    frames = _frame_count(samples, channels)
    if sample_rate <= 0:
        raise EffectError(f"sample rate must be positive, got {sample_rate}")
    step = 2.0 * math.pi * frequency / sample_rate
    result = list(samples)
    for frame in range(frames):
        gain = math.sin(step * frame)
        for position in range(frame * channels, (frame + 1) * channels):
            result[position] *= gain
    return result


def shuffle_segments(
    samples: Sequence[float],
    segments: int,
    rng: _RandomSource | None = None,
    channels: int = 1,
) -> list[float]:
    """Cut the frames into ``segments`` equal pieces and put them in random order.

    A piece is drawn at random from the part not yet placed and moved to the end
    of that part, until every piece has been drawn. Frames left over after the
    equal pieces stay with the unplaced part and end up at its front.
    """
    frames = _frame_count(samples, channels)
    if segments < 1:
        raise EffectError(f"segment count must be at least 1, got {segments}")
    source = rng if rng is not None else random.Random()
    segment_length = frames // segments

    result = list(samples)
    remaining = frames
    for left in range(segments, 0, -1):
        start = source.randrange(left) * segment_length
        end = min(start + segment_length, remaining)
        active = remaining * channels
        lo, hi = start * channels, end * channels
        result[:active] = result[:lo] + result[hi:active] + result[lo:hi]
        remaining -= end - start
    return result