"""Named, interleaved sample buffers and a registry to look them up by name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

DEFAULT_SAMPLE_RATE = 44100.0


class BufferEditError(Exception):
    """Base class for errors raised while editing buffers."""


class InvalidBufferError(BufferEditError, LookupError):
    """Raised when a name does not refer to a usable buffer."""

    def __init__(self, name: str, message: str | None = None) -> None:
        self.name = name
        super().__init__(message or f'"{name}" is not a valid buffer')


@dataclass
class Buffer:
    """A block of interleaved audio samples with a name and a sample rate.

    ``samples`` holds ``frames() * channels`` values, frame after frame.
    A sample rate that is not positive falls back to 44100 Hz.
    """

    name: str
    samples: list[float] = field(default_factory=list)
    channels: int = 1
    sample_rate: float = DEFAULT_SAMPLE_RATE
    valid: bool = True

    def __post_init__(self) -> None:
        if self.channels < 1:
            raise ValueError(f"channel count must be at least 1, got {self.channels}")
        self.samples = [float(value) for value in self.samples]
        if len(self.samples) % self.channels:
            raise ValueError(
                f"{len(self.samples)} samples do not fill whole frames "
                f"of {self.channels} channels"
            )
        if self.sample_rate <= 0:
            self.sample_rate = DEFAULT_SAMPLE_RATE
        self.sample_rate = float(self.sample_rate)

    def frames(self) -> int:
        """Return the number of frames in the buffer."""
        return len(self.samples) // self.channels

    def frame(self, index: int) -> tuple[float, ...]:
        """Return the samples of one frame, one value per channel."""
        count = self.frames()
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError(f"frame index out of range for {count} frames")
        start = index * self.channels
        return tuple(self.samples[start:start + self.channels])

    def resize(self, frames: int) -> None:
        """Change the length to ``frames``, keeping the head and zero-filling growth."""
        if frames < 0:
            raise ValueError(f"frame count cannot be negative, got {frames}")
        wanted = frames * self.channels
        if wanted <= len(self.samples):
            del self.samples[wanted:]
        else:
            self.samples.extend([0.0] * (wanted - len(self.samples)))

    def info(self) -> dict[str, object]:
        """Return a summary of the buffer's name, size and state."""
        return {
            "name": self.name,
            "frames": self.frames(),
            "channels": self.channels,
            "sample_rate": self.sample_rate,
            "valid": self.valid,
        }


class BufferRegistry:
    """Buffers addressed by name; adding a buffer under a taken name replaces it."""

    def __init__(self, buffers: Iterable[Buffer] = ()) -> None:
        self._buffers: dict[str, Buffer] = {}
        for buffer in buffers:
            self.add(buffer)

    def add(self, buffer: Buffer) -> Buffer:
        """Register ``buffer`` under its own name and return it."""
        self._buffers[buffer.name] = buffer
        return buffer

    def get(self, name: str) -> Buffer:
        """Return the buffer called ``name``."""
        try:
            return self._buffers[name]
        except KeyError:
            raise InvalidBufferError(name) from None

    def remove(self, name: str) -> Buffer:
        """Unregister and return the buffer called ``name``."""
        try:
            return self._buffers.pop(name)
        except KeyError:
            raise InvalidBufferError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._buffers

    def __iter__(self) -> Iterator[str]:
        return iter(self._buffers)

    def __len__(self) -> int:
        return len(self._buffers)