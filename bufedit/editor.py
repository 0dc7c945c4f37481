"""An editor that applies effects to a named buffer and can undo the last edit."""

from __future__ import annotations

from dataclasses import dataclass

from bufedit import effects
from bufedit.buffer import Buffer, BufferEditError, BufferRegistry, InvalidBufferError
from bufedit.effects import EffectError


class NothingToUndoError(BufferEditError):
    """Raised when there is no edit left to undo."""

    def __init__(self) -> None:
        super().__init__("Nothing to undo")


class NothingToPasteError(BufferEditError):
    """Raised when no cut region is held for pasting."""

    def __init__(self) -> None:
        super().__init__("Nothing to paste")


@dataclass
class _UndoRecord:
    start: int
    frames: int
    samples: list[float]
    cut: bool = False


class BufferEditor:
    """Edits the buffer registered under a name, keeping one level of undo.

    Every edit saves the samples it is about to change. ``undo`` puts them
    back; after a ``cut`` the removed frames can also be pasted into another
    buffer.
    """

    def __init__(self, registry: BufferRegistry, name: str, rng=None) -> None:
        self.registry = registry
        self.name = name
        self.rng = rng
        self._undo: _UndoRecord | None = None

    def buffer(self) -> Buffer:
        """Return the buffer currently edited, checking that it is usable."""
        target = self.registry.get(self.name)
        if not target.valid:
            raise InvalidBufferError(self.name, "Not a valid buffer!")
        return target

    def info(self) -> dict[str, object]:
        """Return a summary of the edited buffer."""
        return self.buffer().info()

    def set_name(self, name: str) -> None:
        """Point the editor at another buffer."""
        self.name = name

    def can_undo(self) -> bool:
        """Return whether an edit can be undone."""
        return self._undo is not None

    def _remember(self, target: Buffer, start: int, frames: int, cut: bool = False) -> None:
        channels = target.channels
        saved = target.samples[start * channels:(start + frames) * channels]
        self._undo = _UndoRecord(start=start, frames=frames, samples=saved, cut=cut)

    def normalize(self, *args: float) -> None:
        """Scale the buffer so its peak becomes the given value, 1.0 by default."""
        if len(args) > 1:
            raise EffectError("The message must have at most two members")
        new_max = float(args[0]) if args else 1.0
        target = self.buffer()
        self._remember(target, 0, target.frames())
        target.samples = effects.normalize(target.samples, new_max)

    def _fade_frames(self, target: Buffer, fade_time: float, kind: str) -> int:
        fade_frames = effects.ms_to_frames(fade_time, target.sample_rate)
        if fade_time <= 0 or fade_frames > target.frames():
            raise EffectError(f"{fade_time:.0f}ms is not a valid {kind} time")
        return fade_frames

    def fade_in(self, fade_time: float) -> None:
        """Fade in linearly over the first ``fade_time`` milliseconds."""
        target = self.buffer()
        fade_frames = self._fade_frames(target, fade_time, "fade-in")
        self._remember(target, 0, fade_frames)
        target.samples = effects.fade_in(target.samples, fade_frames, target.channels)

    def fade_out(self, fade_time: float) -> None:
        """Fade out linearly over the last ``fade_time`` milliseconds."""
        target = self.buffer()
        fade_frames = self._fade_frames(target, fade_time, "fade-out")
        self._remember(target, target.frames() - fade_frames, fade_frames)
        target.samples = effects.fade_out(target.samples, fade_frames, target.channels)

    def cut(self, start: float, end: float) -> None:
        """Remove the frames between ``start`` and ``end`` milliseconds."""
        target = self.buffer()
        start_frame = effects.ms_to_frames(start, target.sample_rate)
        end_frame = effects.ms_to_frames(end, target.sample_rate)
        if start_frame < 0 or end_frame > target.frames() or start_frame > end_frame:
            raise EffectError(f"{start:.0f}ms and {end:.0f}ms are not valid cut times")
        self._remember(target, start_frame, end_frame - start_frame, cut=True)
        channels = target.channels
        del target.samples[start_frame * channels:end_frame * channels]

    def paste(self, dest_name: str) -> None:
        """Write the frames removed by the last cut into the buffer ``dest_name``."""
        record = self._undo
        if record is None or not record.cut:
            raise NothingToPasteError()
        origin = self.buffer()
        destination = self.registry.get(dest_name)
        if not destination.valid:
            raise InvalidBufferError(dest_name)
        if origin.channels != destination.channels:
            raise BufferEditError(
                f"Different number of channels of origin ({origin.channels}) "
                f"and number of channel of destination ({destination.channels})"
            )
        destination.resize(record.frames)
        destination.samples[:] = record.samples

    def reverse(self) -> None:
        """Reverse the order of the frames."""
        target = self.buffer()
        self._remember(target, 0, target.frames())
        target.samples = effects.reverse(target.samples, target.channels)

    def ring_modulation(self, frequency: float) -> None:
        """Multiply the buffer by a sine wave of ``frequency`` Hz."""
        target = self.buffer()
        self._remember(target, 0, target.frames())
        target.samples = effects.ring_modulate(
            target.samples, frequency, target.sample_rate, target.channels
        )

    def shuffle(self, segments: int) -> None:
        """Cut the buffer into ``segments`` pieces and put them in random order."""
        segments = int(segments)
        if segments < 1:
            raise EffectError(f"segment count must be at least 1, got {segments}")
        target = self.buffer()
        self._remember(target, 0, target.frames())
        target.samples = effects.shuffle_segments(
            target.samples, segments, self.rng, target.channels
        )

    def undo(self) -> None:
        """Restore the samples changed by the last edit."""
        record = self._undo
        if record is None:
            raise NothingToUndoError()
        target = self.buffer()
        channels = target.channels
        lo = record.start * channels
        if record.cut:
            if lo > len(target.samples):
                raise BufferEditError("undo data does not fit the buffer")
            target.samples[lo:lo] = record.samples
        else:
            hi = lo + len(record.samples)
            if hi > len(target.samples):
                raise BufferEditError("undo data does not fit the buffer")
            target.samples[lo:hi] = record.samples
        self._undo = None