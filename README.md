# bufedit

A small library for editing named audio buffers held in memory. A buffer
(`bufedit.buffer.Buffer`) holds interleaved float samples, a channel count, a
sample rate (a rate that is not positive falls back to 44100 Hz) and a
`valid` flag. Buffers are looked up by name in a `BufferRegistry`.

A `BufferEditor` (`bufedit.editor`) works on the buffer registered under one
name and offers these destructive edits:

- `normalize(new_max=1.0)`: scale so the peak absolute value becomes `new_max`
- `fade_in(ms)` / `fade_out(ms)`: linear fade over a time in milliseconds
- `cut(start_ms, end_ms)`: remove a region; `paste(name)` then writes the
  removed frames into another buffer, resizing it to fit
- `reverse()`: reverse the order of the frames, keeping channels in place
- `ring_modulation(hz)`: multiply by a sine of the given frequency
- `shuffle(n)`: cut into `n` equal segments and put them in random order

Every edit saves the samples it is about to change, so the latest edit can be
undone with `undo()`. Only one level of undo is kept; `can_undo()` tells
whether there is something to undo.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
import random

from bufedit.buffer import Buffer, BufferRegistry
from bufedit.editor import BufferEditor

registry = BufferRegistry()
registry.add(Buffer("drums", [0.1, -0.5, 0.25, 0.0] * 11025, sample_rate=44100.0))
registry.add(Buffer("clip", [0.0]))

editor = BufferEditor(registry, "drums", random.Random(1))
editor.normalize()          # peak becomes 1.0
editor.normalize(0.5)       # peak becomes 0.5
editor.undo()               # back to a peak of 1.0

editor.fade_in(100.0)       # 100 ms fade-in
editor.fade_out(250.0)      # 250 ms fade-out

editor.cut(0.0, 500.0)      # remove the first half-second
editor.paste("clip")        # "clip" now holds the removed audio
editor.undo()               # put the cut region back

editor.reverse()
editor.ring_modulation(440.0)
editor.shuffle(8)

print(editor.info())        # name, frames, channels, sample_rate, valid
```

`set_name()` points the editor at another buffer. The random source passed to
`BufferEditor` only needs a `randrange(stop)` method; when it is `None` a
fresh `random.Random()` is used.

## Errors

All errors derive from `bufedit.buffer.BufferEditError`.

- `InvalidBufferError`: the name is not in the registry, or the buffer's
  `valid` flag is false.
- `NothingToUndoError`: `undo()` with nothing left to undo.
- `NothingToPasteError`: `paste()` when the latest edit was not a cut.
- `EffectError`: a fade or cut time outside the buffer, more than one
  argument to `normalize()`, or fewer than one shuffle segment.
- `AmplitudeTooLowError`: normalizing a buffer whose peak is at most 1e-6.
- `BufferEditError`: pasting between buffers with different channel counts.

## Working on plain sample lists

The functions in `bufedit.effects` (`ms_to_frames`, `normalize`, `fade_in`,
`fade_out`, `reverse`, `ring_modulate`, `shuffle_segments`) take a sequence of
interleaved samples and return a new list, leaving the input unchanged. They
need no registry or editor.

## What it does not do

bufedit only edits samples held in memory. It does not read or write audio
files, play or record sound, or offer a command-line tool; loading samples
into a `Buffer` and doing something with the result is up to the caller.