# ebtplay

A small chiptune engine: an eight-voice pulse/noise synthesizer with
sixty-four waveforms, and a four-channel pattern player that drives it
from compact song data. One complete song, "Frozen Point", is bundled
with the package and can be rendered to a WAV file.

Everything is pure Python and uses only the standard library.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## From the command line

The `ebtplay` command renders the bundled song to a 16-bit stereo WAV
file:

    ebtplay frozen.wav
    ebtplay frozen.wav --rate 22050 --seconds 10

- `output` — path of the WAV file to write
- `--rate` — sample rate in Hz (default 44100)
- `--seconds` — length to render (default 30)

On success it prints the number of frames written. An invalid sample
rate, a negative duration or a file that cannot be written is reported
as `Error: ...` on standard error with exit status 1.

## From Python

Render the bundled song into a WAV file (returns the frame count):

```python
from ebtplay.cli import write_wav
from ebtplay.frzng_point import song

write_wav("frozen.wav", song(), 44100, 30)
```

Or get the samples as a list of `(left, right)` 16-bit values:

```python
from ebtplay.cli import render
from ebtplay.frzng_point import song

samples = render(song(), 44100, 5)
```

Drive the player sample by sample; each call returns a `StereoSample`
with small integer `l` and `r` levels:

```python
from ebtplay.player import Player
from ebtplay.frzng_point import song

player = Player()
player.start(song(), 44100)
for _ in range(44100):
    sample = player.render_sample()
player.stop()
```

Songs are `ebtplay.player.Song` objects made of a parameter block
(two row speeds, speed interleave, order loop start and end, one default
pan byte per channel), a packed order list, a sequence of packed
patterns and a sequence of 13-byte instruments. The tables of the
bundled song are available from `ebtplay.frzng_tables` and
`ebtplay.frzng_point`.

The synthesizer can also be played directly, without a song:

```python
from ebtplay.synth import MixMode, Synth

synth = Synth(44100)
synth.set_pan(0, 0)
synth.start(0, 0x00, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, MixMode.NONE)
synth.set_pitch16(0, (4 * 12) << 8)
sample = synth.render_sample()
```

Pitches given to the synthesizer are in 8.8 fixed point: the high byte
is the semitone, the low byte a fraction of a semitone. Only voices 0–3
are mixed to the output; voices 4–7 can be added to or subtracted from
their partner with `MixMode.ADD` or `MixMode.SUB`. Sample rates below
1024 Hz are rejected with `ValueError`.

## Directory helpers

`ebtplay.dirscan` lists directories with optional filtering and
ordering, and provides a version-aware string comparison:

```python
from ebtplay.dirscan import EntryType, scandir, strverscmp, versionsort

assert strverscmp("file9", "file10") < 0

files = scandir(".", lambda e: e.type == EntryType.REG, versionsort)
```

`scandir` includes the `.` and `..` entries, keeps everything when no
predicate is given, and keeps read order when no comparison is given.
`alphasort` orders by the current locale's collation.

## What it does not do

The package does not play sound through an audio device; it only
computes samples and writes WAV files. It has no song editor and no
loader for song files: the only song it ships is the bundled one, and
other songs have to be built as `Song` objects in Python.