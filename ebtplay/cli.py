"""Render a song to a 16-bit stereo WAV file."""

from __future__ import annotations

import argparse
import struct
import sys
import wave
from pathlib import Path
from typing import Optional, Sequence

from .frzng_point import song as default_song
from .player import Player, Song

SAMPLE_RATE = 44100
_GAIN = 1024
_LIMIT = 32767


def _clamp(value: int) -> int:
    return max(-_LIMIT, min(_LIMIT, value))


def render(song: Song, sample_rate: int, seconds: float) -> list[tuple[int, int]]:
    """Render ``seconds`` of ``song`` as a list of (left, right) 16-bit samples."""
    if seconds < 0:
        raise ValueError(f"duration must not be negative, got {seconds}")
    player = Player()
    player.start(song, sample_rate)
    frames = []
    for _ in range(int(seconds * sample_rate)):
        s = player.render_sample()
        frames.append((_clamp(s.l * _GAIN), _clamp(s.r * _GAIN)))
    player.stop()
    return frames


def write_wav(path, song: Song, sample_rate: int, seconds: float) -> int:
    """Render ``song`` into a WAV file at ``path``; return the frame count."""
    frames = render(song, sample_rate, seconds)
    flat = [value for frame in frames for value in frame]
    with wave.open(str(Path(path)), "wb") as out:
        out.setnchannels(2)
        out.setsampwidth(2)
        out.setframerate(sample_rate)
        out.writeframes(struct.pack(f"<{len(flat)}h", *flat))
    return len(frames)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ebtplay", description="Render the bundled song to a WAV file."
    )
    parser.add_argument("output", help="path of the WAV file to write")
    parser.add_argument("--rate", type=int, default=SAMPLE_RATE, help="sample rate in Hz")
    parser.add_argument("--seconds", type=float, default=30.0, help="length to render")
    args = parser.parse_args(argv)

    try:
        count = write_wav(args.output, default_song(), args.rate, args.seconds)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {count} frames to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())