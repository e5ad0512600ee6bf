"""Chiptune synthesizer, four-channel song player with a bundled song,
WAV rendering, and directory scanning helpers."""

__version__ = "1.0.0"

__all__ = ["__version__"]