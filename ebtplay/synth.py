"""Eight-channel 1-bit wavetable beeper synthesizer.

Pitches arrive from the player as 16-bit 8:8 values (semitone:fraction),
are kept internally as 32-bit 8:16 values and are turned into 16:16 phase
increments.  Only the first four channels are mixed to the output; the
remaining four serve as auxiliary partners that can be added to or
subtracted from their counterpart.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum

CHANNELS = 8
FRAME_RATE = 240
WAVEFORMS_MAX = 64
ACC_PRECISION = 14

_MASK32 = 0xFFFFFFFF
_PITCH_LIMIT = 32767 << 8
_MIN_SAMPLE_RATE = 1 << 10

SINE = (
    0, 3, 6, 9, 12, 15, 18, 21,
    24, 27, 30, 33, 36, 39, 42, 45,
    48, 51, 54, 57, 59, 62, 65, 67,
    70, 73, 75, 78, 80, 82, 85, 87,
    89, 91, 94, 96, 98, 100, 102, 103,
    105, 107, 108, 110, 112, 113, 114, 116,
    117, 118, 119, 120, 121, 122, 123, 123,
    124, 125, 125, 126, 126, 126, 126, 126,
    127, 126, 126, 126, 126, 126, 125, 125,
    124, 123, 123, 122, 121, 120, 119, 118,
    117, 116, 114, 113, 112, 110, 108, 107,
    105, 103, 102, 100, 98, 96, 94, 91,
    89, 87, 85, 82, 80, 78, 75, 73,
    70, 67, 65, 62, 59, 57, 54, 51,
    48, 45, 42, 39, 36, 33, 30, 27,
    24, 21, 18, 15, 12, 9, 6, 3,
    0, -3, -6, -9, -12, -15, -18, -21,
    -24, -27, -30, -33, -36, -39, -42, -45,
    -48, -51, -54, -57, -59, -62, -65, -67,
    -70, -73, -75, -78, -80, -82, -85, -87,
    -89, -91, -94, -96, -98, -100, -102, -103,
    -105, -107, -108, -110, -112, -113, -114, -116,
    -117, -118, -119, -120, -121, -122, -123, -123,
    -124, -125, -125, -126, -126, -126, -126, -126,
    -127, -126, -126, -126, -126, -126, -125, -125,
    -124, -123, -123, -122, -121, -120, -119, -118,
    -117, -116, -114, -113, -112, -110, -108, -107,
    -105, -103, -102, -100, -98, -96, -94, -91,
    -89, -87, -85, -82, -80, -78, -75, -73,
    -70, -67, -65, -62, -59, -57, -54, -51,
    -48, -45, -42, -39, -36, -33, -30, -27,
    -24, -21, -18, -15, -12, -9, -6, -3,
)


def _float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


# Top-octave note frequencies in fixed point, rounded through single precision.
_FREQ_TABLE = tuple(
    int(_float32(hz) * (1 << ACC_PRECISION))
    for hz in (
        2093.0, 2217.4, 2349.2, 2489.0, 2637.0, 2793.8,
        2960.0, 3136.0, 3322.4, 3520.0, 3729.2, 3951.0,
    )
)


def _s8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _s32(value: int) -> int:
    value &= _MASK32
    return value - 0x100000000 if value & 0x80000000 else value


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _rol(x: int) -> int:
    return ((x << 1) | (x >> 7)) & 0xFF


def _ror(x: int) -> int:
    return ((x >> 1) | (x << 7)) & 0xFF


def _adjust_low(a: int) -> int:
    if (a & 0x0F) >= 0x0A:
        a = (a + 0x06) & 0xFF
    return a


def _adjust(a: int) -> int:
    a = _adjust_low(a)
    if (a & 0xF0) >= 0xA0:
        a = (a + 0x60) & 0xFF
    return a


class MixMode(IntEnum):
    """How an auxiliary channel is combined with its partner."""

    ADD = 0
    SUB = 1
    NONE = 2


@dataclass
class StereoSample:
    """One rendered output sample."""

    l: int = 0
    r: int = 0


@dataclass
class SynthChannel:
    """State of one synthesizer voice."""

    add: int = 0
    acc: int = 0
    add_pitch: int = 0
    base_pitch: int = 0
    slide_pitch: int = 0
    slide_delta: int = 0
    mod_ptr: int = 0
    mod_ptr_delta: int = 0
    mod_depth: int = 0
    mod_delay: int = 0
    duration: int = 0
    base_note: int = 0
    fix_pitch: int = 0
    offset: int = 0
    detune: int = 0
    volume: int = 0
    volume_l: int = 0
    volume_r: int = 0
    wave: int = 0
    acc_phase_reset: bool = False
    running: bool = False
    output: int = 0
    aux_mix: int = 0


@dataclass(init=False)
class Synth:
    """The synthesizer: eight voices, a modulation clock and a frame clock."""

    sample_rate: int
    channels: list = field(default_factory=list)
    mod_acc: int = 0
    mod_add: int = 0
    frame_acc: int = 0
    frame_add: int = 0

    def __init__(self, sample_rate: int) -> None:
        if sample_rate < _MIN_SAMPLE_RATE:
            raise ValueError(
                f"sample rate must be at least {_MIN_SAMPLE_RATE}, got {sample_rate}"
            )
        self.channels = []
        self.reset()
        self.sample_rate = sample_rate
        self.mod_acc = 0
        self.mod_add = 0x10000 // sample_rate
        self.frame_acc = 0
        self.frame_add = 0x10000 * FRAME_RATE // sample_rate

    def reset(self) -> None:
        """Silence and clear every channel and restart the modulation phase."""
        self.channels = [SynthChannel() for _ in range(CHANNELS)]
        self.mod_acc = 0

    def _channel(self, ch: int) -> SynthChannel:
        if not 0 <= ch < CHANNELS:
            raise IndexError(f"synth channel {ch} out of range 0..{CHANNELS - 1}")
        return self.channels[ch]

    def pitch32_to_add32(self, pitch32: int) -> int:
        """Convert an 8:16 pitch to a 16:16 phase increment."""
        if pitch32 < 0:
            raise ValueError("pitch must not be negative")
        semitones = pitch32 >> 16
        octave = semitones // 12
        note = semitones % 12
        cent = (pitch32 >> 8) & 0xFF

        div = ((1 << 18) >> octave) & _MASK32 if octave < 32 else 0
        if div == 0:
            div = 1

        hz1 = _FREQ_TABLE[note] // div

        note += 1
        if note >= 12:
            note = 0
            div >>= 1
            if div == 0:
                div = 1

        hz2 = _FREQ_TABLE[note] // div

        delta = ((hz2 - hz1) & _MASK32) * cent & _MASK32
        hz = _s32(hz1 + (delta >> 8))

        add = _cdiv(_s32(hz << 14), self.sample_rate >> 10)
        return add & _MASK32

    def set_pitch16(self, ch: int, pitch16: int) -> None:
        """Set the base pitch of a channel from an 8:8 player pitch."""
        scs = self._channel(ch)
        pitch16 = _s16(pitch16)
        if scs.fix_pitch:
            pitch16 = _s16(scs.base_note << 8)
        pitch16 = _s16(pitch16 + scs.offset * 256)
        pitch16 = _s16(pitch16 + scs.detune * 2)
        scs.base_pitch = pitch16 * 256

    def set_wave(self, ch: int, wave: int) -> None:
        self._channel(ch).wave = wave & 0xFF

    def set_volume(self, ch: int, volume: int) -> None:
        """Set a channel volume, limited to 4."""
        self._channel(ch).volume = min(volume & 0xFF, 4)

    def get_volume(self, ch: int) -> int:
        """Volume of a channel, or 0 if it is not sounding."""
        scs = self._channel(ch)
        return scs.volume if scs.running else 0

    def set_phase(self, ch: int, phase: int) -> None:
        self._channel(ch).acc = (phase & 0xFF) << 16

    def clear_phase_reset(self, ch: int) -> None:
        self._channel(ch).acc_phase_reset = False

    def set_pan(self, ch: int, pan: int) -> None:
        """Set the left/right attenuation from a pan byte (low nibble left, high right)."""
        scs = self._channel(ch)
        pan &= 0xFF
        if pan == 0 or ((pan & 0xF0) and (pan & 0x0F)):
            scs.volume_l = 4
            scs.volume_r = 4
        else:
            scs.volume_l = (4 - (pan & 0x0F)) & 0xFF
            scs.volume_r = (4 - (pan >> 4)) & 0xFF

    def start(
        self,
        ch: int,
        wave: int,
        volume: int,
        offset: int,
        detune: int,
        slide: int,
        cut_time: int,
        mod_delay: int,
        mod_speed: int,
        mod_depth: int,
        fix_pitch: int,
        base_note: int,
        aux_mix: int,
    ) -> None:
        """Start a note on a channel with the given instrument parameters."""
        scs = self._channel(ch)
        scs.acc_phase_reset = True
        scs.volume = volume & 0xFF
        scs.wave = wave & 0xFF
        scs.slide_pitch = 0
        scs.slide_delta = _s8(slide) * 1024
        scs.duration = _s16((cut_time & 0xFF) << 1)
        scs.mod_ptr = 0
        scs.mod_ptr_delta = (mod_speed & 0xFF) << 13
        scs.mod_depth = (mod_depth & 0xFF) << 4
        scs.mod_delay = (mod_delay & 0xFF) << 2
        scs.offset = _s8(offset)
        scs.detune = _s8(detune)
        scs.fix_pitch = fix_pitch & 0xFF
        scs.base_note = base_note & 0xFF
        scs.aux_mix = int(aux_mix) & 0xFF
        scs.running = True

    def stop(self, ch: int) -> None:
        self._channel(ch).running = False

    def frame_update(self) -> None:
        """Advance slides, vibrato and note durations by one synth frame."""
        for scs in self.channels:
            if not scs.running:
                continue

            new_slide = scs.slide_pitch + scs.slide_delta
            scs.slide_pitch = max(-_PITCH_LIMIT, min(_PITCH_LIMIT, new_slide))

            internal_pitch = scs.base_pitch + scs.slide_pitch

            if scs.duration > 0:
                scs.duration -= 1
                if not scs.duration:
                    scs.running = False

            if scs.mod_delay:
                scs.mod_delay -= 1
            else:
                internal_pitch += SINE[(scs.mod_ptr >> 16) & 0xFF] * scs.mod_depth
                scs.mod_ptr = _s32(scs.mod_ptr + scs.mod_ptr_delta)

            internal_pitch = max(0, min(_PITCH_LIMIT, internal_pitch))

            if scs.add_pitch != internal_pitch:
                scs.add_pitch = internal_pitch
                scs.add = self.pitch32_to_add32(internal_pitch)

    def render_sample(self) -> StereoSample:
        """Render one stereo sample and advance the internal clocks."""
        output = StereoSample()

        mod_l = (self.mod_acc >> 9) & 0xFF
        mod_h = (self.mod_acc >> 11) & 0xFF
        self.mod_acc = _s32(self.mod_acc + self.mod_add)

        for ch, scs in enumerate(self.channels):
            if not scs.running:
                continue

            if scs.acc_phase_reset:
                scs.acc_phase_reset = False
                scs.acc = 0

            scs.acc = (scs.acc + scs.add) & _MASK32

            l = (scs.acc >> ACC_PRECISION) & 0xFF
            h = (scs.acc >> (ACC_PRECISION + 8)) & 0xFF
            a, h, insert_h = _waveform(scs.wave, h, l, mod_l, mod_h)

            if insert_h:
                shift = ACC_PRECISION + 8
                scs.acc = (scs.acc & ~(0xFF << shift) & _MASK32) | (h << shift)

            scs.output = a & 0x10

            if ch < CHANNELS // 2:
                volume = scs.volume if scs.output else 0
                aux = self.channels[ch + 4]
                if scs.aux_mix == MixMode.ADD and aux.output:
                    volume += aux.volume
                elif scs.aux_mix == MixMode.SUB and aux.output:
                    volume -= aux.volume
                volume = max(0, min(4, volume))
                output.l += volume * scs.volume_l // 4
                output.r += volume * scs.volume_r // 4

        self.frame_acc += self.frame_add
        if self.frame_acc >= 0x10000:
            self.frame_update()
            self.frame_acc -= 0x10000

        return output


def _waveform(wave: int, h: int, l: int, mod_l: int, mod_h: int) -> tuple[int, int, bool]:
    """Shape the phase bytes into an output byte.

    Returns the output byte, the (possibly altered) high phase byte and
    whether the altered byte has to be written back into the accumulator.
    """
    a = h
    insert_h = False

    if wave == 0x00:
        pass
    elif wave == 0x01:
        a = _adjust(a) & h
    elif wave == 0x02:
        a = _rol(a) & h
    elif wave == 0x03:
        a = (_adjust(a) ^ 0xFF) & h
    elif wave == 0x04:
        a = _ror(((a + 2) ^ h) & 0xFF)
    elif wave == 0x05:
        a = _ror(((a + 1) ^ h) & 0xFF)
    elif wave == 0x06:
        a = (((a + mod_l) ^ 0xFF) | h) & 0xFF
    elif wave == 0x07:
        a = (((a + mod_h) ^ 0xFF) | h) & 0xFF
    elif wave == 0x08:
        a = ((((a + mod_h) ^ 0xFF) - 1) & h) & 0xFF
    elif wave == 0x09:
        a = (a + mod_h) & h
    elif wave == 0x0A:
        a = _rol((a + mod_h) & 0xFF) ^ h
    elif wave == 0x0B:
        a = _ror((a + mod_h) & 0xFF) ^ h
    elif wave == 0x0C:
        a = _ror((a + mod_l) & 0xFF) ^ h
    elif wave == 0x0D:
        a = (_rol(_adjust(a)) ^ 0xFF) ^ h
    elif wave == 0x0E:
        a = (_rol(_rol(_adjust(a))) ^ 0xFF) ^ h
    elif wave == 0x0F:
        a = (_adjust(a) ^ 0xFF) ^ h
    elif wave == 0x10:
        a = h if a & 2 else 0
    elif wave == 0x11:
        a = _rol(_rol(_rol(a)) ^ h)
    elif wave == 0x12:
        a = _rol(h if a & 1 else 0)
    elif wave == 0x13:
        a = h if (_adjust_low(a) & 0xF0) >= 0xA0 else 0
    elif wave == 0x14:
        a = h if a & 64 else 0
    elif wave == 0x15:
        a = (_ror(_ror(_adjust(a))) ^ 0xFF) | h
    elif wave == 0x16:
        a = _ror(_ror(_adjust(a))) & h
    elif wave == 0x17:
        a = (_rol(_rol(_adjust(a))) ^ 0xFF) & h
    elif wave == 0x18:
        a = (_rol(_adjust(a)) ^ 0xFF) & h
    elif wave == 0x19:
        a = (_ror(_ror(_adjust(a))) ^ 0xFF) ^ h
    elif wave == 0x1A:
        a = (0xFF if (_adjust_low(a) & 0xF0) >= 0xA0 else 0) ^ h
    elif wave == 0x1B:
        a = _rol(h if a & 64 else 0)
    elif wave == 0x1C:
        h = _rol(h)
        insert_h = True
        a &= h
    elif wave == 0x1D:
        h = _rol(h)
        insert_h = True
        a = 0xFF if h & 1 else h
    elif wave == 0x1E:
        h = _rol(h)
        insert_h = True
        a ^= l
    elif wave == 0x1F:
        h = _rol(h)
        insert_h = True
        a = (a | h) ^ l
    elif wave == 0x20:
        a = ((a + mod_h) >> 1) & h
    elif wave == 0x21:
        a = ((((a + mod_h) >> 1) ^ 0xFF) ^ h) & 0xFF
    elif wave == 0x22:
        a = ((a + mod_h) & 0xFF) ^ h
    elif wave == 0x23:
        a = (_ror(_ror(_adjust(a))) ^ 0xFF) & h
    elif wave == 0x24:
        a = (_ror(_adjust(a)) ^ 0xFF) & h
    elif wave == 0x25:
        a = a ^ (a >> 1) ^ (a >> 2)
    elif wave == 0x26:
        a = ((a ^ (a >> 1)) + mod_l) & 0xFF
    elif wave == 0x27:
        a = ((a ^ (a >> 2)) + mod_l) & 0xFF
    elif wave == 0x28:
        a = ((a ^ (a >> 1)) + mod_h) & 0xFF
    elif wave == 0x29:
        a = ((a ^ (a >> 2)) + mod_h) & 0xFF
    elif wave == 0x2A:
        a = ((a ^ (a >> 1) ^ (a >> 2)) + mod_l) & 0xFF
    elif wave == 0x2B:
        a = (a + (l << 3) + mod_l) & 0xFF
    elif wave == 0x2C:
        a = (a + (l << 4) + mod_l) & 0xFF
    elif wave == 0x2D:
        a = (a + (a >> 1) + (a >> 2) + mod_l) & 0xFF
    elif wave == 0x2E:
        h = _rol(h)
        insert_h = True
        a = ((a & h) + mod_l) & 0xFF
    elif wave == 0x2F:
        h = _rol(h)
        insert_h = True
        a = ((a & h) + mod_h) & 0xFF
    elif wave == 0x30:
        h = ((h << 1) + mod_h) & 0xFF
        insert_h = True
    elif wave == 0x31:
        h ^= l
        insert_h = True
    elif 0x32 <= wave <= 0x38:
        h ^= l >> (wave - 0x31)
        insert_h = True
    elif wave == 0x39:
        h = (h + (l ^ h)) & 0xFF
        insert_h = True
    elif wave == 0x3A:
        h = (h - (l ^ h)) & 0xFF
        insert_h = True
    elif wave == 0x3B:
        h = (h + (l ^ h) + mod_l) & 0xFF
        insert_h = True
    elif wave == 0x3C:
        h = (h + (l ^ h) + mod_h) & 0xFF
        insert_h = True
    elif wave == 0x3D:
        a &= (l >> 4) + mod_l + mod_h
    elif wave == 0x3E:
        a &= ((l >> 3) + mod_l) ^ mod_h
    elif wave == 0x3F:
        a &= (l >> 2) + mod_l - mod_h

    return a & 0xFF, h, insert_h