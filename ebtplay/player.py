"""Pattern/order song player driving the beeper synthesizer.

A song is made of a parameter block, an order list, a list of packed
patterns and a list of 13-byte instruments.  The player runs its row logic
at a chiptune frame rate derived from the output sample rate and feeds
pitches, volumes and effects to :class:`~ebtplay.synth.Synth`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .synth import MixMode, StereoSample, Synth

CHANNELS = 4
FRAME_RATE = 60
MAX_EFFECTS_PER_ROW = 2

FLAG_INS = 0x01
FLAG_NOTE = 0x02
FLAG_EFFECTS = 0x04
FLAG_EFFECT_1 = 0x04
FLAG_EFFECT_2 = 0x08
FLAG_EFFECT_3 = 0x10
FLAG_LOOP = 0x20
FLAG_END = 0x40
FLAG_REPEAT = 0x80

PAN_LEFT = 0x01
PAN_RIGHT = 0x02

EFF_ARP = 0x00
EFF_SLIDE_UP = 0x01
EFF_SLIDE_DOWN = 0x02
EFF_PORTA = 0x03
EFF_PHASE = 0x07
EFF_PAN = 0x08
EFF_WAVE = 0x09
EFF_VOLUME = 0x0C
EFF_EXTRA = 0x0E
EFF_EXTRA_ARP_SPEED = 0x00
EFF_SPEED = 0x0F

PARAMS_SIZE = 5 + CHANNELS
INSTRUMENT_SIZE = 13
NO_PITCH = 0x7FFF
MAX_PITCH = 10 * 12 * 256


def _s8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


@dataclass(frozen=True)
class Song:
    """Song data: parameters, order list, patterns and instruments.

    ``params`` holds the two row speeds, the speed interleave, the order loop
    start and end, and one default pan byte per channel.  Patterns are
    indexed by the numbers in the order list; pattern number 0 means
    "keep the current pattern".
    """

    params: bytes
    orders: bytes
    patterns: Sequence[bytes]
    instruments: Sequence[bytes]

    def __post_init__(self) -> None:
        if len(self.params) < PARAMS_SIZE:
            raise ValueError(
                f"song parameters need {PARAMS_SIZE} bytes, got {len(self.params)}"
            )


@dataclass
class PlayerChannel:
    """Per-channel sequencer state."""

    base_pitch: int = 0
    base_pitch_to: int = 0
    out_pitch: int = 0
    transpose_pitch: int = 0
    slide_speed: int = 0
    porta_speed: int = 0
    arp_offset: list = field(default_factory=lambda: [0, 0])
    arp_step: int = 0
    arp_div: int = 0
    ins: int = 0
    pattern: bytes = b""
    pattern_pos: int = 0
    pattern_num: int = 0
    pattern_reached_end: bool = False
    pattern_stopped: bool = False
    repeat_cnt: int = 0
    prev_note: int = 0
    prev_ins: int = 0
    prev_effect: list = field(default_factory=lambda: [0] * MAX_EFFECTS_PER_ROW)
    prev_param: list = field(default_factory=lambda: [0] * MAX_EFFECTS_PER_ROW)

    def fetch(self) -> int:
        """Read the next pattern byte and advance."""
        value = self.pattern[self.pattern_pos]
        self.pattern_pos += 1
        return value


class Player:
    """Song player; produces stereo samples once started."""

    def __init__(self) -> None:
        self.channels = [PlayerChannel() for _ in range(CHANNELS)]
        self.song: Optional[Song] = None
        self.synth: Optional[Synth] = None
        self.frame_acc = 0
        self.frame_add = 0
        self.order_loop_start = 0
        self.order_loop_end = 0
        self.order_pos = 0
        self.order_off = 0
        self.order_loop_start_off = 0
        self.speed_row = 0
        self.speed_frame = 0
        self.speed = [0, 0]
        self.speed_interleave = 0
        self.active = False

    def _started(self) -> tuple[Song, Synth]:
        if self.song is None or self.synth is None:
            raise RuntimeError("player has not been started")
        return self.song, self.synth

    def start(self, song: Song, sample_rate: int) -> None:
        """Reset all state and begin playing ``song`` at ``sample_rate``."""
        self.__init__()
        self.song = song
        self.synth = Synth(sample_rate)
        self.frame_add = 0x10000 * FRAME_RATE // sample_rate

        params = song.params
        self.speed = [params[0], params[1]]
        self.speed_interleave = params[2]
        self.order_loop_start = params[3]
        self.order_loop_end = params[4]

        for ch, pcs in enumerate(self.channels):
            pan_default = _s8(params[5 + ch])
            if pan_default < 0:
                self.synth.set_pan(ch, abs(pan_default) << 4)
            else:
                self.synth.set_pan(ch, pan_default)
            pcs.ins = 1
            pcs.pattern_reached_end = True
            pcs.pattern_stopped = True
            pcs.base_pitch = NO_PITCH
            pcs.base_pitch_to = NO_PITCH
            pcs.arp_div = 1
            pcs.prev_note = 0x0F

        self.active = True

    def stop(self) -> None:
        self.active = False

    def instrument_byte(self, ins: int, off: int) -> int:
        """Byte ``off`` of instrument number ``ins``."""
        song, _ = self._started()
        return song.instruments[ins][off]

    def begin_note(self, ch: int, octave: int, note: int) -> None:
        """Start a note on a player channel using its current instrument."""
        _, synth = self._started()
        pcs = self.channels[ch]
        ins = [self.instrument_byte(pcs.ins, off) for off in range(INSTRUMENT_SIZE)]
        fix_pitch, base_note = ins[9], ins[10]
        aux_id = _s8(ins[11])
        aux_mix = ins[12]

        if fix_pitch:
            octave, note = divmod(base_note, 12)

        pcs.base_pitch_to = max(0, _s16((octave * 12 + note) << 8))

        synth.start(
            ch, ins[0], ins[1], ins[2], ins[3], ins[4], ins[8], ins[5], ins[6],
            ins[7], fix_pitch, base_note, aux_mix if aux_id != 0 else MixMode.NONE,
        )

        if aux_id != 0:
            ref = pcs.ins + aux_id
            aux = [self.instrument_byte(ref, off) for off in range(11)]
            synth.start(
                ch + 4, aux[0], aux[1], aux[2], aux[3], aux[4], aux[8], aux[5],
                aux[6], aux[7], aux[9], aux[10], MixMode.NONE,
            )

    def stop_note(self, ch: int) -> None:
        _, synth = self._started()
        synth.stop(ch)
        synth.stop(ch + 4)

    def _read_row(self, pcs: PlayerChannel) -> None:
        flags = pcs.fetch()
        if flags & FLAG_REPEAT:
            pcs.repeat_cnt = ((flags & 0x7F) - 1) & 0xFF
            flags = 0

        pcs.prev_ins = pcs.fetch() if flags & FLAG_INS else 0
        pcs.prev_note = pcs.fetch() if flags & FLAG_NOTE else 0

        for e in range(MAX_EFFECTS_PER_ROW):
            if flags & (FLAG_EFFECTS << e):
                pcs.prev_effect[e] = pcs.fetch()
                pcs.prev_param[e] = pcs.fetch()
            else:
                pcs.prev_effect[e] = 0
                pcs.prev_param[e] = 0

        if flags & FLAG_END:
            pcs.pattern_reached_end = True
            if flags & FLAG_LOOP:
                pcs.pattern_pos = 0
            else:
                pcs.pattern_stopped = True

    def _apply_effect(self, ch: int, pcs: PlayerChannel, kind: int, param: int) -> None:
        synth = self.synth
        if kind == EFF_ARP:
            if param > 0:
                pcs.arp_offset = [(param & 0x0F) << 8, (param >> 4) << 8]
            else:
                pcs.arp_offset = [0, 0]
        elif kind == EFF_SLIDE_UP:
            pcs.slide_speed = _s16(param * 2)
        elif kind == EFF_SLIDE_DOWN:
            pcs.slide_speed = _s16(-param * 2)
        elif kind == EFF_PORTA:
            pcs.porta_speed = _s16(param * 2)
        elif kind == EFF_PHASE:
            synth.set_phase(ch, param)
        elif kind == EFF_PAN:
            synth.set_pan(ch, param)
        elif kind == EFF_WAVE:
            synth.set_wave(ch, param)
        elif kind == EFF_VOLUME:
            synth.set_volume(ch, param)
        elif kind == EFF_EXTRA:
            if param & 0xF0 == EFF_EXTRA_ARP_SPEED:
                pcs.arp_div = max(1, param & 0x0F)
        elif kind == EFF_SPEED:
            if param & 0xF0:
                self.speed = [param >> 4, param & 0x0F]
            else:
                self.speed_interleave = param & 0x0F

    def row_fetch_and_advance(self) -> None:
        """Parse one pattern row in every channel and act on it."""
        self._started()
        for ch, pcs in enumerate(self.channels):
            if pcs.pattern_stopped:
                continue

            if pcs.repeat_cnt > 0:
                pcs.repeat_cnt -= 1
            else:
                self._read_row(pcs)

            if pcs.prev_ins > 0:
                pcs.ins = pcs.prev_ins

            if pcs.prev_note > 0:
                if (pcs.prev_note & 0x0F) < 12:
                    self.begin_note(ch, pcs.prev_note >> 4, pcs.prev_note & 0x0F)
                else:
                    self.stop_note(ch)

            for kind, param in zip(pcs.prev_effect, pcs.prev_param):
                self._apply_effect(ch, pcs, kind - 1, param)

    def order_fetch_and_advance(self) -> None:
        """Read the next order entry, assign patterns and advance the order."""
        song, _ = self._started()
        orders = song.orders

        if self.order_pos == self.order_loop_start:
            self.order_loop_start_off = self.order_off

        flags = orders[self.order_off]
        self.order_off = (self.order_off + 1) & 0xFFFF

        for ch, pcs in enumerate(self.channels):
            if flags & (0x01 << ch):
                pcs.pattern_num = orders[self.order_off]
                self.order_off = (self.order_off + 1) & 0xFFFF
            if flags & (0x10 << ch):
                pcs.transpose_pitch = _s16(orders[self.order_off] << 8)
                self.order_off = (self.order_off + 1) & 0xFFFF

            if not pcs.pattern_num:
                continue

            pcs.pattern = song.patterns[pcs.pattern_num]
            pcs.pattern_pos = 0
            pcs.pattern_reached_end = False
            pcs.pattern_stopped = False

        self.speed_row = 0
        self.order_pos += 1
        if self.order_pos >= self.order_loop_end:
            self.order_pos = self.order_loop_start
            self.order_off = self.order_loop_start_off

    def frame_advance(self) -> None:
        """Advance slides, portamento and arpeggios by one player frame."""
        _, synth = self._started()
        for ch, pcs in enumerate(self.channels):
            if pcs.porta_speed != 0:
                synth.clear_phase_reset(ch)
                synth.clear_phase_reset(ch + 4)

            if pcs.porta_speed == 0 or NO_PITCH in (pcs.base_pitch, pcs.base_pitch_to):
                pcs.base_pitch = pcs.base_pitch_to
            else:
                if pcs.base_pitch < pcs.base_pitch_to:
                    pcs.base_pitch = min(
                        _s16(pcs.base_pitch + pcs.porta_speed), pcs.base_pitch_to
                    )
                if pcs.base_pitch > pcs.base_pitch_to:
                    pcs.base_pitch = max(
                        _s16(pcs.base_pitch - pcs.porta_speed), pcs.base_pitch_to
                    )

            pcs.base_pitch_to = _s16(pcs.base_pitch_to + pcs.slide_speed)
            pcs.base_pitch_to = max(0, min(MAX_PITCH, pcs.base_pitch_to))

            out = _s16(pcs.base_pitch + pcs.transpose_pitch)
            arp_step = (pcs.arp_step // pcs.arp_div) % 3
            if arp_step == 1:
                out = _s16(out + pcs.arp_offset[0])
            elif arp_step == 2:
                out = _s16(out + pcs.arp_offset[1])

            pcs.arp_step += 1
            if pcs.arp_step >= 3 * 16:
                pcs.arp_step = 0

            pcs.out_pitch = max(0, min(MAX_PITCH, out))
            synth.set_pitch16(ch, pcs.out_pitch)
            synth.set_pitch16(ch + 4, pcs.out_pitch)

    def frame_update(self) -> None:
        """Run one player frame: fetch rows when due, then advance effects."""
        self._started()
        if self.speed_frame == 0:
            if all(pcs.pattern_reached_end for pcs in self.channels):
                self.order_fetch_and_advance()

            self.row_fetch_and_advance()

            self.speed_frame = self.speed[(self.speed_row // self.speed_interleave) & 1]
            self.speed_row = (self.speed_row + 1) & 0xFF

        if self.speed_frame:
            self.speed_frame -= 1

        self.frame_advance()

    def render_sample(self) -> StereoSample:
        """Render one stereo sample; silence when the player is not active."""
        if not self.active:
            return StereoSample()
        _, synth = self._started()

        output = synth.render_sample()

        self.frame_acc += self.frame_add
        if self.frame_acc >= 0x10000:
            self.frame_update()
            self.frame_acc -= 0x10000

        return output