import pytest

from ebtplay.player import (
    CHANNELS,
    FLAG_END,
    FLAG_INS,
    FLAG_LOOP,
    FLAG_NOTE,
    FLAG_EFFECT_1,
    FLAG_REPEAT,
    MAX_PITCH,
    NO_PITCH,
    Player,
    PlayerChannel,
    Song,
)
from ebtplay.synth import MixMode

RATE = 44100


def instrument(wave=0, volume=4, fix_pitch=0, base_note=0x24, aux_id=0, aux_mix=0):
    return bytes([wave, volume, 0, 0, 0, 0, 0, 0, 0, fix_pitch, base_note, aux_id, aux_mix])


def make_song(patterns, orders=None, params=None, instruments=None):
    if orders is None:
        orders = bytes([0x01, 1])
    if params is None:
        params = bytes([1, 1, 1, 0, 1, 0, 0, 0, 0])
    if instruments is None:
        instruments = [instrument() for _ in range(4)]
    return Song(params=params, orders=orders, patterns=[b"\x40"] + list(patterns),
                instruments=instruments)


def started(song):
    player = Player()
    player.start(song, RATE)
    return player


def test_song_requires_full_params():
    with pytest.raises(ValueError):
        Song(params=b"\x01\x02", orders=b"", patterns=[], instruments=[])


def test_start_initial_state():
    player = started(make_song([b"\x40"]))
    assert player.active
    for pcs in player.channels:
        assert pcs.ins == 1
        assert pcs.base_pitch == NO_PITCH
        assert pcs.base_pitch_to == NO_PITCH
        assert pcs.arp_div == 1
        assert pcs.prev_note == 0x0F
        assert pcs.pattern_reached_end and pcs.pattern_stopped
    assert player.frame_add == 0x10000 * 60 // RATE


def test_start_negative_pan_goes_right_half():
    params = bytes([1, 1, 1, 0, 1, 0xFC, 0x01, 0, 0])
    player = started(make_song([b"\x40"], params=params))
    synth = player.synth
    assert synth.channels[0].volume_l == 4
    assert synth.channels[0].volume_r == 0
    assert synth.channels[1].volume_r == 4
    assert synth.channels[1].volume_l == 3


def test_not_started_raises():
    player = Player()
    with pytest.raises(RuntimeError):
        player.frame_update()


def test_inactive_player_renders_silence():
    player = started(make_song([b"\x40"]))
    player.stop()
    sample = player.render_sample()
    assert (sample.l, sample.r) == (0, 0)
    assert player.frame_acc == 0


def test_row_sets_instrument_and_starts_note():
    pattern = bytes([FLAG_INS | FLAG_NOTE, 2, 0x24, FLAG_END])
    player = started(make_song([pattern]))
    player.frame_update()
    pcs = player.channels[0]
    assert pcs.ins == 2
    assert pcs.prev_note == 0x24
    assert pcs.base_pitch_to == (2 * 12 + 4) << 8
    assert player.synth.channels[0].running
    assert player.synth.channels[0].aux_mix == MixMode.NONE
    assert not player.synth.channels[4].running


def test_end_flag_stops_pattern_and_order_loops():
    pattern = bytes([FLAG_NOTE, 0x24, FLAG_END])
    player = started(make_song([pattern]))
    player.frame_update()
    assert player.order_pos == 0 and player.order_off == 0
    player.frame_update()
    assert player.channels[0].pattern_stopped
    assert player.channels[0].pattern_reached_end


def test_loop_flag_rewinds_pattern():
    pattern = bytes([FLAG_NOTE, 0x24, FLAG_END | FLAG_LOOP])
    player = started(make_song([pattern]))
    player.order_fetch_and_advance()
    player.row_fetch_and_advance()
    player.row_fetch_and_advance()
    pcs = player.channels[0]
    assert pcs.pattern_reached_end
    assert not pcs.pattern_stopped
    assert pcs.pattern_pos == 0


def test_note_off_stops_channel():
    pattern = bytes([FLAG_NOTE, 0x24, FLAG_NOTE, 0x2C, FLAG_END])
    player = started(make_song([pattern]))
    player.order_fetch_and_advance()
    player.row_fetch_and_advance()
    assert player.synth.channels[0].running
    player.row_fetch_and_advance()
    assert not player.synth.channels[0].running


def test_repeat_skips_rows():
    pattern = bytes([FLAG_REPEAT | 3, FLAG_NOTE, 0x24, FLAG_END])
    player = started(make_song([pattern]))
    player.order_fetch_and_advance()
    for _ in range(3):
        player.row_fetch_and_advance()
        assert player.channels[0].prev_note == 0
    player.row_fetch_and_advance()
    assert player.channels[0].prev_note == 0x24


def test_order_transpose_and_unused_channels():
    orders = bytes([0x11, 1, 0xFE])
    player = started(make_song([b"\x40"], orders=orders))
    player.order_fetch_and_advance()
    assert player.channels[0].transpose_pitch == -2 * 256
    assert player.channels[0].pattern_num == 1
    for pcs in player.channels[1:]:
        assert pcs.pattern_stopped


@pytest.mark.parametrize("effect, attr, sign", [(2, "slide_speed", 1), (3, "slide_speed", -1),
                                                  (4, "porta_speed", 1)])
def test_slide_and_porta_effects(effect, attr, sign):
    param = 5
    pattern = bytes([FLAG_EFFECT_1, effect, param, FLAG_END])
    player = started(make_song([pattern]))
    player.order_fetch_and_advance()
    player.row_fetch_and_advance()
    assert getattr(player.channels[0], attr) == sign * 2 * param


def test_speed_and_volume_effects():
    pattern = bytes([FLAG_EFFECT_1 | (FLAG_EFFECT_1 << 1), 0x10, 0x35, 0x0D, 9, FLAG_END])
    player = started(make_song([pattern]))
    player.order_fetch_and_advance()
    player.row_fetch_and_advance()
    assert player.speed == [3, 5]
    assert player.synth.channels[0].volume == 4


def test_arp_speed_effect_clamps_to_one():
    pattern = bytes([FLAG_EFFECT_1, 0x0F, 0x00, FLAG_END])
    player = started(make_song([pattern]))
    player.channels[0].arp_div = 7
    player.order_fetch_and_advance()
    player.row_fetch_and_advance()
    assert player.channels[0].arp_div == 1


def test_fixed_pitch_ignores_note():
    instruments = [instrument(), instrument(fix_pitch=1, base_note=0x30)]
    player = started(make_song([b"\x40"], instruments=instruments))
    player.begin_note(0, 2, 4)
    first = player.channels[0].base_pitch_to
    player.begin_note(0, 5, 7)
    assert player.channels[0].base_pitch_to == first == 0x30 << 8


def test_aux_instrument_starts_partner_channel():
    instruments = [instrument(), instrument(aux_id=1, aux_mix=MixMode.SUB), instrument(wave=3)]
    player = started(make_song([b"\x40"], instruments=instruments))
    player.begin_note(1, 3, 0)
    assert player.synth.channels[1].aux_mix == MixMode.SUB
    assert player.synth.channels[5].running
    assert player.synth.channels[5].wave == 3
    player.stop_note(1)
    assert not player.synth.channels[1].running
    assert not player.synth.channels[5].running


def test_frame_advance_porta_moves_toward_target():
    player = started(make_song([b"\x40"]))
    pcs = player.channels[0]
    pcs.base_pitch = 0
    pcs.base_pitch_to = 1000
    pcs.porta_speed = 300
    seen = []
    for _ in range(5):
        player.frame_advance()
        seen.append(pcs.base_pitch)
    assert seen == sorted(seen)
    assert seen[-1] == 1000
    assert all(p <= 1000 for p in seen)


def test_frame_advance_clamps_pitch():
    player = started(make_song([b"\x40"]))
    pcs = player.channels[0]
    pcs.base_pitch_to = MAX_PITCH - 10
    pcs.slide_speed = 100
    for _ in range(3):
        player.frame_advance()
    assert pcs.base_pitch_to == MAX_PITCH
    assert 0 <= pcs.out_pitch <= MAX_PITCH


def test_arp_cycles_offsets():
    player = started(make_song([b"\x40"]))
    pcs = player.channels[0]
    pcs.base_pitch_to = 0x1000
    pcs.arp_offset = [0x300, 0x700]
    outs = []
    for _ in range(3):
        player.frame_advance()
        outs.append(pcs.out_pitch)
    assert outs == [0x1000, 0x1300, 0x1700]


def test_render_advances_frames():
    pattern = bytes([FLAG_NOTE, 0x24, FLAG_END | FLAG_LOOP])
    player = started(make_song([pattern]))
    samples = [player.render_sample() for _ in range(2000)]
    assert player.channels[0].prev_note in (0, 0x24)
    assert player.order_pos == 0
    assert any(s.l > 0 for s in samples)
    assert all(0 <= s.l <= 4 * CHANNELS and 0 <= s.r <= 4 * CHANNELS for s in samples)


def test_player_channel_fetch_advances():
    pcs = PlayerChannel(pattern=b"\x01\x02")
    assert pcs.fetch() == 1
    assert pcs.fetch() == 2
    with pytest.raises(IndexError):
        pcs.fetch()