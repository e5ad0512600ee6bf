"""Song tables for "Frozen Point": parameters, order list, instruments
and the first half of the pattern bank.

Every table is a compact byte string in the player's packed format.
Patterns 48 and up live with the assembled song.
"""

from __future__ import annotations

_PARAMS = bytes.fromhex("04 03 01 52 53 00 fc 04 00")

_ORDERS = bytes.fromhex(
    """
    0f01020304 07050607 07080903 070a0b07
    0f0102030c 0f0506070d 0f0809030c 0f0a0e070d
    0f0f10110c 0f1213140d 0f1516110c 0f1718190d
    0f0f10110c 0f121a140d 0f1516110c 0f171b1c0d
    0f1d1e1f04 07202122 0b23240c 0b252627
    0f1d28290c 032021 032324 032a2b
    072c2d2e 032f30 033132 0b33340d
    0b2c2d0c 032f30 033132 0f33343536
    0f37383904 073a3b3c 073d3e3f 07404142
    07434445 07464748 07494a4b 074c4d4e
    0f4f50290d 03513b 03083e 035241
    072c5354 035147 03084a 07555657
    0f0f10110c 0f1213140d 0f1516110c 0f1718190d
    0f0f10110c 0f121a140d 0f1516110c 0f171b1c0d
    0f2c2d580c 032f30 033132 0b33340d
    0b2c2d0c 032f30 033132 0f3334595a
    0f3738580c 033a3b 033d3e 0b40410d
    0b43440c 034647 03494a 074c4d5b
    0f4f50585c 03513b 03083e 035241
    032c53 035147 03084a 0f5556595d
    0f375e1f5f 0b1f1f60
    ff0000000000000000
    """
)

# Instruments 0..12 differ only in their waveform.
_PLAIN_WAVES = (0x00, 0x02, 0x03, 0x04, 0x05, 0x07, 0x08, 0x09, 0x0B, 0x17, 0x1B, 0x1C, 0x1D)

_INSTRUMENTS = tuple(
    bytes((wave, 0x04, 0, 0, 0, 0, 0, 0, 0, 0, 0x24, 0, 0)) for wave in _PLAIN_WAVES
) + (
    bytes.fromhex("00 04 00 00 8c 00 00 00 06 01 2b 00 00"),
    bytes.fromhex("1c 04 00 00 00 00 00 00 02 01 48 00 00"),
)

_PATTERN_HEX = (
    # 0
    "00 8e 40",
    "030620 020c 0220 020c 0230 020c 0220 020c 0220 020c 0230 020c 0220 020c 0220 020c "
    "0230 020c 0220 020c 0220 020c 0230 020c 0220 020c 0220 020c 0230 020c 0220 420c",
    "020c 00 030430 020c 0230 020c 0230 020c 00 81 030330 020c 0230 020c 0230 020c "
    "00 81 030230 020c 0230 020c 0230 020c 00 81 030130 020c 0230 020c 0230 420c",
    "00 83 030543 020c 00 81 030443 020c 030543 020c 00 81 030443 020c 030543 020c "
    "00 81 030443 020c 030543 020c 00 81 030443 020c 030543 020c 0243 420c",
    "030d40 00 86 0240 00 86 0240 00 86 0240 00 85 40",
    # 5
    "0218 020c 0218 020c 0228 020c 0218 020c 0218 020c 0228 020c 0218 020c 0218 020c "
    "0228 020c 0218 020c 0218 020c 0228 020c 0218 020c 0218 020c 0228 020c 0218 420c",
    "020c 00 030128 020c 0228 020c 0228 020c 00 81 030228 020c 0228 020c 0228 020c "
    "00 81 030328 020c 0228 020c 0228 020c 00 81 030428 020c 0228 020c 0228 420c",
    "030443 020c 0243 020c 00 9a 40",
    "021a 020c 021a 020c 022a 020c 021a 020c 021a 020c 022a 020c 021a 020c 021a 020c "
    "022a 020c 021a 020c 021a 020c 022a 020c 021a 020c 021a 020c 022a 020c 021a 420c",
    "020c 00 03042a 020c 022a 020c 022a 020c 00 81 03032a 020c 022a 020c 022a 020c "
    "00 81 03022a 020c 022a 020c 022a 020c 00 81 03012a 020c 022a 020c 022a 420c",
    # 10
    "0217 020c 0217 020c 0227 020c 0217 020c 0217 020c 0227 020c 0217 020c 0217 020c "
    "0227 020c 0217 020c 0217 020c 0227 020c 0217 020c 0217 020c 0227 020c 0217 420c",
    "020c 00 030127 020c 0227 020c 0227 020c 00 81 030227 020c 0227 020c 0227 020c "
    "00 81 030327 020c 0227 020c 0227 020c 00 81 030427 020c 0227 020c 0227 420c",
    "030d40 00 82 030e40 00 82 030d40 00 82 030e40 00 82 030d40 00 82 030e40 00 82 "
    "030d40 00 82 030e40 00 81 40",
    "030d40 00 82 030e40 00 0240 00 030d40 00 82 030e40 00 82 030d40 00 82 030e40 00 "
    "0240 00 030d40 00 82 030e40 00 81 40",
    "020c 00 030127 020c 0227 020c 0227 020c 00 81 030227 020c 0227 020c 0227 020c "
    "030c50 0250 0250 020c 0250 020c 0250 020c 0250 0250 0250 020c 0250 020c 0250 420c",
    # 15
    "030620 020c 0220 020c 030930 020c 030620 020c 0220 020c 030930 020c 030620 020c "
    "0220 020c 030930 020c 030620 020c 0220 020c 030930 020c 030620 020c 0220 020c "
    "030940 020c 0240 420c",
    "020c 00 030430 020c 0220 020c 0230 020c 030c50 020c 030330 020c 0220 020c 0230 020c "
    "00 81 030230 020c 0220 020c 0230 020c 030c50 020c 030130 020c 0220 020c 0230 420c",
    "020c 00 82 030543 020c 00 81 030443 020c 030543 020c 00 81 030443 020c 030543 020c "
    "00 81 030443 020c 030543 020c 00 81 030443 020c 030543 020c 0243 420c",
    "030618 020c 0218 020c 030928 020c 030618 020c 0218 020c 030928 020c 030618 020c "
    "0218 020c 030928 020c 030618 020c 0218 020c 030928 020c 030618 020c 0218 020c "
    "030938 020c 0238 420c",
    "020c 00 030128 020c 0218 020c 0228 020c 030c50 020c 030228 020c 0218 020c 0228 020c "
    "00 81 030328 020c 0218 020c 0228 020c 030c50 020c 030428 020c 0218 020c 0228 420c",
    # 20
    "030443 020c 0243 020c 030a43 020c 00 83 0242 020c 00 83 0243 020c 00 85 0238 00 82 "
    "023a 00 020c 40",
    "03061a 020c 021a 020c 03092a 020c 03061a 020c 021a 020c 03092a 020c 03061a 020c "
    "021a 020c 03092a 020c 03061a 020c 021a 020c 03092a 020c 03061a 020c 021a 020c "
    "03093a 020c 023a 420c",
    "020c 00 03042a 020c 021a 020c 022a 020c 030c50 020c 03032a 020c 021a 020c 022a 020c "
    "00 81 03022a 020c 021a 020c 022a 020c 030c50 020c 03012a 020c 021a 020c 022a 420c",
    "030617 020c 0217 020c 030927 020c 030617 020c 0217 020c 030927 020c 030617 020c "
    "0217 020c 030927 020c 030617 020c 0217 020c 030927 020c 030617 020c 0217 020c "
    "030937 020c 0237 420c",
    "020c 00 030127 020c 0217 020c 0227 020c 030c50 020c 030227 020c 0217 020c 0227 020c "
    "00 81 030327 020c 0217 020c 0227 020c 030c50 020c 030427 020c 0217 020c 0227 420c",
    # 25
    "030443 020c 0243 020c 030a43 020c 00 83 0242 020c 00 83 0243 020c 00 85 0237 00 82 "
    "0240 00 81 40",
    "00 81 030128 020c 0218 020c 0228 020c 030c50 020c 030228 020c 0218 020c 0228 020c "
    "00 81 030328 020c 0218 020c 0228 020c 030c50 020c 030428 020c 0218 020c 0228 420c",
    "020c 00 030127 020c 0217 020c 0227 020c 030c50 020c 030227 020c 0217 020c 0227 020c "
    "00 81 030327 020c 0217 020c 0227 020c 030c50 020c 030427 020c 030c50 020c 0250 420c",
    "030443 020c 0243 020c 030a43 020c 00 83 0242 020c 00 83 0243 020c 00 85 0237 00 82 "
    "0230 00 81 40",
    "030620 020c 0220 020c 0230 020c 0220 020c 00 81 0220 020c 0220 020c 0230 020c "
    "0220 020c 0220 020c 00 8a 40",
    # 30
    "020c 00 82 030843 020c 0243 020c 0242 020c 0243 020c 0242 020c 0240 020c 00 83 "
    "0243 020c 0243 020c 0242 020c 0243 020c 0242 020c 0245 420c",
    "020c 00 9d 40",
    "030618 020c 0218 020c 0228 020c 0218 020c 00 81 0218 020c 0218 020c 0228 020c "
    "0218 020c 0218 020c 00 8a 40",
    "00 83 030a43 020c 00 83 0242 020c 00 83 0243 020c 00 81 0242 020c 00 85 0238 00 81 40",
    "00 9e 40",
    # 35
    "03061a 020c 021a 020c 022a 020c 021a 020c 00 81 021a 020c 021a 020c 022a 020c "
    "021a 020c 021a 020c 00 8a 40",
    "020c 00 82 030843 020c 0243 020c 0242 020c 0243 020c 0242 020c 0240 020c 00 83 "
    "0243 020c 0243 020c 0242 020c 0243 020c 0242 020c 0247 420c",
    "030617 020c 0217 020c 0227 020c 0217 020c 00 81 0217 020c 0217 020c 0227 020c "
    "0217 020c 0217 020c 00 8a 40",
    "00 83 030a43 020c 00 83 0242 020c 00 83 0243 020c 00 85 0237 00 82 0240 00 020c 40",
    "030d40 00 82 030e40 00 82 030d40 00 82 030e40 00 82 030d40 00 82 0240 00 0240 00 82 "
    "0240 00 0240 00 0240 40",
    # 40
    "00 83 030843 020c 0243 020c 0242 020c 0243 020c 0242 020c 0240 020c 00 83 "
    "0243 020c 0243 020c 0242 020c 0243 020c 0242 020c 0245 420c",
    "030543 020c 00 81 0240 020c 030443 020c 030542 020c 030440 020c 030540 020c "
    "030442 020c 030543 020c 030440 020c 030540 020c 030443 020c 030542 020c "
    "030440 020c 030540 020c 030442 420c",
    "030617 020c 0217 020c 0227 020c 0217 020c 00 81 0217 020c 0217 020c 0227 020c "
    "0217 020c 0217 020c 00 83 030c50 020c 0250 020c 0250 00 0250 40",
    "00 83 030a43 020c 00 83 0242 020c 00 83 0243 020c 00 85 0237 00 82 0230 00 81 40",
    "030720 020c 0220 020c 0230 020c 0220 020c 0220 020c 0230 020c 0220 020c 0220 020c "
    "0230 020c 0220 020c 0220 020c 0230 020c 0220 020c 0220 020c 0230 020c 0220 420c",
    # 45
    "020c 00 82 030843 00 020c 00 82 0242 00 020c 00 82 0243 00 020c 00 84 023a 00 82 "
    "0240 00 020c 40",
    "00 83 030543 020c 00 81 030c50 020c 030543 020c 00 81 030443 020c 030543 020c "
    "00 81 030443 020c 030543 020c 030c50 020c 030443 020c 030543 020c 0243 420c",
    "030718 020c 0218 020c 030a43 020c 030718 020c 0218 020c 030a42 020c 030718 020c "
    "0218 020c 030a43 020c 030718 020c 030a42 020c 030728 020c 0218 020c 0218 020c "
    "030a38 00 81 40",
)

_LEADING_PATTERNS = tuple(bytes.fromhex(text) for text in _PATTERN_HEX)


def params() -> bytes:
    """Song parameters: two row speeds, interleave, order loop start/end, four pans."""
    return _PARAMS


def orders() -> bytes:
    """The packed order list, ending in an entry that silences every channel."""
    return _ORDERS


def instruments() -> tuple[bytes, ...]:
    """The fifteen 13-byte instruments."""
    return _INSTRUMENTS


def leading_patterns() -> tuple[bytes, ...]:
    """Packed patterns 0 to 47."""
    return _LEADING_PATTERNS