"""The song "Frozen Point": the second half of the pattern bank and the
assembled :class:`~ebtplay.player.Song`."""

from __future__ import annotations

from .frzng_tables import instruments, leading_patterns, orders, params
from .player import Song

_PATTERN_HEX = (
    # 48
    "020c 00 82 030542 020c 0243 020c 0245 020c 0243 020c 0242 020c 0238 00 020c 00 82 "
    "030652 020c 0253 020c 0255 020c 0253 020c 0252 020c 0248 40",
    "03071a 020c " + "021a 020c 021a 020c 022a 020c " * 5 + "021a 420c",
    "020c 00 82 030843 00 020c 00 82 0242 00 020c 00 82 0243 00 020c 00 84 023a 00 82 "
    "0242 00 81 40",
    "030717 020c 0217 020c 030a43 020c 030717 020c 0217 020c 030a42 020c 030717 020c "
    "0217 020c 030a43 020c 030717 020c 030a42 020c 030727 020c 0217 020c 0217 020c "
    "030a37 00 81 40",
    "020c 00 82 030542 020c 0243 020c 0245 020c 0243 020c 0242 020c 0237 00 020c 00 82 "
    "030652 020c 0253 020c 0255 020c 0253 020c 0252 020c 0237 40",
    # 53
    "00 83 030543 020c 00 81 030c50 020c 030543 020c 00 81 030443 020c 030543 020c "
    "00 81 030443 020c 030543 020c 030c50 020c 030443 020c 030c50 020c 0243 420c",
    "030d40 00 82 030e40 00 0240 00 030d40 00 82 030e40 00 82 030d40 00 82 0240 00 "
    "030e40 00 030d40 00 82 030e40 00 81 40",
    "030520 00 9d 40",
    "030443 00 9d 40",
    "020c 00 82 030443 020c " + "0243 020c " * 4 + "00 85 " + "0243 020c " * 5 + "00 40",
    # 58
    "0218 00 9d 40",
    "0245 00 8e 0243 00 8d 40",
    "00 83 " + "0245 020c " * 5 + "00 85 " + "0243 020c " * 5 + "00 40",
    "021a 00 9d 40",
    "0245 00 92 0237 0238 00 85 0245 00 81 40",
    # 63
    "00 83 " + "0245 020c " * 5 + "00 85 0237 020c 0238 020c 0238 020c 0238 020c 0245 020c 00 40",
    "0217 00 9d 40",
    "00 8f 0247 00 8d 40",
    "00 83 " + "0245 020c " * 5 + "00 85 " + "0247 020c " * 5 + "00 40",
    "030520 020c " + "0220 020c " * 14 + "0220 420c",
    # 68
    "030643 00 9d 40",
    "00 83 " + "0253 020c " * 5 + "00 85 " + "0253 020c " * 5 + "00 40",
    "0218 020c " * 15 + "0218 420c",
    "0245 00 8e 0240 00 8d 40",
    "030455 020c 0255 020c 030a43 020c 030455 020c 0255 020c 030a42 020c 030455 020c "
    "0255 020c 030a43 020c 00 81 0242 020c 030450 020c 0250 020c 0250 020c 030a40 00 "
    "020c 40",
    # 73
    "021a 020c " * 15 + "021a 420c",
    "023a 00 92 0237 0238 00 85 0242 00 81 40",
    "020c 00 82 03044a 020c " + "024a 020c " * 4
    + "00 85 0247 020c 0248 020c 0248 020c 0248 020c 0252 020c 00 40",
    "0217 020c " * 15 + "0217 40",
    "00 8d 0243 0245 0247 00 8d 40",
    # 78
    "020c 00 82 030a43 020c 030452 020c 0252 020c 030a42 020c 030452 020c 00 81 "
    "030a43 020c 00 81 0242 020c 030457 020c 0257 020c 0257 020c 030a37 00 81 40",
    "030520 020c 0220 020c 0230 020c " + "0220 020c 0220 020c 0230 020c " * 4 + "0220 420c",
    "030743 00 9d 40",
    "030518 020c 0218 020c 030a43 020c 030518 020c 0218 020c 030a42 020c 030518 020c "
    "0218 020c 030a43 020c 030518 020c 030a42 020c 030518 020c 0218 020c 0218 020c "
    "030a40 00 030518 420c",
    "030517 020c 0217 020c 030a43 020c 030517 020c 0217 020c 030a42 020c 030517 020c "
    "0217 020c 030a43 020c 030517 020c 030a42 020c 030517 020c 0217 020c 0217 020c "
    "030a37 00 030517 420c",
    # 83
    "030543 00 9d 40",
    "030543 020c 00 81 0240 020c 030443 020c 030c50 020c 030440 020c 030540 020c "
    "030442 020c 030543 020c 030440 020c 030540 020c 030443 020c 030c50 020c "
    "030440 020c 030540 020c 030442 420c",
    "030517 020c 0217 020c 030a43 020c 030517 020c 0217 020c 030a42 020c 030517 020c "
    "0217 020c 030a43 020c 00 81 0242 020c 00 85 0237 00 81 40",
    "00 8b 030847 024a 0252 0255 0257 00 86 0256 0255 0254 0253 0252 0251 0250 4249",
    "030543 020c 00 81 0240 020c 030443 020c 030c50 020c 030440 020c 030540 020c "
    "030442 020c 030543 020c 030440 020c 030540 020c 030443 020c 030c50 020c "
    "0250 020c 0250 020c 0250 420c",
    # 88
    "030553 020c 00 81 0250 020c 030453 020c 030c50 020c 030450 020c 030550 020c "
    "030452 020c 030553 020c 030450 020c 030550 020c 030453 020c 030c50 020c "
    "030450 020c 030550 020c 030452 420c",
    "00 83 030c50 020c 0250 020c 0249 020c 0249 020c 0247 020c 0247 020c 030543 020c "
    "00 81 030b50 020c 0250 020c 0249 020c 0249 020c 0247 020c 0247 420c",
    "030d40 00 82 0240 00 0240 00 0240 00 0240 00 0240 00 82 0240 00 82 0240 00 "
    "0240 00 0240 00 0240 00 0240 00 81 40",
    "030553 020c 00 81 0250 020c 030453 020c 030c50 020c 030450 020c 030550 020c "
    "030c50 020c 030553 020c 030450 020c 030550 020c 030453 020c 030c50 020c "
    "0250 020c 0250 020c 0250 420c",
    "030d40 00 030e40 00 0240 00 0240 00 " * 3 + "030d40 00 030e40 00 0240 00 0240 40",
    # 93
    "030d40 00 030e40 00 030d40 00 0240 00 0240 00 0240 00 0240 00 82 0240 00 "
    "030e40 00 030d40 00 0240 00 0240 00 0240 00 0240 00 030e40 40",
    "030530 00 9d 40",
    "030d40 00 9d 40",
    "00 8e 40",
)

_PATTERNS = tuple(bytes.fromhex(text) for text in _PATTERN_HEX)


def patterns() -> tuple[bytes, ...]:
    """Packed patterns 48 to 96."""
    return _PATTERNS


def song() -> Song:
    """The complete song, ready for :meth:`ebtplay.player.Player.start`."""
    return Song(
        params=params(),
        orders=orders(),
        patterns=leading_patterns() + _PATTERNS,
        instruments=instruments(),
    )