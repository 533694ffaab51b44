"""Synchsafe integer helpers.

Where: src/tagread/features/extraction/_synchsafe.py
What: Convert between 28-bit integers and their ID3v2 synchsafe encoding.
Why: The tag size (every version) and v2.4 frame sizes are stored synchsafe.
"""

from __future__ import annotations

__all__ = [
    "SYNCHSAFE_MAX",
    "decode_synchsafe",
    "decode_synchsafe_bytes",
    "encode_synchsafe",
]

SYNCHSAFE_MAX: int = (1 << 28) - 1


def decode_synchsafe(value: int) -> int:
    """Decode a 4-byte big-endian synchsafe quantity.

    Only the low 7 bits of each byte are kept; high bits are discarded
    rather than rejected so slightly malformed sizes still decode.
    """
    b0 = (value >> 24) & 0x7F
    b1 = (value >> 16) & 0x7F
    b2 = (value >> 8) & 0x7F
    b3 = value & 0x7F
    return (((b0 << 7 | b1) << 7 | b2) << 7) | b3


def decode_synchsafe_bytes(raw: bytes) -> int:
    """Decode the 4 raw bytes of a synchsafe integer."""
    if len(raw) != 4:
        raise ValueError(f"Synchsafe integers are 4 bytes long, got {len(raw)}")
    return decode_synchsafe(int.from_bytes(raw, "big"))


def encode_synchsafe(value: int) -> int:
    """Pack a 28-bit integer into its synchsafe 4-byte big-endian form."""
    if not 0 <= value <= SYNCHSAFE_MAX:
        raise ValueError(f"Synchsafe integers hold 28 bits, got {value}")
    return (
        ((value >> 21) & 0x7F) << 24
        | ((value >> 14) & 0x7F) << 16
        | ((value >> 7) & 0x7F) << 8
        | (value & 0x7F)
    )
