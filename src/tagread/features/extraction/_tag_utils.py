"""Tag utility helpers.

Where: src/tagread/features/extraction/_tag_utils.py
What: Provide pure helper routines for text-frame decoding and numeric tag values.
Why: Share the parsing rules used by both the ID3 and the MP4 readers.
"""

from __future__ import annotations

import re
from typing import Final

from tagread.core.byte_cursor import ByteCursor
from tagread.shared.errors import UnsupportedEncodingError

__all__ = [
    "ID3_TEXT_ENCODINGS",
    "decode_text_frame",
    "parse_positive_int",
]

# Text encoding byte -> (Python codec, lowest major version allowing it).
ID3_TEXT_ENCODINGS: Final[dict[int, tuple[str, int]]] = {
    0: ("latin-1", 2),
    1: ("utf-16", 2),
    3: ("utf-8", 3),
}

_LEADING_INT: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")


def decode_text_frame(frame: ByteCursor, major_version: int) -> str:
    """Decode the payload of an ID3v2 text frame.

    The first byte selects the encoding. The string ends at its terminator or
    at the frame boundary, whichever comes first.

    Raises:
        UnsupportedEncodingError: If the encoding byte is unknown or not valid
            for ``major_version``.
    """
    offset = frame.position
    encoding = frame.read_u8()
    codec = ID3_TEXT_ENCODINGS.get(encoding)
    if codec is None or major_version < codec[1]:
        raise UnsupportedEncodingError(
            encoding,
            major_version=major_version,
            source=frame.source,
            offset=offset,
        )
    return frame.read_terminated_string(codec[0])


def parse_positive_int(value: str | None) -> int | None:
    """Parse the leading base-10 integer of ``value``; keep it only when positive.

    Surrounding whitespace is ignored and trailing text is allowed, so
    ``"7/12"`` gives 7 and ``"2014-05-01"`` gives 2014. Empty, non-numeric,
    zero and negative values give ``None``.
    """
    if not value:
        return None
    match = _LEADING_INT.match(value.strip())
    if match is None:
        return None
    number = int(match.group())
    return number if number > 0 else None
