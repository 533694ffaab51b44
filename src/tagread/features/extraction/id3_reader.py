"""ID3v2 tag reader.

Where: src/tagread/features/extraction/id3_reader.py
What: Locate an ID3v2.2/2.3/2.4 tag, walk its frames and decode the text frames we map.
Why: Read MP3 metadata without a third-party tag library.

References:
- ID3 tag version 2.3.0 and 2.4.0 (main structure, frames), id3.org
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, override

from tagread.config import settings
from tagread.core.byte_cursor import ByteCursor
from tagread.platform.logging import logger
from tagread.shared.errors import UnsupportedFeatureError
from tagread.shared.track_tag import Tag, TagField

from ._base_readers import TagReader
from ._field_collector import FieldCollector
from ._synchsafe import decode_synchsafe
from ._tag_utils import decode_text_frame, parse_positive_int

__all__ = [
    "FRAME_FIELDS",
    "FRAME_LAYOUTS",
    "FrameLayout",
    "Id3FrameHeader",
    "Id3Reader",
    "Id3TagHeader",
]

ID3_MARKER: Final[bytes] = b"ID3"
TAG_HEADER_SIZE: Final[int] = 10

FLAG_UNSYNCHRONISATION: Final[int] = 0x80
FLAG_EXTENDED_HEADER: Final[int] = 0x40


@dataclass(slots=True, frozen=True)
class FrameLayout:
    """On-the-wire shape of a frame header for one major version."""

    header_size: int
    id_length: int
    synchsafe_sizes: bool
    has_flags: bool


FRAME_LAYOUTS: Final[dict[int, FrameLayout]] = {
    2: FrameLayout(header_size=6, id_length=3, synchsafe_sizes=False, has_flags=False),
    3: FrameLayout(header_size=10, id_length=4, synchsafe_sizes=False, has_flags=True),
    4: FrameLayout(header_size=10, id_length=4, synchsafe_sizes=True, has_flags=True),
}

# Frame id -> field. Case-sensitive; the first non-empty frame of a field wins.
FRAME_FIELDS: Final[dict[str, TagField]] = {
    "TT2": TagField.TITLE,
    "TIT1": TagField.TITLE,
    "TIT2": TagField.TITLE,
    "TP1": TagField.ARTIST,
    "TP2": TagField.ARTIST,
    "TPE1": TagField.ARTIST,
    "TPE2": TagField.ARTIST,
    "TAL": TagField.ALBUM,
    "TALB": TagField.ALBUM,
    "TRK": TagField.TRACK_NUMBER,
    "TRCK": TagField.TRACK_NUMBER,
    "TYE": TagField.YEAR,
    "TYER": TagField.YEAR,
}

_NUMERIC_FIELDS: Final[frozenset[TagField]] = frozenset({TagField.YEAR, TagField.TRACK_NUMBER})


@dataclass(slots=True, frozen=True)
class Id3TagHeader:
    """The 10-byte header that follows the ``ID3`` marker."""

    major_version: int
    minor_version: int
    flags: int
    size: int
    offset: int

    @property
    def unsynchronisation(self) -> bool:
        return bool(self.flags & FLAG_UNSYNCHRONISATION)

    @property
    def extended_header(self) -> bool:
        # Bit 6 means "compression" in v2.2, not an extended header.
        return self.major_version >= 3 and bool(self.flags & FLAG_EXTENDED_HEADER)


@dataclass(slots=True, frozen=True)
class Id3FrameHeader:
    frame_id: str
    size: int
    flags: int = 0


def _looks_like_tag_header(view: ByteCursor) -> bool:
    """Check the ``$49 44 33 yy yy xx zz zz zz zz`` pattern (yy < $FF, zz < $80)."""
    if view.remaining < TAG_HEADER_SIZE:
        return False
    raw = view.read_bytes(TAG_HEADER_SIZE)
    return raw[3] < 0xFF and raw[4] < 0xFF and all(byte < 0x80 for byte in raw[6:10])


class Id3Reader(TagReader):
    """Reader for ID3v2 tags.

    ``decode`` returns ``None`` when no usable tag marker is found within the
    search horizon.
    """

    FORMAT_NAME = "ID3v2"

    search_horizon: int

    def __init__(self, search_horizon: int | None = None) -> None:
        self.search_horizon = (
            search_horizon if search_horizon is not None else settings.ID3_SEARCH_HORIZON
        )

    @override
    def decode(self, cursor: ByteCursor) -> Tag | None:
        while True:
            offset = cursor.scan_for_marker(
                ID3_MARKER,
                self.search_horizon,
                accept=_looks_like_tag_header,
            )
            if offset is None:
                logger.debug("ID3 marker not found in %s", cursor.source)
                return None

            header = self._read_tag_header(cursor.peek_view("Header", TAG_HEADER_SIZE), offset)
            if header is None:
                cursor.seek(offset + len(ID3_MARKER))
                continue
            cursor.skip(TAG_HEADER_SIZE)

            if header.extended_header:
                raise UnsupportedFeatureError(
                    "ID3 extended headers are not supported",
                    source=cursor.source,
                    offset=offset,
                )
            if header.unsynchronisation:
                logger.debug("ID3 tag uses unsynchronisation; frame data is read as-is")
            logger.debug("ID3v2.%d tag at offset %d, %d bytes", header.major_version, offset, header.size)

            frames = cursor.sub_view("Frames", header.size)
            return self._read_frames(frames, header)

    def _read_tag_header(self, view: ByteCursor, offset: int) -> Id3TagHeader | None:
        view.skip(len(ID3_MARKER))
        major = view.read_u8()
        if major < 2 or major >= 5:
            logger.debug(
                "Skipping ID3 marker at %d: version 2.%d is not supported",
                offset,
                major,
            )
            return None
        minor = view.read_u8()
        flags = view.read_u8()
        size = decode_synchsafe(view.read_u32_be())
        return Id3TagHeader(
            major_version=major,
            minor_version=minor,
            flags=flags,
            size=size,
            offset=offset,
        )

    def _read_frames(self, frames: ByteCursor, tag_header: Id3TagHeader) -> Tag:
        layout = FRAME_LAYOUTS[tag_header.major_version]
        collector = FieldCollector()

        while frames.has_more():
            frame_header = self._read_frame_header(frames, layout)
            if frame_header is None:
                frames.skip_to_end()
                break
            if frame_header.size == 0:
                # Padding; anything after it is not scanned.
                logger.debug("Frame %r declares size 0; rest of the frame section skipped", frame_header.frame_id)
                frames.skip_to_end()
                break

            logger.debug("Frame %s (%d bytes)", frame_header.frame_id, frame_header.size)
            payload = frames.sub_view(f"Frame data ({frame_header.frame_id})", frame_header.size)
            self._read_frame(payload, frame_header, tag_header, collector)

        return collector.commit()

    def _read_frame_header(self, frames: ByteCursor, layout: FrameLayout) -> Id3FrameHeader | None:
        """Read the next frame header, or return ``None`` when padding starts."""
        if frames.remaining < layout.header_size:
            logger.debug("Trailing %d bytes in frame section treated as padding", frames.remaining)
            return None

        if not layout.has_flags:
            frame_id = frames.read_ascii(layout.id_length)
            return Id3FrameHeader(frame_id=frame_id, size=frames.read_u24_be())

        first = frames.read_u8()
        if first == 0:
            # A single stray zero may precede a valid id; two zeros start padding.
            second = frames.read_u8()
            if second == 0:
                logger.debug("Zero bytes where a frame id was expected; padding starts here")
                return None
            if frames.remaining < layout.header_size - 1:
                logger.debug("Stray zero byte at end of frame section treated as padding")
                return None
            logger.debug("Skipping stray zero byte before frame id")
            first = second

        frame_id = chr(first) + frames.read_ascii(layout.id_length - 1)
        size = frames.read_u32_be()
        if layout.synchsafe_sizes:
            size = decode_synchsafe(size)
        flags = frames.read_u16_be()
        return Id3FrameHeader(frame_id=frame_id, size=size, flags=flags)

    def _read_frame(
        self,
        payload: ByteCursor,
        frame_header: Id3FrameHeader,
        tag_header: Id3TagHeader,
        collector: FieldCollector,
    ) -> None:
        field = FRAME_FIELDS.get(frame_header.frame_id)
        if field is None:
            return
        if not collector.wants(field):
            logger.debug("Ignoring %s frame, %s already set", frame_header.frame_id, field)
            return

        text = decode_text_frame(payload, tag_header.major_version)
        value = parse_positive_int(text) if field in _NUMERIC_FIELDS else text
        if collector.offer(field, value):
            logger.debug("Decoded %s=%r from %s frame", field, value, frame_header.frame_id)
