"""tagread: read title/artist/album/year/track tags from MP3 and M4A files.

Both formats are decoded in pure Python:

    features.extraction.id3_reader   ID3v2.2 / 2.3 / 2.4 (MP3)
    features.extraction.mp4_reader   MP4 atom tree (M4A/M4B/MP4)

Typical use::

    from tagread import read_tag
    tag = read_tag("01 - Nihil.m4a")
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from tagread.features.extraction import Id3Reader, Mp4Reader, TagReader, TrackTagExtractor
from tagread.shared import (
    MalformedFileError,
    Tag,
    TagField,
    TagReadError,
    TruncatedDataError,
    UnsupportedEncodingError,
    UnsupportedFeatureError,
)

try:
    __version__ = version("tagread")
except PackageNotFoundError:
    __version__ = "unknown"


def read_id3(file_path: Path | str) -> Tag | None:
    """Read the ID3v2 tag of ``file_path``; ``None`` when the file has none."""
    return Id3Reader().read(file_path)


def read_m4a(file_path: Path | str) -> Tag:
    """Read the MP4 metadata of ``file_path``."""
    tag = Mp4Reader().read(file_path)
    assert tag is not None
    return tag


def read_tag(file_path: Path | str) -> Tag | None:
    """Read ``file_path`` with the reader matching its extension."""
    return TrackTagExtractor().extract(file_path)


__all__ = [
    "__version__",
    "read_id3",
    "read_m4a",
    "read_tag",
    "Id3Reader",
    "Mp4Reader",
    "TagReader",
    "TrackTagExtractor",
    "Tag",
    "TagField",
    "TagReadError",
    "UnsupportedFeatureError",
    "UnsupportedEncodingError",
    "MalformedFileError",
    "TruncatedDataError",
]
