# Where: tagread.shared.track_tag
# What: Canonical Tag record produced by every decoder.
# Why: Give ID3 and MP4 decoding one output shape for callers and the CLI.

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class TagField(StrEnum):
    """Logical metadata fields a decoder can fill."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    YEAR = "year"
    TRACK_NUMBER = "track_number"


@dataclass(slots=True, frozen=True)
class Tag:
    """Metadata decoded from a single audio file."""

    title: str = ""
    artist: str = ""
    album: str = ""
    year: int | None = None
    track_number: int | None = None

    @property
    def is_empty(self) -> bool:
        """Whether no field was found in the file."""
        return not (self.title or self.artist or self.album) and self.year is None and self.track_number is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
            "year": self.year,
            "track_number": self.track_number,
        }


__all__ = ["Tag", "TagField"]
