"""Audio file tag extraction facade.

Where: src/tagread/features/extraction/track_tag_extractor.py
What: Route a file to the ID3 or MP4 reader based on its extension.
Why: Offer one entry point to the CLI and library callers.
"""

from pathlib import Path
from typing import ClassVar

from ._base_readers import TagReader
from .id3_reader import Id3Reader
from .mp4_reader import Mp4Reader
from tagread.shared.track_tag import Tag

__all__ = ["TrackTagExtractor"]


class TrackTagExtractor:
    """Facade class for reading tags from audio files.

    This class selects the appropriate reader based on file extension.
    """

    SUPPORTED_FORMATS: ClassVar[frozenset[str]] = frozenset({".mp3", ".m4a", ".m4b", ".mp4"})

    _readers: dict[str, TagReader]

    def __init__(
        self,
        *,
        id3_search_horizon: int | None = None,
        mp4_max_atom_depth: int | None = None,
    ) -> None:
        id3_reader = Id3Reader(search_horizon=id3_search_horizon)
        mp4_reader = Mp4Reader(max_depth=mp4_max_atom_depth)
        self._readers = {
            ".mp3": id3_reader,
            ".m4a": mp4_reader,
            ".m4b": mp4_reader,
            ".mp4": mp4_reader,
        }

    @classmethod
    def is_supported(cls, file_path: Path) -> bool:
        return file_path.suffix.lower() in cls.SUPPORTED_FORMATS

    def reader_for(self, file_path: Path) -> TagReader:
        """Return the reader registered for ``file_path``'s extension.

        Raises:
            ValueError: If the file format is unsupported.
        """
        ext = file_path.suffix.lower()
        if ext not in self.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported file format: {ext}")
        return self._readers[ext]

    def extract(self, file_path: Path | str) -> Tag | None:
        """Read the tag of an audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            Tag | None: Decoded tag; ``None`` for an MP3 without an ID3v2 tag.

        Raises:
            ValueError: If the file format is unsupported.
            OSError: If the file cannot be read.
            TagReadError: If the tag is malformed or unsupported.
        """
        path = Path(file_path)
        return self.reader_for(path).read(path)
