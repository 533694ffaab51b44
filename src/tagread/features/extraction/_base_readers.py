"""Shared base classes for tag readers.

Where: src/tagread/features/extraction/_base_readers.py
What: Define the reader contract and the file-loading logic both formats share.
Why: Keep I/O and error logging out of the format-specific decoding code.
"""

from __future__ import annotations

import abc
from pathlib import Path

from tagread.core.byte_cursor import ByteCursor
from tagread.platform.logging import logger
from tagread.shared.errors import TagReadError
from tagread.shared.track_tag import Tag

__all__ = ["TagReader"]


class TagReader(abc.ABC):
    """Abstract base class for format readers.

    Readers hold configuration only. Every call builds its own cursor and
    collector, so one instance can serve concurrent calls.
    """

    FORMAT_NAME: str = ""

    @abc.abstractmethod
    def decode(self, cursor: ByteCursor) -> Tag | None:
        """Decode the tag found in ``cursor``."""
        raise NotImplementedError

    def decode_bytes(self, data: bytes, label: str = "buffer") -> Tag | None:
        """Decode an in-memory buffer."""
        return self.decode(ByteCursor(data, label=label))

    def read(self, file_path: Path | str) -> Tag | None:
        """Load ``file_path`` and decode its tag.

        Raises:
            OSError: If the file cannot be read.
            TagReadError: If the tag cannot be decoded.
        """
        path = Path(file_path)
        logger.debug("Scanning %s for %s tag", path, self.FORMAT_NAME)
        try:
            cursor = ByteCursor.from_file(path)
        except OSError as exc:
            logger.error("Failed to read %s: %s", path, exc)
            raise

        try:
            tag = self.decode(cursor)
        except TagReadError as exc:
            logger.error("Failed to decode %s tag from %s: %s", self.FORMAT_NAME, path, exc)
            raise
        logger.debug("Decoded %s tag from %s: %s", self.FORMAT_NAME, path, tag)
        return tag
