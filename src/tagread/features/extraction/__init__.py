"""
Summary: Public surface for tag extraction modules.
Why: Provide a stable import path for the CLI, the package root and tests.
"""

from ._base_readers import TagReader
from .id3_reader import Id3Reader
from .mp4_reader import Mp4Reader
from .track_tag_extractor import TrackTagExtractor

__all__ = [
    "TagReader",
    "Id3Reader",
    "Mp4Reader",
    "TrackTagExtractor",
]
