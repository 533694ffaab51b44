"""Test helper utilities."""

from .id3 import AUDIO_FILLER, id3_frame, id3_tag, synchsafe, text_frame, text_payload
from .mp4 import atom, data_atom, ilst_file, text_item, track_item

__all__ = [
    "AUDIO_FILLER",
    "atom",
    "data_atom",
    "id3_frame",
    "id3_tag",
    "ilst_file",
    "synchsafe",
    "text_frame",
    "text_item",
    "text_payload",
    "track_item",
]
