# Where: tagread.shared.__init__
# What: Provide a concise import surface for the tag record and error types.
# Why: Encourage consistent reuse of shared dataclasses across features.

"""Shared cross-cutting dataclasses and exceptions exposed at the package level."""

from .errors import (
    MalformedFileError,
    TagReadError,
    TruncatedDataError,
    UnsupportedEncodingError,
    UnsupportedFeatureError,
)
from .track_tag import Tag, TagField

__all__ = [
    "Tag",
    "TagField",
    "TagReadError",
    "UnsupportedFeatureError",
    "UnsupportedEncodingError",
    "MalformedFileError",
    "TruncatedDataError",
]
