# Where: tagread.shared.errors
# What: Exception hierarchy raised by the tag decoders.
# Why: Let callers tell unsupported inputs apart from structurally broken files.

from __future__ import annotations


class TagReadError(Exception):
    """Base class for every decoding failure.

    File access problems are not wrapped: ``OSError`` and its subclasses
    propagate unchanged from the readers.
    """

    source: str | None
    offset: int | None

    def __init__(self, message: str, *, source: str | None = None, offset: int | None = None) -> None:
        self.source = source
        self.offset = offset
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        details: list[str] = []
        if self.source:
            details.append(self.source)
        if self.offset is not None:
            details.append(f"offset {self.offset}")
        if details:
            return f"{message} ({', '.join(details)})"
        return message


class UnsupportedFeatureError(TagReadError):
    """The tag uses a feature the decoder does not parse (ID3 extended header)."""


class UnsupportedEncodingError(TagReadError):
    """A text frame declares an encoding byte that is not valid for its version."""

    encoding: int

    def __init__(
        self,
        encoding: int,
        *,
        major_version: int | None = None,
        source: str | None = None,
        offset: int | None = None,
    ) -> None:
        self.encoding = encoding
        message = f"Unsupported text encoding 0x{encoding:02x}"
        if major_version is not None:
            message += f" for ID3v2.{major_version}"
        super().__init__(message, source=source, offset=offset)


class MalformedFileError(TagReadError):
    """The container structure is inconsistent (bad atom sizes, missing ftyp, ...)."""


class TruncatedDataError(MalformedFileError):
    """A read or sub-view would cross the boundary of the enclosing view."""


__all__ = [
    "TagReadError",
    "UnsupportedFeatureError",
    "UnsupportedEncodingError",
    "MalformedFileError",
    "TruncatedDataError",
]
