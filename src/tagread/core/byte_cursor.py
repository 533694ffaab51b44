"""Bounded, forward-only cursor over an in-memory byte buffer.

Both decoders read through this type: the file is loaded once, then every
header, frame and atom is carved out as a child view that can never read past
its parent's boundary.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from tagread.shared.errors import TruncatedDataError


class ByteCursor:
    """A ``[start, end)`` window over immutable bytes with a read position.

    Child views created with :meth:`sub_view` share the parent's buffer, so
    carving is free. Any attempt to read or carve beyond ``end`` raises
    :class:`TruncatedDataError`.
    """

    def __init__(
        self,
        data: bytes | bytearray,
        label: str = "buffer",
        *,
        start: int = 0,
        end: int | None = None,
        source: str | None = None,
    ) -> None:
        self._data: bytes = bytes(data) if not isinstance(data, bytes) else data
        self._start = start
        self._end = len(self._data) if end is None else end
        if not 0 <= self._start <= self._end <= len(self._data):
            raise ValueError(f"Invalid view bounds [{start}, {end}) over {len(self._data)} bytes")
        self._pos = self._start
        self.label = label
        self.source = source if source is not None else label

    @classmethod
    def from_file(cls, path: Path | str) -> ByteCursor:
        """Load ``path`` in a single blocking read.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        file_path = Path(path)
        with open(file_path, "rb") as f:
            data = f.read()
        return cls(data, label="Whole file", source=str(file_path))

    def __repr__(self) -> str:
        return f"ByteCursor({self.label!r}, pos={self._pos}, start={self._start}, end={self._end})"

    # Position -------------------------------------------------------------

    @property
    def position(self) -> int:
        """Absolute offset of the read position within the underlying buffer."""
        return self._pos

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def remaining(self) -> int:
        return self._end - self._pos

    def has_more(self) -> bool:
        return self._pos < self._end

    def seek(self, offset: int) -> None:
        """Move to an absolute ``offset`` inside this view."""
        if not self._start <= offset <= self._end:
            raise TruncatedDataError(
                f"{self.label}: seek to {offset} outside [{self._start}, {self._end})",
                source=self.source,
                offset=offset,
            )
        self._pos = offset

    def skip(self, count: int) -> None:
        self._require(count, "skip")
        self._pos += count

    def skip_to_end(self) -> None:
        self._pos = self._end

    def _require(self, count: int, what: str) -> None:
        if count < 0 or count > self.remaining:
            raise TruncatedDataError(
                f"{self.label}: {what} needs {count} bytes but only {self.remaining} remain",
                source=self.source,
                offset=self._pos,
            )

    # Views ----------------------------------------------------------------

    def _child(self, label: str, length: int | None) -> ByteCursor:
        size = self.remaining if length is None else length
        self._require(size, f"view '{label}'")
        return ByteCursor(
            self._data,
            label,
            start=self._pos,
            end=self._pos + size,
            source=self.source,
        )

    def sub_view(self, label: str, length: int | None = None) -> ByteCursor:
        """Carve a child view of ``length`` bytes (or the rest) and advance past it."""
        child = self._child(label, length)
        self._pos = child.end
        return child

    def peek_view(self, label: str, length: int | None = None) -> ByteCursor:
        """Carve a child view without moving the read position."""
        return self._child(label, length)

    def scan_for_marker(
        self,
        marker: bytes,
        horizon: int,
        accept: Callable[[ByteCursor], bool] | None = None,
    ) -> int | None:
        """Find the next ``marker`` starting before absolute offset ``horizon``.

        Each occurrence is offered to ``accept`` as a view starting at the
        marker; rejected occurrences are skipped. On success the cursor is
        positioned at the marker and its offset is returned. Otherwise the
        position is left untouched and ``None`` is returned.
        """
        if not marker:
            raise ValueError("marker must not be empty")
        search_end = min(self._end, max(horizon, 0) + len(marker) - 1)
        current = self._pos
        while True:
            index = self._data.find(marker, current, search_end)
            if index == -1:
                return None
            candidate = ByteCursor(self._data, "Marker", start=index, end=self._end, source=self.source)
            if accept is None or accept(candidate):
                self._pos = index
                return index
            current = index + 1

    # Primitives -----------------------------------------------------------

    def read_bytes(self, count: int) -> bytes:
        self._require(count, "read")
        chunk = self._data[self._pos : self._pos + count]
        self._pos += count
        return chunk

    def read_remaining(self) -> bytes:
        return self.read_bytes(self.remaining)

    def read_u8(self) -> int:
        self._require(1, "u8")
        value = self._data[self._pos]
        self._pos += 1
        return value

    def read_u16_be(self) -> int:
        return int.from_bytes(self.read_bytes(2), "big")

    def read_u24_be(self) -> int:
        return int.from_bytes(self.read_bytes(3), "big")

    def read_u32_be(self) -> int:
        return int.from_bytes(self.read_bytes(4), "big")

    def read_ascii(self, count: int) -> str:
        return self.read_bytes(count).decode("ascii", errors="replace")

    def read_latin1(self, count: int) -> str:
        return self.read_bytes(count).decode("latin-1")

    def read_terminated_string(self, encoding: str) -> str:
        """Read a string ending at its terminator or at the view boundary.

        Single-byte encodings stop at the first zero byte; UTF-16 stops at
        the first zero code unit aligned on a two-byte boundary. The
        terminator, when present, is consumed.
        """
        unit = 2 if encoding.lower().replace("_", "-").startswith("utf-16") else 1
        terminator = b"\x00" * unit
        raw = self._data[self._pos : self._end]

        cut = -1
        index = raw.find(terminator)
        while index != -1:
            if index % unit == 0:
                cut = index
                break
            index = raw.find(terminator, index + 1)

        if cut == -1:
            text_bytes = raw[: len(raw) - len(raw) % unit]
            self._pos = self._end
        else:
            text_bytes = raw[:cut]
            self._pos += cut + unit
        return text_bytes.decode(encoding, errors="replace")


__all__ = ["ByteCursor"]
