"""MP4/M4A tag reader.

Where: src/tagread/features/extraction/mp4_reader.py
What: Walk the MP4 atom tree and decode the iTunes-style ``ilst`` metadata atoms we map.
Why: Read M4A metadata without a third-party tag library.

References:
- ISO/IEC 14496-12 (ISO base media file format) and the iTunes metadata item list
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, override

from tagread.config import settings
from tagread.core.byte_cursor import ByteCursor
from tagread.platform.logging import logger
from tagread.shared.errors import MalformedFileError
from tagread.shared.track_tag import Tag, TagField

from ._base_readers import TagReader
from ._field_collector import FieldCollector
from ._tag_utils import parse_positive_int

__all__ = [
    "ATOM_FIELDS",
    "Atom",
    "Mp4Reader",
]

ATOM_HEADER_SIZE: Final[int] = 8

CONTAINER_ATOMS: Final[frozenset[str]] = frozenset({"moov", "udta", "ilst"})
# Containers whose children follow a 4-byte version/flags field.
VERSIONED_CONTAINER_ATOMS: Final[frozenset[str]] = frozenset({"meta"})

# Lower-cased atom name -> field. Each of these wraps a ``data`` atom.
ATOM_FIELDS: Final[dict[str, TagField]] = {
    "\xa9nam": TagField.TITLE,
    "\xa9art": TagField.ARTIST,
    "aart": TagField.ARTIST,
    "\xa9alb": TagField.ALBUM,
    "\xa9day": TagField.YEAR,
    "trkn": TagField.TRACK_NUMBER,
}

DATA_ATOM: Final[str] = "data"
DATA_TYPE_BINARY: Final[int] = 0
DATA_TYPE_UTF8: Final[int] = 1

# Low byte of the 16-bit track index in the ``trkn`` payload.
TRACK_NUMBER_OFFSET: Final[int] = 3

AtomPayload = list["Atom"] | str | int | bytes


@dataclass(slots=True, frozen=True)
class Atom:
    """A decoded atom; unrecognised atoms never become instances."""

    size: int
    name: str
    payload: AtomPayload

    @property
    def children(self) -> list[Atom]:
        return self.payload if isinstance(self.payload, list) else []


class Mp4Reader(TagReader):
    """Reader for MP4 containers (``.m4a``, ``.m4b``, ``.mp4``).

    There is no "absent tag" outcome: a structurally valid file without
    metadata decodes to an empty :class:`Tag`.
    """

    FORMAT_NAME = "MP4"

    max_depth: int

    def __init__(self, max_depth: int | None = None) -> None:
        self.max_depth = max_depth if max_depth is not None else settings.MP4_MAX_ATOM_DEPTH

    @override
    def decode(self, cursor: ByteCursor) -> Tag:
        root = cursor.sub_view("Whole file")
        if root.remaining >= ATOM_HEADER_SIZE:
            first = root.peek_view("First atom header", ATOM_HEADER_SIZE)
            first.skip(4)
            first_name = first.read_latin1(4)
            if first_name != "ftyp":
                raise MalformedFileError(
                    f"First atom expected to be ftyp, got {first_name!r}",
                    source=cursor.source,
                    offset=root.position,
                )

        collector = FieldCollector()
        atoms = self._read_atoms(root, collector, depth=0)
        logger.debug("Read %d recognised top-level atoms", len(atoms))
        return collector.commit()

    def _read_atoms(self, parent: ByteCursor, collector: FieldCollector, depth: int) -> list[Atom]:
        """Read every atom of ``parent``, keeping the recognised ones."""
        if depth > self.max_depth:
            raise MalformedFileError(
                f"Atoms nested deeper than {self.max_depth} levels",
                source=parent.source,
                offset=parent.position,
            )

        atoms: list[Atom] = []
        while parent.has_more():
            offset = parent.position
            if parent.remaining < ATOM_HEADER_SIZE:
                raise MalformedFileError(
                    f"{parent.remaining} trailing bytes cannot hold an atom header",
                    source=parent.source,
                    offset=offset,
                )
            size = parent.read_u32_be()
            name = parent.read_latin1(4)
            if size < ATOM_HEADER_SIZE:
                raise MalformedFileError(
                    f"Atom {name!r} declares size {size}, smaller than its header",
                    source=parent.source,
                    offset=offset,
                )
            if size - ATOM_HEADER_SIZE > parent.remaining:
                raise MalformedFileError(
                    f"Atom {name!r} declares size {size} but its parent only has "
                    f"{parent.remaining + ATOM_HEADER_SIZE} bytes left",
                    source=parent.source,
                    offset=offset,
                )
            logger.debug("Found atom header %r (size=%d, offset=%d, depth=%d)", name, size, offset, depth)

            body = parent.sub_view(f"Atom data ({name})", size - ATOM_HEADER_SIZE)
            payload = self._read_payload(name.lower(), body, collector, depth)
            if payload is not None:
                atoms.append(Atom(size=size, name=name, payload=payload))
        return atoms

    def _read_payload(
        self,
        kind: str,
        body: ByteCursor,
        collector: FieldCollector,
        depth: int,
    ) -> AtomPayload | None:
        if kind in CONTAINER_ATOMS:
            return self._read_atoms(body, collector, depth + 1)
        if kind in VERSIONED_CONTAINER_ATOMS:
            body.skip(4)
            return self._read_atoms(body, collector, depth + 1)
        if kind in ATOM_FIELDS:
            children = self._read_atoms(body, collector, depth + 1)
            return self._read_field(kind, children, collector)
        if kind == DATA_ATOM:
            return self._read_data(body)
        return None

    def _read_data(self, body: ByteCursor) -> str | bytes | None:
        _version = body.read_u8()
        data_type = body.read_u24_be()
        body.skip(4)  # reserved
        if data_type == DATA_TYPE_BINARY:
            return body.read_remaining()
        if data_type == DATA_TYPE_UTF8:
            text = body.read_remaining().decode("utf-8", errors="replace")
            return text or None
        logger.debug("Ignoring data atom of type %d", data_type)
        return None

    def _read_field(self, kind: str, children: list[Atom], collector: FieldCollector) -> str | int | None:
        data = next((child.payload for child in children if child.name == DATA_ATOM), None)
        if data is None:
            return None

        field = ATOM_FIELDS[kind]
        value: str | int | None = None
        if field is TagField.TRACK_NUMBER:
            if isinstance(data, bytes) and len(data) > TRACK_NUMBER_OFFSET:
                value = data[TRACK_NUMBER_OFFSET] or None
        elif field is TagField.YEAR:
            if isinstance(data, str):
                value = parse_positive_int(data)
        elif isinstance(data, str):
            value = data

        if collector.offer(field, value):
            logger.debug("Decoded %s=%r from %r atom", field, value, kind)
        return value
