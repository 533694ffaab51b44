"""First-match-wins accumulation of decoded tag values.

Where: src/tagread/features/extraction/_field_collector.py
What: Gather candidate values per field during traversal and commit the first non-empty one.
Why: Keep "earliest frame/atom wins" out of the traversal code of each reader.
"""

from __future__ import annotations

from collections import defaultdict

from tagread.shared.track_tag import Tag, TagField

__all__ = ["FieldCollector"]

TagValue = str | int


class FieldCollector:
    """Ordered candidate values keyed by :class:`TagField`."""

    def __init__(self) -> None:
        self._candidates: defaultdict[TagField, list[TagValue]] = defaultdict(list)

    def wants(self, field: TagField) -> bool:
        """Whether ``field`` still lacks a usable value."""
        return not self._candidates[field]

    def offer(self, field: TagField, value: TagValue | None) -> bool:
        """Record ``value`` for ``field``; empty strings and ``None`` are ignored.

        Returns:
            bool: ``True`` when the value became the committed one.
        """
        if value is None or value == "":
            return False
        values = self._candidates[field]
        values.append(value)
        return len(values) == 1

    def candidates(self, field: TagField) -> list[TagValue]:
        return list(self._candidates[field])

    def _first(self, field: TagField) -> TagValue | None:
        values = self._candidates[field]
        return values[0] if values else None

    def commit(self) -> Tag:
        """Build the final :class:`Tag` from the first value of every field."""
        title = self._first(TagField.TITLE)
        artist = self._first(TagField.ARTIST)
        album = self._first(TagField.ALBUM)
        year = self._first(TagField.YEAR)
        track_number = self._first(TagField.TRACK_NUMBER)
        return Tag(
            title=str(title) if title is not None else "",
            artist=str(artist) if artist is not None else "",
            album=str(album) if album is not None else "",
            year=year if isinstance(year, int) else None,
            track_number=track_number if isinstance(track_number, int) else None,
        )
