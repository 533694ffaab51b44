"""Tests for the extension-based extraction facade."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tagread.features.extraction import Id3Reader, Mp4Reader, TrackTagExtractor
from tagread.shared.errors import MalformedFileError
from tagread.shared.track_tag import Tag
from tests.helpers import AUDIO_FILLER, id3_tag, ilst_file, text_frame, text_item


@pytest.mark.parametrize(
    ("name", "reader_type"),
    [
        ("song.mp3", Id3Reader),
        ("SONG.MP3", Id3Reader),
        ("song.m4a", Mp4Reader),
        ("book.m4b", Mp4Reader),
        ("clip.mp4", Mp4Reader),
    ],
)
def test_reader_for_extension(name: str, reader_type: type) -> None:
    assert isinstance(TrackTagExtractor().reader_for(Path(name)), reader_type)


@pytest.mark.parametrize("name", ["song.flac", "song.ogg", "README"])
def test_unsupported_extension_raises(name: str) -> None:
    with pytest.raises(ValueError, match="Unsupported file format"):
        _ = TrackTagExtractor().reader_for(Path(name))
    assert not TrackTagExtractor.is_supported(Path(name))


def test_overrides_reach_readers() -> None:
    extractor = TrackTagExtractor(id3_search_horizon=4096, mp4_max_atom_depth=8)

    id3_reader = extractor.reader_for(Path("a.mp3"))
    mp4_reader = extractor.reader_for(Path("a.m4a"))

    assert isinstance(id3_reader, Id3Reader)
    assert isinstance(mp4_reader, Mp4Reader)
    assert id3_reader.search_horizon == 4096
    assert mp4_reader.max_depth == 8


def test_extract_delegates_to_reader(mocker: MockerFixture) -> None:
    expected = Tag(title="Nihil")
    read = mocker.patch.object(Mp4Reader, "read", return_value=expected)

    tag = TrackTagExtractor().extract("music/01 - Nihil.m4a")

    assert tag is expected
    read.assert_called_once_with(Path("music/01 - Nihil.m4a"))


def test_extract_reads_both_formats(tmp_path: Path) -> None:
    mp3 = tmp_path / "blue_poles.mp3"
    _ = mp3.write_bytes(id3_tag([text_frame("TIT2", "Blue Poles")]) + AUDIO_FILLER)
    m4a = tmp_path / "nihil.m4a"
    _ = m4a.write_bytes(ilst_file([text_item("\xa9nam", "Nihil")]))

    extractor = TrackTagExtractor()

    assert extractor.extract(mp3) == Tag(title="Blue Poles")
    assert extractor.extract(m4a) == Tag(title="Nihil")


def test_extract_mp3_without_tag_returns_none(tmp_path: Path) -> None:
    mp3 = tmp_path / "untagged.mp3"
    _ = mp3.write_bytes(AUDIO_FILLER)

    assert TrackTagExtractor().extract(mp3) is None


def test_extract_mislabelled_file_raises(tmp_path: Path) -> None:
    fake = tmp_path / "actually_mp3.m4a"
    _ = fake.write_bytes(id3_tag([text_frame("TIT2", "Blue Poles")]) + AUDIO_FILLER)

    with pytest.raises(MalformedFileError):
        _ = TrackTagExtractor().extract(fake)
