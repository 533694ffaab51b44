"""Tests for the ``TagEventRichHandler`` decode-event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.text import Text

from tagread.platform.logging import LOGGER_NAME, TagEventRichHandler, setup_logger
from tagread.platform.logging.handlers import shorten_path


def _make_handler() -> TagEventRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return TagEventRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with decode extras for testing."""

    record = logging.LogRecord(
        name=LOGGER_NAME,
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_success_event_shows_sequence_path_and_label() -> None:
    handler = _make_handler()

    record = _build_record(
        decode_event="decode.file.success",
        sequence=3,
        total_files=13,
        source_path="/music/3TEETH/2014_3TEETH/01 - Nihil.m4a",
        artist="3teeth",
        title="Nihil",
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "[3/13] Decoded " in plain
    assert "/music/3TEETH/2014_3TEETH/01 - Nihil.m4a" in plain
    assert "(3teeth - Nihil)" in plain


def test_long_absolute_paths_are_abbreviated() -> None:
    handler = _make_handler()
    source_path = "/home/listener/music/incoming/Patti Smith/1997_Peace and Noise/07 - Blue Poles.mp3"

    record = _build_record(decode_event="decode.file.start", sequence=1, source_path=source_path)

    plain = handler.render_message(record, "").plain
    assert "[1] Reading " in plain
    assert "…/incoming/Patti Smith/1997_Peace and Noise/07 - Blue Poles.mp3" in plain
    assert "/home/listener" not in plain


def test_paths_are_relative_to_base_directory() -> None:
    handler = _make_handler()
    base = "/home/listener/music"

    record = _build_record(
        decode_event="decode.file.no_tag",
        source_path=f"{base}/untagged/track.mp3",
        source_base_path=base,
    )

    plain = handler.render_message(record, "").plain
    assert "No tag in untagged/track.mp3" in plain
    assert "/home/listener" not in plain


def test_windows_paths_keep_backslashes() -> None:
    handler = _make_handler()

    record = _build_record(
        decode_event="decode.file.error",
        source_path="C:\\media\\incoming\\Artist\\Album\\Disc\\Track.m4a",
        source_base_path="C:\\media\\incoming",
        error_message="First atom expected to be ftyp, got 'moov'",
    )

    plain = handler.render_message(record, "").plain
    assert "Failed Artist\\Album\\Disc\\Track.m4a" in plain
    assert "(First atom expected to be ftyp, got 'moov')" in plain


def test_run_complete_lists_counts() -> None:
    handler = _make_handler()

    record = _build_record(
        decode_event="decode.run.complete",
        decoded=4,
        no_tag=1,
        failed=0,
        duration_seconds=0.25,
    )

    plain = handler.render_message(record, "").plain
    assert "Run complete [decoded=4, no_tag=1, failed=0, duration=0.25s]" in plain


def test_plain_records_fall_back_to_rich_handler() -> None:
    handler = _make_handler()

    rendered = handler.render_message(_build_record(), "Configuration saved")

    assert "Configuration saved" in str(rendered)


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "tagread.log"

    logger = setup_logger(log_file=log_file, console=Console(file=StringIO()))
    logger.debug("debug line for the file")
    for handler in logger.handlers:
        handler.flush()

    assert log_file.exists()
    assert "debug line for the file" in log_file.read_text(encoding="utf-8")
    assert sum(isinstance(h, TagEventRichHandler) for h in logger.handlers) == 1


def test_setup_logger_replaces_previous_handlers() -> None:
    _ = setup_logger()
    logger = setup_logger()

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], TagEventRichHandler)


def test_shorten_path_edge_cases() -> None:
    assert shorten_path("/music", base="/music") == "/music"
    assert shorten_path("") == "."
    assert shorten_path("C:\\a\\b\\c\\d\\e.mp3", max_segments=2) == "…\\d\\e.mp3"
    assert shorten_path("/elsewhere/a.mp3", base="/music") == "/elsewhere/a.mp3"
