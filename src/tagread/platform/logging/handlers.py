"""Rich console handler with dedicated rendering for decode events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, Final, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

_ELLIPSIS: Final[str] = "…"

# Event -> (icon, colour, verb placed before the path).
_EVENT_STYLES: Final[dict[str, tuple[str, str, str]]] = {
    "decode.file.start": ("🔎", "blue", "Reading "),
    "decode.file.success": ("🎵", "green", "Decoded "),
    "decode.file.no_tag": ("➖", "yellow", "No tag in "),
    "decode.file.error": ("⛔", "red", "Failed "),
    "decode.run.complete": ("✅", "cyan", "Run complete"),
}
_RUN_COUNTERS: Final[tuple[str, ...]] = ("decoded", "no_tag", "failed")


def _parse_path(raw: str) -> PurePath:
    return PureWindowsPath(raw) if "\\" in raw else PurePosixPath(raw)


def shorten_path(path: str, base: str | None = None, max_segments: int = 4) -> str:
    """Render ``path`` relative to ``base`` when possible, keeping the last ``max_segments`` parts.

    Dropped leading parts (including the root) are replaced by an ellipsis.
    Windows-looking paths keep their backslashes.
    """
    shown = _parse_path(path)
    if base:
        try:
            relative = shown.relative_to(_parse_path(base))
        except ValueError:
            relative = None
        if relative is not None and relative.parts:
            shown = relative

    separator = "\\" if isinstance(shown, PureWindowsPath) else "/"
    parts = [part for part in shown.parts if part != shown.anchor]
    if len(parts) > max_segments:
        return _ELLIPSIS + separator + separator.join(parts[-max_segments:])
    return (shown.anchor + separator.join(parts)) or "."


class TagEventRichHandler(RichHandler):
    """Rich handler that renders ``decode_event`` records as compact status lines.

    Records logged with ``extra={"decode_event": ...}`` get an icon, a colour
    and a shortened path; everything else falls back to ``RichHandler``.
    """

    PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        for option in ("show_time", "show_path", "show_level"):
            _ = kwargs.setdefault(option, False)
        _ = kwargs.setdefault("rich_tracebacks", True)
        _ = kwargs.setdefault("markup", True)
        super().__init__(*args, **kwargs)

    def _path_text(self, record: logging.LogRecord) -> Text:
        rendered = shorten_path(
            str(getattr(record, "source_path")),
            base=getattr(record, "source_base_path", None),
            max_segments=self.PATH_SEGMENT_LIMIT,
        )
        text = Text()
        for char in rendered:
            structural = char in "/\\" or char == _ELLIPSIS
            _ = text.append(char, style=Style(color="magenta" if structural else "white"))
        return text

    @staticmethod
    def _run_metrics(record: logging.LogRecord) -> list[str]:
        metrics = [
            f"{name}={value}"
            for name in _RUN_COUNTERS
            if isinstance(value := getattr(record, name, None), int)
        ]
        duration = getattr(record, "duration_seconds", None)
        if isinstance(duration, (int, float)):
            metrics.append(f"duration={duration:.2f}s")
        return metrics

    @staticmethod
    def _details(event: str, record: logging.LogRecord) -> str:
        if event == "decode.file.success":
            parts = [getattr(record, "artist", None), getattr(record, "title", None)]
            return " - ".join(part for part in parts if part)
        if event == "decode.file.error":
            return str(getattr(record, "error_message", None) or "")
        return ""

    def _render_decode_message(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "decode_event", None)
        if not isinstance(event, str):
            return None

        icon, color, verb = _EVENT_STYLES.get(event, ("ℹ️", "blue", ""))
        text = Text(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event == "decode.run.complete":
            _ = body.append(verb)
            metrics = self._run_metrics(record)
            if metrics:
                _ = body.append(f" [{', '.join(metrics)}]")
            return text.append_text(body)

        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if isinstance(sequence, int) and sequence > 0:
            counter = f"{sequence}/{total_files}" if isinstance(total_files, int) and total_files > 0 else str(sequence)
            _ = body.append(f"[{counter}] ")

        _ = body.append(verb)
        if getattr(record, "source_path", None):
            _ = body.append_text(self._path_text(record))

        details = self._details(event, record)
        if details:
            _ = body.append(f" ({details})")
        return text.append_text(body)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        decode_text = self._render_decode_message(record)
        if decode_text is not None:
            return decode_text
        return super().render_message(record, message)


__all__ = ["TagEventRichHandler", "shorten_path"]
