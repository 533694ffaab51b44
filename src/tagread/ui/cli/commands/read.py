"""src/tagread/ui/cli/commands/read.py
What: Execute tag reads for files and directory trees via the CLI.
Why: Bridge parsed arguments with the extraction facade and the displays.
"""

from __future__ import annotations

import time
from pathlib import Path

from tagread.features.extraction import TrackTagExtractor
from tagread.platform.logging import logger
from tagread.shared.errors import TagReadError
from tagread.ui.cli.args.options import ReadArgs
from tagread.ui.cli.display.result import ResultDisplay
from tagread.ui.cli.models import ReadResult, ReadStatus


class ReadCommand:
    """Command for reading the tags of one or more paths."""

    args: ReadArgs
    extractor: TrackTagExtractor
    result_display: ResultDisplay

    def __init__(
        self,
        args: ReadArgs,
        extractor: TrackTagExtractor | None = None,
        result_display: ResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.extractor = extractor or TrackTagExtractor(
            id3_search_horizon=args.id3_search_horizon,
            mp4_max_atom_depth=args.mp4_max_atom_depth,
        )
        self.result_display = result_display or ResultDisplay()

    def collect_files(self) -> list[Path]:
        """Expand directories into the supported files below them.

        Explicit file arguments are kept even when their extension is not
        supported so that the failure shows up in the results.
        """
        files: list[Path] = []
        for path in self.args.paths:
            if path.is_dir():
                files.extend(
                    sorted(
                        candidate
                        for candidate in path.rglob("*")
                        if candidate.is_file() and self.extractor.is_supported(candidate)
                    )
                )
            else:
                files.append(path)
        return files

    def read_file(self, file_path: Path, sequence: int = 0, total_files: int = 0) -> ReadResult:
        """Read one file, turning decoding failures into a failed result."""
        context = {"source_path": str(file_path), "sequence": sequence, "total_files": total_files}
        logger.debug("Reading %s", file_path, extra={"decode_event": "decode.file.start", **context})
        try:
            tag = self.extractor.extract(file_path)
        except (OSError, TagReadError, ValueError) as exc:
            logger.error(
                "Failed to read %s: %s",
                file_path,
                exc,
                extra={"decode_event": "decode.file.error", "error_message": str(exc), **context},
            )
            return ReadResult(source_path=file_path, status=ReadStatus.FAILED, error_message=str(exc))

        if tag is None:
            logger.info("No tag in %s", file_path, extra={"decode_event": "decode.file.no_tag", **context})
            return ReadResult(source_path=file_path, status=ReadStatus.NO_TAG)

        logger.info(
            "Decoded %s",
            file_path,
            extra={
                "decode_event": "decode.file.success",
                "artist": tag.artist,
                "title": tag.title,
                **context,
            },
        )
        return ReadResult(source_path=file_path, status=ReadStatus.DECODED, tag=tag)

    def execute(self) -> list[ReadResult]:
        """Execute the read command.

        Returns:
            List of read results, one per file.
        """
        started = time.perf_counter()
        files = self.collect_files()
        if not files:
            logger.warning("No supported files found")

        results = [
            self.read_file(file_path, sequence=index, total_files=len(files))
            for index, file_path in enumerate(files, start=1)
        ]

        logger.debug(
            "Read %d files",
            len(results),
            extra={
                "decode_event": "decode.run.complete",
                "decoded": sum(1 for r in results if r.status is ReadStatus.DECODED),
                "no_tag": sum(1 for r in results if r.status is ReadStatus.NO_TAG),
                "failed": sum(1 for r in results if r.status is ReadStatus.FAILED),
                "duration_seconds": time.perf_counter() - started,
            },
        )

        if self.args.json_output:
            self.result_display.show_json(results)
        else:
            self.result_display.show_results(results, quiet=self.args.quiet)
            self.result_display.show_summary(results, quiet=self.args.quiet)
        return results


__all__ = ["ReadCommand"]
