"""src/tagread/ui/cli/display/result.py
What: Render decoded tags and run summaries for the CLI.
Why: Keep console output formatting consistent across commands.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tagread.ui.cli.models import ReadResult, ReadStatus


def _optional_int(value: int | None) -> str:
    return "" if value is None else str(value)


@final
class ResultDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_results(self, results: Sequence[ReadResult], quiet: bool = False) -> None:
        """Render one table row per file.

        Args:
            results: Read results in processing order.
            quiet: Whether to suppress non-error output.
        """
        if quiet or not results:
            return

        table = Table(title="Tags", show_lines=False)
        table.add_column("File", style="white", overflow="fold")
        table.add_column("Title")
        table.add_column("Artist")
        table.add_column("Album")
        table.add_column("Year", justify="right")
        table.add_column("Track", justify="right")

        for result in results:
            name = escape(result.source_path.name)
            if result.status is ReadStatus.FAILED:
                table.add_row(name, f"[red]{escape(result.error_message or 'error')}[/red]", "", "", "", "")
            elif result.tag is None:
                table.add_row(name, "[yellow]<no tag>[/yellow]", "", "", "", "")
            else:
                tag = result.tag
                table.add_row(
                    name,
                    escape(tag.title),
                    escape(tag.artist),
                    escape(tag.album),
                    _optional_int(tag.year),
                    _optional_int(tag.track_number),
                )
        self.console.print(table)

    def show_json(self, results: Sequence[ReadResult]) -> None:
        """Print one JSON object per line."""
        for result in results:
            self.console.out(json.dumps(result.to_dict(), ensure_ascii=False), highlight=False)

    def show_summary(self, results: Sequence[ReadResult], quiet: bool = False) -> None:
        if quiet:
            return

        decoded = sum(1 for result in results if result.status is ReadStatus.DECODED)
        no_tag = sum(1 for result in results if result.status is ReadStatus.NO_TAG)
        failures = [result for result in results if result.status is ReadStatus.FAILED]

        self.console.print("\n[bold]Read Summary:[/bold]")
        self.console.print(f"Total files read: {len(results)}")
        self.console.print(f"[green]Decoded: {decoded}[/green]")
        if no_tag:
            self.console.print(f"[yellow]Without tag: {no_tag}[/yellow]")
        if not failures:
            return

        self.console.print(f"[red]Failed: {len(failures)}[/red]")
        for failed in failures:
            self.console.print(f"[red]  • {escape(str(failed.source_path))}: {escape(failed.error_message or '')}[/red]")


__all__ = ["ResultDisplay"]
