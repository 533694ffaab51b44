"""src/tagread/ui/cli/commands/config.py
What: Show the effective configuration or write the default config file.
Why: Let users discover and tune the reader limits without reading the source.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path

from rich.console import Console
from rich.table import Table

from tagread.config.config import Config
from tagread.config.paths import default_config_path, default_log_file
from tagread.platform.logging import logger
from tagread.ui.cli.args.options import ConfigArgs


class ConfigCommand:
    """Command for inspecting and initialising configuration."""

    def __init__(self, args: ConfigArgs, console: Console | None = None) -> None:
        self.args = args
        self.console = console or Console()

    def execute(self) -> bool:
        """Execute the config command.

        Returns:
            bool: ``False`` when ``--init`` refused to overwrite an existing file.
        """
        target = default_config_path()
        if self.args.init:
            if target.exists() and not self.args.force:
                logger.error("Configuration file already exists: %s (use --force to overwrite)", target)
                return False
            _ = Config(log_file=default_log_file()).save(target)
            return True

        self._show(Config.load(), target)
        return True

    def _show(self, configuration: Config, target: Path) -> None:
        table = Table(title="Configuration", show_header=True)
        table.add_column("Key")
        table.add_column("Value")
        for f in fields(configuration):
            value = getattr(configuration, f.name)
            table.add_row(f.name, "" if value is None else str(value))
        self.console.print(table)
        state = "found" if target.exists() else "not found, defaults in use"
        self.console.print(f"Config file: {target} ({state})")


__all__ = ["ConfigCommand"]
