"""Command execution package for CLI."""

from tagread.ui.cli.commands.config import ConfigCommand
from tagread.ui.cli.commands.read import ReadCommand

__all__ = [
    "ConfigCommand",
    "ReadCommand",
]
