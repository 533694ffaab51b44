"""Command line interface package."""

from tagread.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
