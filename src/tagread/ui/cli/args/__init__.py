"""Command line argument handling package."""

from tagread.ui.cli.args.parser import ArgumentParser
from tagread.ui.cli.args.options import CLIArgs, ConfigArgs, ReadArgs

__all__ = ["ArgumentParser", "CLIArgs", "ConfigArgs", "ReadArgs"]
