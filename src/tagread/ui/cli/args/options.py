"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class ReadArgs:
    """Command line arguments for the ``read`` subcommand."""

    command: Literal["read"]
    paths: list[Path]
    json_output: bool
    verbose: bool
    quiet: bool
    id3_search_horizon: int | None
    mp4_max_atom_depth: int | None = None


@final
@dataclass(slots=True)
class ConfigArgs:
    """Command line arguments for the ``config`` subcommand."""

    command: Literal["config"]
    init: bool
    force: bool


CLIArgs = ReadArgs | ConfigArgs

__all__ = ["CLIArgs", "ConfigArgs", "ReadArgs"]
