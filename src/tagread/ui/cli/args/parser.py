"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from tagread.config.config import Config
from tagread.platform.logging import logger, setup_logger
from tagread.ui.cli.args.options import CLIArgs, ConfigArgs, ReadArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="tagread",
            description="tagread - Read title, artist, album, year and track tags from MP3 and M4A files.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        read_parser = subparsers.add_parser(
            "read",
            help="Decode the tags of files or of every supported file below a directory",
        )
        _ = read_parser.add_argument(
            "paths",
            type=str,
            nargs="+",
            help="Audio files or directories to read",
            metavar="PATH",
        )
        _ = read_parser.add_argument(
            "--json",
            action="store_true",
            dest="json_output",
            help="Print one JSON object per file instead of a table",
        )
        _ = read_parser.add_argument(
            "--id3-search-horizon",
            type=int,
            metavar="BYTES",
            help="Override the furthest offset at which an ID3 marker may start",
        )
        verbosity = read_parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed decoding information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

        config_parser = subparsers.add_parser(
            "config",
            help="Show the effective configuration or write the default file",
        )
        _ = config_parser.add_argument(
            "--init",
            action="store_true",
            help="Write the default configuration file",
        )
        _ = config_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing configuration file with --init",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If paths don't exist or other validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command

        if command == "read":
            return ArgumentParser._process_read(parsed_args, configuration)

        if command == "config":
            return ConfigArgs(command="config", init=parsed_args.init, force=parsed_args.force)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _process_read(parsed_args: argparse.Namespace, configuration: Config) -> ReadArgs:
        paths = [Path(raw) for raw in parsed_args.paths]
        missing = [path for path in paths if not path.exists()]
        if missing:
            for path in missing:
                logger.error("Path does not exist: %s", path)
            sys.exit(1)

        horizon = parsed_args.id3_search_horizon
        if horizon is not None and horizon <= 0:
            logger.error("ID3 search horizon must be a positive integer; received %s", horizon)
            sys.exit(1)

        return ReadArgs(
            command="read",
            paths=paths,
            json_output=parsed_args.json_output,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
            id3_search_horizon=horizon if horizon is not None else configuration.id3_search_horizon,
            mp4_max_atom_depth=configuration.mp4_max_atom_depth,
        )
