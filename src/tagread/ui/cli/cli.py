"""Command line interface for tagread."""

import sys
from typing import final

from tagread.platform.logging import logger
from tagread.ui.cli.args import ArgumentParser
from tagread.ui.cli.args.options import CLIArgs, ConfigArgs, ReadArgs
from tagread.ui.cli.commands import ConfigCommand, ReadCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, ReadArgs):
                results = ReadCommand(args).execute()
                if any(not r.success for r in results):
                    sys.exit(1)
                return

            assert isinstance(args, ConfigArgs)
            if not ConfigCommand(args).execute():
                sys.exit(1)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Command processing calls
        ``sys.exit(...)`` on errors, so this return is only reached when
        processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
