"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Attach the rich console handler and the optional rotating file handler to the package logger.
Why: Let library imports log to the console while the CLI opts into a persistent log file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import TagEventRichHandler


LOGGER_NAME: Final[str] = "tagread"

_FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
_LOG_BACKUPS: Final[int] = 5


def _rotating_file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        target,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """(Re)configure the ``tagread`` logger.

    Handlers from a previous call are closed and replaced, so the CLI can
    call this again once the configuration file has been read.

    Args:
        log_file: Path to the log file. If None, only console logging is enabled.
        console_level: Logging level for console output.
        file_level: Logging level for file output.
        console: Console to render to; defaults to a stderr console.

    Returns:
        logging.Logger: Configured logger instance.
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # Decode results go to stdout; diagnostics stay on stderr.
    console_handler = TagEventRichHandler(console=console or Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    package_logger.addHandler(console_handler)

    if log_file is not None:
        package_logger.addHandler(_rotating_file_handler(log_file, file_level))

    return package_logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "setup_logger", "logger"]
