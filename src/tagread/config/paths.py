"""Filesystem locations for the configuration file and the log file.

Everything lives under the repository root so a checkout is self-contained:

- ``<repo_root>/config/config.toml``, or the file named by
  ``TAGREAD_CONFIG_FILE`` when that variable is set and non-blank.
- ``<repo_root>/logs/tagread.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

_ENV_CONFIG_FILE: Final[str] = "TAGREAD_CONFIG_FILE"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def _detect_repo_root(start: Path | None = None) -> Path:
    """Return the closest ancestor of ``start`` holding a root marker.

    ``start`` defaults to this module. The current working directory is used
    when no ancestor qualifies (e.g. an installed wheel).
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def _env_path(env: Mapping[str, str] | None, name: str) -> Path | None:
    value = (env if env is not None else os.environ).get(name, "").strip()
    return Path(value) if value else None


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Absolute path of the TOML configuration file.

    Args:
        env: Environment to consult instead of ``os.environ``.
    """
    override = _env_path(env, _ENV_CONFIG_FILE)
    path = override if override is not None else _detect_repo_root() / "config" / "config.toml"
    return path.expanduser().resolve()


def default_log_dir() -> Path:
    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    return default_log_dir() / "tagread.log"


__all__ = [
    "default_config_path",
    "default_log_dir",
    "default_log_file",
]
