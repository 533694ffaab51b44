"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point repository-root detection at a temporary directory."""

    root = tmp_path / "repo"
    root.mkdir()
    _ = (root / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import tagread.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return root

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("TAGREAD_CONFIG_FILE", raising=False)
    return root


@pytest.fixture(autouse=True)
def config_runtime_env() -> Iterator[None]:
    """Reset the configuration singleton around a test run."""

    import tagread.config.config as config_module

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]

    try:
        yield None
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    """Undo handler changes made by CLI runs."""

    yield None

    from tagread.platform.logging import setup_logger

    _ = setup_logger()
