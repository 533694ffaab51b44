"""Tests for reader limits derived from configuration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tagread.config import settings
from tagread.config.config import (
    ID3_SEARCH_HORIZON_DEFAULT,
    MP4_MAX_ATOM_DEPTH_DEFAULT,
    Config,
)


@pytest.mark.parametrize("value", [0, -5, True, "4096", 1.5])
def test_invalid_limits_fall_back_to_defaults(value: object, mocker: MockerFixture) -> None:
    warning = mocker.patch("tagread.config.config.logger.warning")

    config = Config(id3_search_horizon=value, mp4_max_atom_depth=value)  # pyright: ignore[reportArgumentType]

    assert config.id3_search_horizon == ID3_SEARCH_HORIZON_DEFAULT
    assert config.mp4_max_atom_depth == MP4_MAX_ATOM_DEPTH_DEFAULT
    assert warning.call_count == 2


def test_invalid_value_in_file_is_replaced(portable_repo_root: Path) -> None:
    config_file = portable_repo_root / "config" / "config.toml"
    config_file.parent.mkdir()
    _ = config_file.write_text("id3_search_horizon = 0\nmp4_max_atom_depth = 8\n", encoding="utf-8")

    config = Config.load()

    assert config.id3_search_horizon == ID3_SEARCH_HORIZON_DEFAULT
    assert config.mp4_max_atom_depth == 8


def test_settings_are_positive() -> None:
    assert settings.ID3_SEARCH_HORIZON > 0
    assert settings.MP4_MAX_ATOM_DEPTH > 0


def test_defaults() -> None:
    assert ID3_SEARCH_HORIZON_DEFAULT == 1024 * 1024
    assert MP4_MAX_ATOM_DEPTH_DEFAULT == 32
