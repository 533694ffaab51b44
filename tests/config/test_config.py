"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from tagread.config.config import (
    ID3_SEARCH_HORIZON_DEFAULT,
    MP4_MAX_ATOM_DEPTH_DEFAULT,
    Config,
)
from tagread.config.paths import default_config_path, default_log_file


def test_default_config(portable_repo_root: Path) -> None:
    """Defaults are used and ``save`` writes to the portable repo location."""
    config = Config()
    assert config.log_file is None
    assert config.id3_search_horizon == ID3_SEARCH_HORIZON_DEFAULT
    assert config.mp4_max_atom_depth == MP4_MAX_ATOM_DEPTH_DEFAULT

    written = config.save()

    assert written == (portable_repo_root / "config" / "config.toml").resolve()
    assert default_config_path().exists()


def test_save_load_toml(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    original_config = Config(
        log_file=Path("/test/logs/tagread.log"),
        id3_search_horizon=4096,
        mp4_max_atom_depth=12,
    )
    _ = original_config.save()

    loaded_config = Config.load()

    assert loaded_config.log_file == Path("/test/logs/tagread.log")
    assert loaded_config.id3_search_horizon == 4096
    assert loaded_config.mp4_max_atom_depth == 12


def test_saved_file_is_commented_toml(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    target = Config().save()

    content = target.read_text(encoding="utf-8")

    assert content.startswith("# tagread Configuration File")
    assert "log_file =" not in content
    assert tomllib.loads(content) == {
        "id3_search_horizon": ID3_SEARCH_HORIZON_DEFAULT,
        "mp4_max_atom_depth": MP4_MAX_ATOM_DEPTH_DEFAULT,
    }


def test_load_without_file_uses_defaults_and_writes_nothing(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    config = Config.load()

    assert config == Config()
    assert not default_config_path().exists()


def test_partial_file_fills_defaults(portable_repo_root: Path) -> None:
    config_file = portable_repo_root / "config" / "config.toml"
    config_file.parent.mkdir()
    _ = config_file.write_text("id3_search_horizon = 2048\n", encoding="utf-8")

    config = Config.load()

    assert config.id3_search_horizon == 2048
    assert config.mp4_max_atom_depth == MP4_MAX_ATOM_DEPTH_DEFAULT


def test_unknown_keys_are_ignored(portable_repo_root: Path, mocker: MockerFixture) -> None:
    config_file = portable_repo_root / "config" / "config.toml"
    config_file.parent.mkdir()
    _ = config_file.write_text('base_path = "/music"\nmp4_max_atom_depth = 4\n', encoding="utf-8")
    warning = mocker.patch("tagread.config.config.logger.warning")

    config = Config.load()

    assert config.mp4_max_atom_depth == 4
    warning.assert_called_once()
    assert "base_path" in warning.call_args.args


def test_environment_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    custom = tmp_path / "elsewhere" / "tagread.toml"
    custom.parent.mkdir()
    _ = custom.write_text('log_file = "/var/log/tagread.log"\n', encoding="utf-8")
    monkeypatch.setenv("TAGREAD_CONFIG_FILE", str(custom))

    assert default_config_path() == custom.resolve()
    assert Config.load().log_file == Path("/var/log/tagread.log")


def test_invalid_toml_raises(portable_repo_root: Path) -> None:
    config_file = portable_repo_root / "config" / "config.toml"
    config_file.parent.mkdir()
    _ = config_file.write_text("id3_search_horizon = = 1\n", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_singleton_behavior(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    config1 = Config.load()
    config2 = Config.load()
    assert config1 is config2


def test_blank_log_file_string_becomes_none() -> None:
    config = Config(log_file="  ")  # pyright: ignore[reportArgumentType]
    assert config.log_file is None


def test_default_log_file_lives_under_repo_root(portable_repo_root: Path) -> None:
    assert default_log_file() == (portable_repo_root / "logs" / "tagread.log").resolve()


def test_blank_environment_override_is_ignored(portable_repo_root: Path) -> None:
    path = default_config_path(env={"TAGREAD_CONFIG_FILE": "   "})

    assert path == (portable_repo_root / "config" / "config.toml").resolve()


def test_log_file_round_trips_with_backslashes(portable_repo_root: Path) -> None:
    _ = portable_repo_root
    _ = Config(log_file=Path("C:\\logs\\tagread.log")).save()

    assert Config.load().log_file == Path("C:\\logs\\tagread.log")
