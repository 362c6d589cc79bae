"""Tests for config discovery."""

from pathlib import Path

import pytest

from epochctl.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    ConfigNotFoundError,
    find_config,
)


class TestWalkUp:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[epoch]\nthreshold = 5\n")
        assert find_config(tmp_path) == config_file.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file.resolve()

    def test_nearest_file_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        child = tmp_path / "project"
        child.mkdir()
        nearer = child / CONFIG_FILENAME
        nearer.write_text("")
        assert find_config(child) == nearer.resolve()

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert find_config() == config_file.resolve()

    def test_directory_named_like_config_is_skipped(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        (child / CONFIG_FILENAME).mkdir(parents=True)
        assert find_config(child) is None

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None


class TestExplicitPaths:
    def test_explicit_path_beats_env_and_walk_up(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("")
        env_file = tmp_path / "env.toml"
        env_file.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(env_file))
        assert find_config(tmp_path, explicit=str(explicit)) == explicit

    def test_env_var_beats_walk_up(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_missing_explicit_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        with pytest.raises(ConfigNotFoundError) as exc_info:
            find_config(tmp_path, explicit=tmp_path / "missing.toml")
        assert exc_info.value.source == "--config"
        assert exc_info.value.path == tmp_path / "missing.toml"

    def test_missing_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        with pytest.raises(ConfigNotFoundError, match=CONFIG_ENV_VAR):
            find_config(tmp_path)

    def test_is_a_file_not_found_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            find_config(tmp_path, explicit=tmp_path / "missing.toml")
