"""Tests for utilkit.toml discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from utilkit.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config(tmp_path) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        assert find_config(deep) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config() == (tmp_path / CONFIG_FILENAME).resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        deep = tmp_path / "empty"
        deep.mkdir()
        assert find_config(deep, stop_at=tmp_path) is None

    def test_stop_at_hides_ancestors(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        project = tmp_path / "project"
        deep = project / "src"
        deep.mkdir(parents=True)
        assert find_config(deep, stop_at=project) is None
        assert find_config(deep) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_stop_at_dir_itself_is_searched(self, tmp_path: Path) -> None:
        project = tmp_path / "project"
        deep = project / "src"
        deep.mkdir(parents=True)
        (project / CONFIG_FILENAME).write_text("")
        assert find_config(deep, stop_at=project) == (project / CONFIG_FILENAME).resolve()

    def test_stop_at_outside_ancestry_searches_to_root(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        deep = tmp_path / "a"
        deep.mkdir()
        other = tmp_path / "b"
        other.mkdir()
        assert find_config(deep, stop_at=other) == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
