"""Tests for UtilkitSettings: TOML, env, and override layering."""

from __future__ import annotations

from pathlib import Path

import pytest

from utilkit.config.settings import ConfigError, UtilkitSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = UtilkitSettings.load(start=tmp_path, stop_at=tmp_path)
        assert settings.config_path is None
        assert settings.logging.verbose is False
        assert settings.logging.format == "console"
        assert settings.random.seed is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = UtilkitSettings.load(start=tmp_path, stop_at=tmp_path)
        with pytest.raises(Exception):
            settings.config_path = tmp_path  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "utilkit.toml"
        toml.write_text('[logging]\nverbose = true\nformat = "json"\n[random]\nseed = 3\n')
        settings = UtilkitSettings.load(start=tmp_path, stop_at=tmp_path)
        assert settings.logging.verbose is True
        assert settings.logging.log_json is True
        assert settings.random.seed == 3
        assert settings.config_path == toml.resolve()

    def test_sparse_override(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[random]\nseed = 9\n")
        settings = UtilkitSettings.load(start=tmp_path, stop_at=tmp_path)
        assert settings.random.seed == 9
        assert settings.logging.format == "console"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[random]\nseed = 11\n")
        settings = UtilkitSettings.load(config_path=custom)
        assert settings.random.seed == 11
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[random]\nseed = 1\n")
        settings = UtilkitSettings.load(config_path=tmp_path / "nope.toml")
        assert settings.random.seed is None

    def test_stop_at_bounds_discovery(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[random]\nseed = 4\n")
        project = tmp_path / "project"
        project.mkdir()
        assert UtilkitSettings.load(start=project, stop_at=project).random.seed is None
        assert UtilkitSettings.load(start=project).random.seed == 4

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[random\nseed = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            UtilkitSettings.load(start=tmp_path, stop_at=tmp_path)


class TestOverrides:
    def test_override_beats_toml(self, tmp_path: Path) -> None:
        (tmp_path / "utilkit.toml").write_text("[random]\nseed = 1\n")
        settings = UtilkitSettings.load(start=tmp_path, random={"seed": 2})
        assert settings.random.seed == 2


class TestEnvVars:
    def test_nested_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UTILKIT_RANDOM__SEED", "5")
        settings = UtilkitSettings.load(start=tmp_path, stop_at=tmp_path)
        assert settings.random.seed == 5

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "utilkit.toml").write_text('[logging]\nformat = "console"\n')
        monkeypatch.setenv("UTILKIT_LOGGING__FORMAT", "json")
        settings = UtilkitSettings.load(start=tmp_path, stop_at=tmp_path)
        assert settings.logging.format == "json"
