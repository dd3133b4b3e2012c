"""Unified settings: env vars, TOML config, and explicit overrides.

Priority chain (highest to lowest):
  1. Init kwargs  : overrides passed to :meth:`UtilkitSettings.load`
  2. Env vars     : ``UTILKIT_*`` prefix, ``__`` for nested sections
  3. TOML file    : ``utilkit.toml`` discovered via walk-up
  4. Code defaults: baked into the section models
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from utilkit.config.discovery import find_config
from utilkit.config.models import LoggingConfig, RandomConfig

# The file chosen by load(); read while the settings object is being built.
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class ConfigError(ValueError):
    """The config file exists but cannot be parsed."""


class UtilkitSettings(BaseSettings):
    """Frozen settings object for the package.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "UTILKIT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    random: RandomConfig = Field(default_factory=RandomConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        stop_at: Path | None = None,
        **overrides: Any,
    ) -> UtilkitSettings:
        """Build settings, discovering ``utilkit.toml`` unless *config_path* is given.

        A *config_path* that does not point at a file is ignored and no
        discovery happens.

        Raises:
            ConfigError: If the chosen TOML file is malformed.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start, stop_at=stop_at)

        token = _toml_file.set(toml_path)
        try:
            return cls(config_path=toml_path, **overrides)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _toml_file.reset(token)
