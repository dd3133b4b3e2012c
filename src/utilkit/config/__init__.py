"""Configuration: settings model, config discovery, and logging setup."""

from utilkit.config.discovery import find_config
from utilkit.config.logging import configure_logging
from utilkit.config.settings import ConfigError, UtilkitSettings

__all__ = ["ConfigError", "UtilkitSettings", "configure_logging", "find_config"]
