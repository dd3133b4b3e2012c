"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, utilkit.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    format: Literal["console", "json"] = "console"

    @property
    def log_json(self) -> bool:
        return self.format == "json"


class RandomConfig(BaseModel):
    """[random] section.

    A fixed ``seed`` makes :func:`utilkit.randomness.random_int` (and
    everything built on it) reproducible across runs.
    """

    model_config = {"frozen": True}

    seed: int | None = None
