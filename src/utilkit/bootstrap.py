"""One-call setup for applications using utilkit.

Loads :class:`~utilkit.config.settings.UtilkitSettings`, routes logging
through structlog, and seeds the shared random generator.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from utilkit.config.logging import configure_logging, get_logger
from utilkit.config.settings import UtilkitSettings
from utilkit.randomness.integers import seed

logger = get_logger(__name__)


def configure(
    settings: UtilkitSettings | None = None,
    *,
    config_path: str | Path | None = None,
    **overrides: Any,
) -> UtilkitSettings:
    """Apply *settings* (loaded on demand) and return them.

    Only reseeds the generator when a seed is configured, so calling this
    twice without one does not disturb an existing sequence.
    """
    if settings is None:
        settings = UtilkitSettings.load(config_path=config_path, **overrides)

    configure_logging(
        verbose=settings.logging.verbose,
        log_json=settings.logging.log_json,
    )
    if settings.random.seed is not None:
        seed(settings.random.seed)

    logger.debug("utilkit.configured", config_path=str(settings.config_path))
    return settings
