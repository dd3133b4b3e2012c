"""Config file discovery.

``utilkit.toml`` is looked up from a start directory towards the
filesystem root, the way git finds ``.git/``.  The UTILKIT_CONFIG env var
short-circuits the search.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "utilkit.toml"
CONFIG_ENV_VAR = "UTILKIT_CONFIG"


def _search_dirs(start: Path, stop_at: Path | None) -> Iterator[Path]:
    """Yield *start* and its ancestors, ending at *stop_at* when it is one."""
    start = start.resolve()
    ceiling = stop_at.resolve() if stop_at is not None else None
    for directory in (start, *start.parents):
        yield directory
        if directory == ceiling:
            return


def find_config(start: Path | None = None, *, stop_at: Path | None = None) -> Path | None:
    """Return the nearest utilkit.toml at or above *start* (default: cwd).

    Args:
        start: Directory to begin the search from.
        stop_at: Last directory to inspect; ancestors above it are skipped.

    If UTILKIT_CONFIG is set, it alone decides: its path when that is a
    file, otherwise None.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    candidates = (d / CONFIG_FILENAME for d in _search_dirs(start or Path.cwd(), stop_at))
    return next((c for c in candidates if c.is_file()), None)
