"""Random integer source.

Kept in its own module so callers (and tests) can swap ``random_int``
without touching the selection logic built on top of it.
"""

from __future__ import annotations

import random

_rng = random.Random()


def seed(value: int | None = None) -> None:
    """Reseed the generator; ``None`` reseeds from system entropy."""
    _rng.seed(value)


def random_int(max: int) -> int:  # noqa: A002
    """Return a random integer in ``[0, max)``.

    Fractions truncate toward zero, so a non-integer *max* still yields
    values below it.
    """
    if max == 1:
        return 0
    return int(_rng.random() * max)
