"""Sequence builders."""

from __future__ import annotations

import math


def times(n: float) -> list[int]:
    """Return ``[0, 1, ..., n - 1]``.

    Handy for repeating something *n* times::

        for _ in times(3):
            ...

    Fractional *n* truncates (``times(3.7) == [0, 1, 2]``); zero,
    negative, and NaN give an empty list.
    """
    if math.isnan(n):
        return []
    return list(range(max(int(n), 0)))
