"""Presence guards."""

from __future__ import annotations

from typing import TypeGuard, TypeVar

T = TypeVar("T")


def is_defined(value: T | None) -> TypeGuard[T]:
    """Whether *value* is not ``None``.

    Falsy values (``0``, ``""``, ``False``, ``[]``) are defined.
    """
    return value is not None
