"""Non-negative number brands and their guards.

``PositiveNumber`` and ``PositiveInteger`` follow the JavaScript-ish
convention this package uses throughout: zero counts as positive.

Both brands are nominal over one base type for the type checker
(``float`` and ``int``), but the guards accept any ``numbers.Real``:
``POSITIVE_NUMBER.from_(3)`` or ``POSITIVE_NUMBER.from_(Fraction(1, 2))``
return that exact object, typed as ``PositiveNumber``.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, NewType, TypeGuard

from utilkit.types.brand import create_brand

# int and Fraction values carry this brand too; float is the nominal base
PositiveNumber = NewType("PositiveNumber", float)
PositiveInteger = NewType("PositiveInteger", int)


def _is_real(value: Any) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _positive_number(value: Any) -> bool:
    return _is_real(value) and value >= 0


def _positive_integer(value: Any) -> bool:
    if not _positive_number(value):
        return False
    if isinstance(value, numbers.Rational):
        # exact, even past float range
        return value.denominator == 1
    return math.isfinite(value) and value == math.floor(value)


POSITIVE_NUMBER = create_brand(_positive_number, PositiveNumber)
POSITIVE_INTEGER = create_brand(_positive_integer, PositiveInteger)


def is_positive_number(value: Any) -> TypeGuard[PositiveNumber]:
    """Whether *value* is a real number >= 0 (NaN and ``bool`` excluded)."""
    return POSITIVE_NUMBER.is_(value)


def is_positive_integer(value: Any) -> TypeGuard[PositiveInteger]:
    """Whether *value* is an integral number >= 0.

    Integral floats such as ``5.0`` count; ``inf`` does not.
    """
    return POSITIVE_INTEGER.is_(value)
