"""Pick one element at random from a pool of values."""

from __future__ import annotations

from typing import TypeVar, overload

from utilkit.config.logging import get_logger
from utilkit.randomness import integers

logger = get_logger(__name__)

T = TypeVar("T")

EMPTY_POOL_MESSAGE = "Cannot select a random element: empty array"
NO_VALUES_MESSAGE = "Cannot select a random element: no values provided"


@overload
def random_choice(values: list[T] | tuple[T, ...], /) -> T: ...


@overload
def random_choice(*values: T) -> T: ...


def random_choice(*values):  # type: ignore[no-untyped-def]
    """Return one of the given values, chosen uniformly.

    Accepts either a single list/tuple (``random_choice([1, 2, 3])``) or
    the values as positional arguments (``random_choice(1, 2, 3)``).

    Raises:
        ValueError: If the pool is empty.  The message distinguishes an
            empty list from a call with no arguments.
    """
    is_pool_input = len(values) == 1 and isinstance(values[0], (list, tuple))
    pool = values[0] if is_pool_input else values

    if not pool:
        raise ValueError(EMPTY_POOL_MESSAGE if is_pool_input else NO_VALUES_MESSAGE)

    index = integers.random_int(len(pool))
    logger.debug("random_choice.picked", index=index, size=len(pool))
    return pool[index]
