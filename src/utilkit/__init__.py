"""utilkit: small, independent helpers and nominal brand types.

Each helper lives in its own module and can be imported on its own;
the most common ones are re-exported here.
"""

from utilkit.bootstrap import configure
from utilkit.randomness import random_choice, random_int
from utilkit.timing import delay
from utilkit.types import (
    BrandDescriptor,
    BrandMismatchError,
    Failure,
    Result,
    Success,
    create_brand,
    unbrand,
)
from utilkit.values import (
    is_defined,
    is_positive_integer,
    is_positive_number,
    template,
    times,
)

__all__ = [
    "BrandDescriptor",
    "BrandMismatchError",
    "Failure",
    "Result",
    "Success",
    "configure",
    "create_brand",
    "delay",
    "is_defined",
    "is_positive_integer",
    "is_positive_number",
    "random_choice",
    "random_int",
    "template",
    "times",
    "unbrand",
]
