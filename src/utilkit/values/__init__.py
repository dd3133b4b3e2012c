"""Value helpers: sequences, numeric guards, templating, presence checks."""

from utilkit.values.array import times
from utilkit.values.guards import is_defined
from utilkit.values.numeric import (
    POSITIVE_INTEGER,
    POSITIVE_NUMBER,
    PositiveInteger,
    PositiveNumber,
    is_positive_integer,
    is_positive_number,
)
from utilkit.values.strings import template, template_variables

__all__ = [
    "POSITIVE_INTEGER",
    "POSITIVE_NUMBER",
    "PositiveInteger",
    "PositiveNumber",
    "is_defined",
    "is_positive_integer",
    "is_positive_number",
    "template",
    "template_variables",
    "times",
]
