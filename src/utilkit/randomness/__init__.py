"""Random selection helpers."""

from utilkit.randomness.choice import random_choice
from utilkit.randomness.integers import random_int, seed

__all__ = ["random_choice", "random_int", "seed"]
