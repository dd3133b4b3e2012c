"""Time helpers."""

from utilkit.timing.delay import delay

__all__ = ["delay"]
