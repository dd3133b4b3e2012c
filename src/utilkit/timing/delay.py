"""Asynchronous delay."""

from __future__ import annotations

import anyio

from utilkit.config.logging import get_logger

logger = get_logger(__name__)


async def delay(ms: float) -> None:
    """Suspend the current task for *ms* milliseconds.

    Runs on any backend anyio supports (asyncio, trio).  Zero or negative
    values are treated as zero: the task yields to the event loop once and
    returns.
    """
    seconds = max(ms, 0) / 1000
    logger.debug("delay.start", ms=ms)
    await anyio.sleep(seconds)
