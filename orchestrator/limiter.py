"""Bounded-concurrency map over a sequence of inputs."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from utils.exceptions import InvalidArgument
from .counters import GuardedCounter


logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


async def run_limited(
    inputs: Sequence[T],
    limit: int,
    worker: Callable[[T], Awaitable[R]],
) -> List[R]:
    """
    Run ``worker`` over ``inputs`` with at most ``limit`` calls in flight.

    Result ``i`` always belongs to ``inputs[i]``, whatever order the calls
    finish in. Each input is handed to exactly one worker loop through a shared
    fetch-and-increment cursor. If ``worker`` raises, the other loops are
    cancelled and the exception propagates.
    """
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        raise InvalidArgument("concurrency limit must be a positive integer", {"limit": limit})

    items = list(inputs)
    if not items:
        return []

    results: List[Optional[R]] = [None] * len(items)
    cursor = GuardedCounter()

    async def _loop() -> None:
        while True:
            idx = cursor.fetch_and_increment()
            if idx >= len(items):
                return
            results[idx] = await worker(items[idx])

    width = min(limit, len(items))
    logger.debug(f"run_limited: {len(items)} inputs, {width} workers")
    tasks = [asyncio.ensure_future(_loop()) for _ in range(width)]
    try:
        await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    return results  # type: ignore[return-value]
