"""Minimum-interval rate limiting for outbound generation requests."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)

MIN_REQUEST_INTERVAL_SECONDS = 1.0


class MinIntervalRateLimiter:
    """Keeps consecutive dispatches at least `min_interval` seconds apart.

    Waiters are serialized on a lock, and each waiter claims its dispatch
    slot before releasing it, so concurrent callers line up one interval
    apart instead of all waking at the same instant.
    """

    def __init__(
        self,
        min_interval: float = MIN_REQUEST_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._min_interval = min_interval
        self._clock = clock
        self._sleep = sleep
        self._lock = asyncio.Lock()
        self.last_request_at: float | None = None

    @property
    def min_interval(self) -> float:
        return self._min_interval

    def required_wait(self) -> float:
        if self.last_request_at is None:
            return 0.0
        elapsed = self._clock() - self.last_request_at
        return max(0.0, self._min_interval - elapsed)

    async def wait(self) -> float | None:
        """Sleep until the next slot is free, claim it, and return the timestamp it replaced."""
        async with self._lock:
            delay = self.required_wait()
            if delay > 0:
                logger.debug("Rate limiter sleeping %.3fs before dispatch", delay)
                await self._sleep(delay)
            previous = self.last_request_at
            self.last_request_at = self._clock()
            return previous

    def mark_dispatched(self) -> None:
        # Must stay synchronous: runs in the `finally` of cancelled callers.
        self.last_request_at = self._clock()

    def release(self, previous: float | None, reserved: float | None) -> None:
        """Give back a reservation whose request was never sent."""
        if self.last_request_at == reserved:
            self.last_request_at = previous
