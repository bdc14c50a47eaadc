"""
Response cache for motivational sentences.

Keyed by step count. Entries stay valid for a fixed TTL and are then
shadowed (treated as absent) until overwritten or swept by purge_expired().
All access goes through a single asyncio.Lock so a read never observes a
half-applied write from a concurrent caller.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)

CACHE_TTL_SECONDS = 300.0


@dataclass(frozen=True)
class CacheEntry:
    sentence: str
    created_at: float


class ResponseCache:
    def __init__(
        self,
        ttl_seconds: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[int, CacheEntry] = {}
        self._lock = asyncio.Lock()

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    async def get(self, steps: int) -> str | None:
        async with self._lock:
            entry = self._entries.get(steps)
            if entry is None:
                logger.debug("Motivation cache MISS for %d steps", steps)
                return None
            if self._clock() - entry.created_at >= self._ttl:
                logger.debug("Motivation cache STALE for %d steps", steps)
                return None
            logger.debug("Motivation cache HIT for %d steps", steps)
            return entry.sentence

    async def put(self, steps: int, sentence: str) -> None:
        async with self._lock:
            self._entries[steps] = CacheEntry(sentence=sentence, created_at=self._clock())

    async def purge_expired(self) -> int:
        """Drop stale entries and return how many were removed."""
        async with self._lock:
            now = self._clock()
            stale = [k for k, e in self._entries.items() if now - e.created_at >= self._ttl]
            for key in stale:
                del self._entries[key]
            return len(stale)

    def __len__(self) -> int:
        return len(self._entries)
