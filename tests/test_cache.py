"""Tests for the step-count keyed response cache."""

from __future__ import annotations

import asyncio

from shared.motivation.cache import CACHE_TTL_SECONDS, ResponseCache


def test_get_returns_sentence_within_ttl(clock) -> None:
    async def _run() -> None:
        cache = ResponseCache(clock=clock)
        await cache.put(4200, "Nice stroll.")
        clock.now += CACHE_TTL_SECONDS - 0.001
        assert await cache.get(4200) == "Nice stroll."

    asyncio.run(_run())


def test_entry_expires_at_ttl_and_is_only_shadowed(clock) -> None:
    async def _run() -> None:
        cache = ResponseCache(clock=clock)
        await cache.put(10, "Wow.")
        clock.now += CACHE_TTL_SECONDS
        assert await cache.get(10) is None
        assert len(cache) == 1

    asyncio.run(_run())


def test_put_overwrites_and_refreshes_timestamp(clock) -> None:
    async def _run() -> None:
        cache = ResponseCache(clock=clock)
        await cache.put(10, "first")
        clock.now += 200
        await cache.put(10, "second")
        clock.now += 200
        assert await cache.get(10) == "second"

    asyncio.run(_run())


def test_unknown_key_is_absent(clock) -> None:
    async def _run() -> None:
        cache = ResponseCache(clock=clock)
        await cache.put(1, "one")
        assert await cache.get(2) is None

    asyncio.run(_run())


def test_purge_expired_removes_only_stale_entries(clock) -> None:
    async def _run() -> None:
        cache = ResponseCache(ttl_seconds=10, clock=clock)
        await cache.put(1, "old")
        clock.now += 6
        await cache.put(2, "new")
        clock.now += 5
        assert await cache.purge_expired() == 1
        assert len(cache) == 1
        assert await cache.get(2) == "new"

    asyncio.run(_run())
