"""Feed Cache — in-memory key/value store with a fixed TTL.

Rendered feeds are cached as opaque strings keyed by ``rss_feed_{section}``.
An entry is never served once its expiry has passed; expired entries behave
exactly like missing ones.

Uses one asyncio.Lock per key with double-checked lookup so concurrent
misses for the same section trigger a single upstream call, while different
sections never wait on each other.
"""

import asyncio
import time
from dataclasses import dataclass
from typing import Awaitable, Callable

from guardian_rss.utils.logging_config import get_logger

logger = get_logger(__name__)

# 10 minutes default TTL
DEFAULT_TTL_SECONDS: int = 600


def cache_key(section: str) -> str:
    return f"rss_feed_{section}"


@dataclass(frozen=True)
class CacheEntry:
    value: str
    expires_at: float


@dataclass
class _KeyLock:
    lock: asyncio.Lock
    users: int = 0


class FeedCache:
    """Process-scoped TTL cache for rendered feeds."""

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        # Created on first miss and dropped once no task holds or waits on it
        self._locks: dict[str, _KeyLock] = {}

    def __len__(self) -> int:
        return sum(1 for key in list(self._entries) if self.get(key) is not None)

    def _acquire_slot(self, key: str) -> asyncio.Lock:
        slot = self._locks.get(key)
        if slot is None:
            slot = self._locks[key] = _KeyLock(lock=asyncio.Lock())
        slot.users += 1
        return slot.lock

    def _release_slot(self, key: str) -> None:
        slot = self._locks.get(key)
        if slot is None:
            return
        slot.users -= 1
        if slot.users <= 0:
            del self._locks[key]

    def _prune_expired(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if now >= entry.expires_at]
        for key in expired:
            del self._entries[key]

    def get(self, key: str) -> str | None:
        """Return the live value for *key*, dropping it if expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: str, ttl_seconds: int | None = None) -> None:
        """Store *value* for *key* and evict every entry that has expired."""
        now = self._clock()
        self._prune_expired(now)
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        if ttl <= 0:
            return
        self._entries[key] = CacheEntry(value=value, expires_at=now + ttl)

    def clear(self) -> None:
        self._entries.clear()
        self._locks.clear()

    async def get_or_compute(
        self,
        key: str,
        compute: Callable[[], Awaitable[str]],
        ttl_seconds: int | None = None,
    ) -> str:
        """Return the cached value for *key*, computing and storing it on a miss.

        Fast path: return a live entry immediately.
        Slow path: acquire the key's lock, double-check, then await *compute*.
        Failures propagate and leave the cache untouched.
        """
        # Fast path — no lock needed
        cached = self.get(key)
        if cached is not None:
            logger.debug("Feed cache hit", key=key)
            return cached

        # Slow path — serialize concurrent misses for the same key
        lock = self._acquire_slot(key)
        try:
            async with lock:
                cached = self.get(key)
                if cached is not None:
                    logger.debug("Feed cache hit after wait", key=key)
                    return cached

                logger.debug("Feed cache miss", key=key)
                value = await compute()
                self.set(key, value, ttl_seconds=ttl_seconds)
                return value
        finally:
            self._release_slot(key)
