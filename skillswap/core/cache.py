"""
Process-wide query cache for actor reads.

Every read goes through a tuple query key such as ("mySwapRequests", principal).
Entries older than the staleness window are still served (stale-but-show)
while a single background refresh per key brings them up to date.
Mutations drop related entries with invalidate() so the next read refetches.
"""
import asyncio
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Hashable, Optional, Tuple

from skillswap.core.logging import get_logger

logger = get_logger(__name__)

QueryKey = Tuple[Hashable, ...]
Fetcher = Callable[[], Awaitable[Any]]


@dataclass
class CacheEntry:
    """A cached value and the clock reading at which it was stored."""

    value: Any
    stored_at: float

    def age(self, now: float) -> float:
        return now - self.stored_at


class QueryCache:
    """
    Key -> value cache with a TTL and explicit invalidation.

    Usage:
        cache = QueryCache(stale_seconds=300)
        profile = await cache.fetch(("callerProfile", me), lambda: actor.get_caller_profile(me))
        ...
        cache.invalidate("callerProfile")
    """

    def __init__(
        self,
        stale_seconds: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.stale_seconds = stale_seconds
        self._clock = clock
        self._entries: Dict[QueryKey, CacheEntry] = {}
        self._refreshing: Dict[QueryKey, asyncio.Task] = {}
        # Bumped on every invalidation so late refreshes cannot resurrect dropped data
        self._epoch = 0

    def __len__(self) -> int:
        return len(self._entries)

    def peek(self, key: QueryKey) -> Optional[CacheEntry]:
        """Return the raw entry for a key without fetching."""
        return self._entries.get(key)

    def is_stale(self, key: QueryKey) -> bool:
        entry = self._entries.get(key)
        return entry is None or entry.age(self._clock()) >= self.stale_seconds

    async def fetch(self, key: QueryKey, fetcher: Fetcher) -> Any:
        """
        Read through the cache.

        Fresh hit: cached value. Stale hit: cached value now, refresh in the
        background. Miss: await the fetcher and store its result.
        Fetcher errors on a miss propagate to the caller.
        """
        entry = self._entries.get(key)
        if entry is None:
            return await self._load(key, fetcher)

        if entry.age(self._clock()) >= self.stale_seconds:
            self._schedule_refresh(key, fetcher)

        return entry.value

    def set(self, key: QueryKey, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    def invalidate(self, *prefix: Hashable) -> int:
        """
        Drop every entry whose key starts with prefix.

        invalidate("reviews") drops ("reviews", "alice") and ("reviews", "bob");
        invalidate() with no prefix drops everything. Returns the number of
        entries dropped.
        """
        self._epoch += 1
        size = len(prefix)
        doomed = [key for key in self._entries if key[:size] == prefix]
        for key in doomed:
            del self._entries[key]

        for key in [k for k in self._refreshing if k[:size] == prefix]:
            self._refreshing.pop(key).cancel()

        logger.debug("cache_invalidated", prefix=list(prefix), dropped=len(doomed))
        return len(doomed)

    def clear(self) -> None:
        self.invalidate()

    async def drain(self) -> None:
        """Wait for in-flight background refreshes to settle."""
        while self._refreshing:
            await asyncio.gather(*list(self._refreshing.values()), return_exceptions=True)

    async def _load(self, key: QueryKey, fetcher: Fetcher) -> Any:
        epoch = self._epoch
        value = await fetcher()
        if epoch == self._epoch:
            self.set(key, value)
        return value

    def _schedule_refresh(self, key: QueryKey, fetcher: Fetcher) -> None:
        if key in self._refreshing:
            return
        task = asyncio.get_running_loop().create_task(self._refresh(key, fetcher))
        self._refreshing[key] = task

    async def _refresh(self, key: QueryKey, fetcher: Fetcher) -> None:
        try:
            await self._load(key, fetcher)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            # Keep serving the stale value; the next read tries again
            logger.warning(
                "cache_refresh_failed",
                key=[str(part) for part in key],
                exc_type=type(e).__name__,
                exc_message=str(e),
            )
        finally:
            if self._refreshing.get(key) is asyncio.current_task():
                del self._refreshing[key]
