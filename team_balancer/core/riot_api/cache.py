"""
Caching layer for Riot API responses using a TTL-based in-memory LRU cache.
"""

import time
import threading
from collections import OrderedDict
from typing import Any, Awaitable, Callable, Dict, Tuple, TypeVar
import structlog

from .rate_limiter import RateLimiter

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_MISSING = object()


class TTLCache:
    """Bounded LRU cache whose entries expire ``ttl`` seconds after being set."""

    def __init__(
        self,
        maxsize: int = 1000,
        ttl: float = 3600,
        timer: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize TTL cache.

        Args:
            maxsize: Maximum number of entries
            ttl: Time to live in seconds
            timer: Clock used for expiry checks
        """
        self.maxsize = maxsize
        self.ttl = ttl
        self.timer = timer
        self.cache: "OrderedDict[str, Tuple[Any, float]]" = OrderedDict()
        self.lock = threading.RLock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get value from cache if not expired.

        Args:
            key: Cache key
            default: Returned when the key is missing or expired

        Returns:
            Cached value if exists and not expired, ``default`` otherwise
        """
        with self.lock:
            if key in self.cache:
                value, expiry = self.cache[key]
                if self.timer() < expiry:
                    self.cache.move_to_end(key)
                    self._hits += 1
                    logger.debug("Cache hit", key=key, hits=self._hits)
                    return value
                del self.cache[key]
                logger.debug("Cache expired", key=key)
            self._misses += 1
            return default

    def set(self, key: str, value: Any) -> None:
        """
        Set value in cache with TTL, evicting the least recently used entry when full.

        Args:
            key: Cache key
            value: Value to cache
        """
        with self.lock:
            if key in self.cache:
                self.cache.move_to_end(key)
            elif len(self.cache) >= self.maxsize:
                oldest_key, _ = self.cache.popitem(last=False)
                logger.debug("Cache eviction", key=oldest_key, reason="full")

            self.cache[key] = (value, self.timer() + self.ttl)
            logger.debug("Cache set", key=key, ttl=self.ttl)

    def clear(self) -> None:
        """Clear all entries from cache."""
        with self.lock:
            count = len(self.cache)
            self.cache.clear()
            self._hits = 0
            self._misses = 0
            logger.info("Cache cleared", entries_removed=count)

    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        with self.lock:
            total = self._hits + self._misses
            return {
                "size": len(self.cache),
                "maxsize": self.maxsize,
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": self._hits / total if total > 0 else 0.0,
            }

    def __contains__(self, key: str) -> bool:
        """Whether ``key`` holds a live entry (does not touch LRU order or stats)."""
        with self.lock:
            entry = self.cache.get(key)
            return entry is not None and self.timer() < entry[1]

    def __len__(self) -> int:
        """Get number of entries in cache."""
        return len(self.cache)


class RateLimitedCache:
    """
    Memoized, rate-limited upstream calls.

    A single ``fetch(key, producer)`` serves every Riot API operation: live
    entries are returned straight from the cache, misses go through the
    shared ``RateLimiter`` and the result is stored. Failures are not cached.
    """

    def __init__(self, cache: TTLCache, limiter: RateLimiter):
        self.cache = cache
        self.limiter = limiter

    async def fetch(self, key: str, producer: Callable[[], Awaitable[T]]) -> T:
        """
        Return the cached value for ``key`` or produce, store and return it.

        Args:
            key: Cache key identifying the upstream call
            producer: Zero-argument coroutine function performing the call

        Returns:
            Cached or freshly produced value

        Raises:
            Whatever ``producer`` raises; nothing is stored in that case
        """
        cached = self.cache.get(key, _MISSING)
        if cached is not _MISSING:
            return cached

        value = await self.limiter.schedule(producer)
        self.cache.set(key, value)
        return value

    def clear(self) -> None:
        """Drop every cached response."""
        self.cache.clear()

    def stats(self) -> Dict[str, Any]:
        """Get statistics of the underlying cache."""
        return self.cache.stats()
