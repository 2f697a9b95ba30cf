"""In-memory TTL cache for health probe results."""

import asyncio
import time
from typing import Any

from usahaku_navigator.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class CacheEntry:
    """A cached value with a monotonic expiry time."""

    def __init__(self, value: Any, expires_at: float):
        self.value = value
        self.expires_at = expires_at

    def is_expired(self) -> bool:
        return time.monotonic() >= self.expires_at


class SimpleCache:
    """In-memory cache with TTL support, guarded by an asyncio.Lock."""

    def __init__(self):
        self._cache: dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any | None:
        """Get cached value, or None if missing or expired."""
        async with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None
            if entry.is_expired():
                del self._cache[key]
                log_with_context(logger, "debug", "Cache expired", cache_key=key, event_type="cache_expired")
                return None
            return entry.value

    async def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        """Set cached value with TTL."""
        async with self._lock:
            self._cache[key] = CacheEntry(value, time.monotonic() + ttl_seconds)
            log_with_context(
                logger,
                "debug",
                "Cache set",
                cache_key=key,
                ttl_seconds=ttl_seconds,
                event_type="cache_set",
            )

    async def clear(self, key: str | None = None) -> None:
        """Clear one key, or the entire cache when key is None."""
        async with self._lock:
            if key is None:
                self._cache.clear()
            else:
                self._cache.pop(key, None)


# Global cache instance
_cache = SimpleCache()


def get_cache() -> SimpleCache:
    """Get global cache instance."""
    return _cache
