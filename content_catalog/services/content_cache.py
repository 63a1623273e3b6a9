"""
Content Cache.

In-memory cache of content records keyed by content identifier, with a
sliding expiration window. Every read hit and every write pushes the
entry's expiry forward by the full TTL.
"""

import logging
import threading
import time
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from ..config.settings import DEFAULT_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)


class ContentCache:
    """
    Thread-safe TTL map with sliding expiration.

    Expired entries are treated as absent on access and dropped right
    away; clear_expired() sweeps the ones nobody asked for.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        time_func: Callable[[], float] = time.monotonic
    ):
        """
        Initialize Content Cache.

        Args:
            ttl_seconds: Sliding expiration window in seconds (default: 30)
            time_func: Clock returning seconds, injectable for testing
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")

        self.ttl_seconds = ttl_seconds
        self._time = time_func
        self._entries: Dict[Hashable, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

        # Metrics tracking
        self._hits = 0
        self._misses = 0
        self._writes = 0
        self._evictions = 0

    def get(self, key: Hashable) -> Optional[Any]:
        """
        Return the cached value and refresh its expiry.

        Args:
            key: Content identifier

        Returns:
            Cached value or None on miss or expiry
        """
        with self._lock:
            now = self._time()
            entry = self._entries.get(key)

            if entry is None:
                self._misses += 1
                return None

            value, expires_at = entry
            if expires_at <= now:
                del self._entries[key]
                self._evictions += 1
                self._misses += 1
                return None

            self._entries[key] = (value, now + self.ttl_seconds)
            self._hits += 1
            return value

    def set(self, key: Hashable, value: Any) -> None:
        """
        Store a value, resetting its expiry to a full TTL.

        Args:
            key: Content identifier
            value: Content to cache
        """
        with self._lock:
            self._entries[key] = (value, self._time() + self.ttl_seconds)
            self._writes += 1

    def remove(self, key: Hashable) -> bool:
        """
        Remove an entry if present.

        Args:
            key: Content identifier

        Returns:
            True if an entry was removed
        """
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear_expired(self) -> int:
        """
        Remove all expired entries.

        Returns:
            Number of entries removed
        """
        with self._lock:
            now = self._time()
            expired = [
                key for key, (_, expires_at) in self._entries.items()
                if expires_at <= now
            ]
            for key in expired:
                del self._entries[key]
            self._evictions += len(expired)

        if expired:
            logger.info(f"Cleared {len(expired)} expired cache entries")
        return len(expired)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get cache statistics.

        Returns:
            Dictionary with hits, misses, writes, evictions, live entries
            and hit rate percentage
        """
        with self._lock:
            now = self._time()
            live_entries = sum(
                1 for _, expires_at in self._entries.values()
                if expires_at > now
            )
            total_requests = self._hits + self._misses
            hit_rate = (self._hits / total_requests * 100) if total_requests > 0 else 0

            return {
                'hits': self._hits,
                'misses': self._misses,
                'writes': self._writes,
                'evictions': self._evictions,
                'entries': live_entries,
                'hit_rate_percent': round(hit_rate, 1),
                'ttl_seconds': self.ttl_seconds,
            }

    def __contains__(self, key: Hashable) -> bool:
        # Presence check only; does not slide the expiry
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and entry[1] > self._time()

    def __len__(self) -> int:
        with self._lock:
            now = self._time()
            return sum(
                1 for _, expires_at in self._entries.values()
                if expires_at > now
            )
