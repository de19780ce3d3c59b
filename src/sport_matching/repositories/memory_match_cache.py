"""In-process implementation of MatchCacheStore."""

import logging
import threading
import time
from collections.abc import Callable

from sport_matching.config import settings
from sport_matching.entities import CandidateMatch

logger = logging.getLogger(__name__)


class InMemoryMatchCache:
    """Per-user match list cache held in process memory.

    This class satisfies the MatchCacheStore protocol through structural
    typing - no explicit inheritance needed.

    Keys are guarded by a fixed set of striped locks, so a read-check-delete
    on one user never interleaves with a write to the same user while
    unrelated users proceed in parallel. Expired entries are dropped on
    read; `purge_expired` sweeps the rest.

    Example:
        ```python
        cache = InMemoryMatchCache.create()
        cache.set("u1", matches)
        cache.get("u1")  # matches, until 120 seconds have passed
        cache.invalidate("u1")
        cache.get("u1")  # None
        ```
    """

    def __init__(
        self,
        ttl: int | None = None,
        clock: Callable[[], float] = time.monotonic,
        stripes: int = 16,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl: Entry time-to-live in seconds. Defaults to settings.
            clock: Monotonic time source in seconds (swappable in tests).
            stripes: Number of lock stripes shared among keys.
        """
        if stripes < 1:
            raise ValueError("stripes must be at least 1")
        self._ttl = ttl if ttl is not None else settings.match_cache_ttl
        if self._ttl <= 0:
            raise ValueError("ttl must be positive")
        self._clock = clock
        self._entries: dict[str, tuple[float, list[CandidateMatch]]] = {}
        self._locks = [threading.Lock() for _ in range(stripes)]

    @classmethod
    def create(cls, ttl: int | None = None) -> "InMemoryMatchCache":
        """Factory method to create an InMemoryMatchCache with defaults.

        Args:
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured InMemoryMatchCache
        """
        return cls(ttl=ttl)

    def _lock_for(self, user_id: str) -> threading.Lock:
        return self._locks[hash(user_id) % len(self._locks)]

    def _is_fresh(self, stored_at: float) -> bool:
        return self._clock() - stored_at < self._ttl

    @property
    def ttl(self) -> int:
        return self._ttl

    def get(self, user_id: str) -> list[CandidateMatch] | None:
        with self._lock_for(user_id):
            entry = self._entries.get(user_id)
            if entry is None:
                return None

            stored_at, matches = entry
            if not self._is_fresh(stored_at):
                del self._entries[user_id]
                logger.debug("Match cache entry for %s expired", user_id)
                return None

            return matches

    def set(self, user_id: str, matches: list[CandidateMatch]) -> None:
        with self._lock_for(user_id):
            self._entries[user_id] = (self._clock(), matches)

    def invalidate(self, user_id: str) -> None:
        with self._lock_for(user_id):
            self._entries.pop(user_id, None)

    def purge_expired(self) -> int:
        """Drop every expired entry.

        Returns:
            Number of entries removed
        """
        removed = 0
        for user_id in list(self._entries):
            with self._lock_for(user_id):
                entry = self._entries.get(user_id)
                # Re-check under the lock; a concurrent set may have refreshed it
                if entry is not None and not self._is_fresh(entry[0]):
                    del self._entries[user_id]
                    removed += 1
        return removed

    def clear(self) -> int:
        for lock in self._locks:
            lock.acquire()
        try:
            count = len(self._entries)
            self._entries.clear()
            return count
        finally:
            for lock in reversed(self._locks):
                lock.release()

    def count(self) -> int:
        return len(self._entries)

    def health_check(self) -> bool:
        return True

    def get_stats(self) -> dict:
        return {
            "backend": "memory",
            "total_entries": self.count(),
            "ttl": self._ttl,
        }
