"""Redis implementation of MatchCacheStore.

Each user's list is one JSON string written with `SET ... EX`, so a store
is a single atomic key write and expiry is enforced by Redis itself. Use
this backend when several API workers must share invalidations.
"""

import json
import logging
from dataclasses import asdict

import redis

from sport_matching.config import get_redis_client, settings
from sport_matching.entities import CandidateMatch
from sport_matching.errors import RepositoryUnavailableError

logger = logging.getLogger(__name__)


class RedisMatchCache:
    """Redis-backed match list cache.

    This class satisfies the MatchCacheStore protocol through structural
    typing - no explicit inheritance needed.

    Read and write failures degrade to a cache miss and a skipped store so
    that matching keeps working without Redis. A failed invalidation is
    raised, since swallowing it would serve stale lists for a full TTL.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> None:
        """Initialize the Redis match cache.

        Args:
            redis_client: Redis client instance. If None, creates default.
            prefix: Key prefix for match entries.
            ttl: Time-to-live for entries in seconds.
        """
        self._ttl = ttl if ttl is not None else settings.match_cache_ttl
        if self._ttl <= 0:
            raise ValueError("ttl must be positive")
        self._client = redis_client or get_redis_client()
        self._prefix = prefix or settings.match_cache_prefix

    @classmethod
    def create(
        cls,
        prefix: str | None = None,
        ttl: int | None = None,
    ) -> "RedisMatchCache":
        """Factory method to create RedisMatchCache with defaults.

        Args:
            prefix: Redis key prefix. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured RedisMatchCache
        """
        return cls(prefix=prefix, ttl=ttl)

    def _key(self, user_id: str) -> str:
        return f"{self._prefix}:{user_id}"

    @property
    def ttl(self) -> int:
        return self._ttl

    def get(self, user_id: str) -> list[CandidateMatch] | None:
        try:
            payload = self._client.get(self._key(user_id))
        except redis.RedisError as e:
            logger.warning("Match cache read failed for %s: %s", user_id, e)
            return None

        if payload is None:
            return None

        try:
            return [
                CandidateMatch(**{**item, "shared_sport_ids": tuple(item["shared_sport_ids"])})
                for item in json.loads(payload)
            ]
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            logger.warning("Discarding unreadable match cache entry for %s: %s", user_id, e)
            return None

    def set(self, user_id: str, matches: list[CandidateMatch]) -> None:
        payload = json.dumps([asdict(m) for m in matches])
        try:
            self._client.set(self._key(user_id), payload, ex=self._ttl)
        except redis.RedisError as e:
            logger.warning("Match cache write failed for %s: %s", user_id, e)

    def invalidate(self, user_id: str) -> None:
        try:
            self._client.delete(self._key(user_id))
        except redis.RedisError as e:
            raise RepositoryUnavailableError(f"Failed to invalidate matches for {user_id}: {e}") from e

    def clear(self) -> int:
        count = 0
        for key in self._client.scan_iter(match=f"{self._prefix}:*"):
            count += self._client.delete(key)
        return count

    def count(self) -> int:
        return sum(1 for _ in self._client.scan_iter(match=f"{self._prefix}:*"))

    def health_check(self) -> bool:
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False

    def get_stats(self) -> dict:
        return {
            "backend": "redis",
            "prefix": self._prefix,
            "total_entries": self.count(),
            "ttl": self._ttl,
        }

    @property
    def client(self) -> redis.Redis:
        """Get the Redis client."""
        return self._client
