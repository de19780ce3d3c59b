"""Matching service for candidate computation.

This service orchestrates the "my matches" lookup by coordinating
the match cache and the profile repository. The filtering itself lives in
plain functions so it can be exercised without any collaborators.
"""

import asyncio
import logging
import math
import time

from sport_matching.entities import CandidateMatch, UserProfile
from sport_matching.geo import distance_km
from sport_matching.models import MatchMetrics
from sport_matching.protocols import MatchCacheStore, ProfileRepository

logger = logging.getLogger(__name__)


def match_candidate(requester: UserProfile, candidate: UserProfile) -> CandidateMatch | None:
    """Evaluate one candidate against the requester.

    Only the requester's search radius is applied; the candidate's own
    radius is reported but not enforced.

    Args:
        requester: The user asking for matches
        candidate: The user being evaluated

    Returns:
        A CandidateMatch, or None if the pair does not qualify
    """
    if candidate.id == requester.id or not candidate.is_available_now:
        return None

    shared = requester.sport_ids & candidate.sport_ids
    if not shared:
        return None

    distance = distance_km(
        requester.latitude,
        requester.longitude,
        candidate.latitude,
        candidate.longitude,
    )
    # NaN compares false against the radius, so reject it explicitly
    if math.isnan(distance) or distance > requester.search_radius_km:
        return None

    return CandidateMatch(
        id=candidate.id,
        name=candidate.name,
        email=candidate.email,
        is_available_now=candidate.is_available_now,
        search_radius_km=candidate.search_radius_km,
        distance_km=round(distance, 2),
        shared_sport_ids=tuple(sorted(shared)),
    )


def compute_matches(requester: UserProfile, candidates: list[UserProfile]) -> list[CandidateMatch]:
    """Filter a candidate pool down to compatible partners.

    Results keep the pool's iteration order.
    """
    matches = []
    for candidate in candidates:
        match = match_candidate(requester, candidate)
        if match is not None:
            matches.append(match)
    return matches


class MatchingService:
    """Core matching orchestration service.

    This service depends on PROTOCOLS, not concrete implementations:
    - ProfileRepository: in-memory, Redis, or a database
    - MatchCacheStore: in-process or Redis

    Concurrent cache misses for the same user share one computation. A
    caller that is cancelled while waiting does not cancel the shared
    computation, so the cache is never left half-written.

    An invalidation that lands while a computation is in flight does not
    stop that computation from storing its (older) result. Such an entry
    is stale for at most one TTL.

    Example:
        ```python
        from sport_matching.repositories import InMemoryMatchCache, InMemoryProfileRepository
        from sport_matching.services import MatchingService

        service = MatchingService.create(
            repository=InMemoryProfileRepository(profiles),
            cache=InMemoryMatchCache.create(),
        )
        matches = await service.get_matches("user-1")
        ```
    """

    def __init__(
        self,
        repository: ProfileRepository,
        cache: MatchCacheStore,
        metrics: MatchMetrics | None = None,
    ) -> None:
        """Initialize the matching service.

        Args:
            repository: Profile storage backend (required).
            cache: Match list cache (required).
            metrics: Counter sink. A fresh one is created if omitted.
        """
        self._repository = repository
        self._cache = cache
        self._metrics = metrics or MatchMetrics()
        self._inflight: dict[str, asyncio.Future] = {}

    @classmethod
    def create(
        cls,
        repository: ProfileRepository,
        cache: MatchCacheStore,
    ) -> "MatchingService":
        """Factory method to create MatchingService.

        Args:
            repository: Profile storage backend (required).
            cache: Match list cache (required).

        Returns:
            Configured MatchingService instance
        """
        return cls(repository=repository, cache=cache)

    async def get_matches(self, requester_id: str) -> list[CandidateMatch]:
        """Return the compatible candidates for a user.

        Business logic:
        1. Serve a fresh cache entry if one exists
        2. Otherwise join or start the computation for this user
        3. The computation loads the requester and the available pool,
           filters by shared sport and distance, and stores the result

        Args:
            requester_id: The user asking for matches

        Returns:
            List of CandidateMatch in candidate-pool order (possibly empty)

        Raises:
            NotFoundError: If the requester does not exist
            RepositoryUnavailableError: If the profile store fails
        """
        cached = self._cache.get(requester_id)
        if cached is not None:
            self._metrics.record_hit()
            logger.debug("Match cache hit for %s", requester_id)
            return cached

        self._metrics.record_miss()
        logger.debug("Match cache miss for %s", requester_id)

        task = self._inflight.get(requester_id)
        if task is None:
            task = asyncio.ensure_future(self._compute_and_store(requester_id))
            self._inflight[requester_id] = task
            task.add_done_callback(lambda done: self._forget(requester_id, done))
        else:
            self._metrics.record_shared()

        return await asyncio.shield(task)

    async def _compute_and_store(self, requester_id: str) -> list[CandidateMatch]:
        requester = await self._repository.get_profile(requester_id)
        pool = await self._repository.list_available_excluding(requester.id)

        start_time = time.perf_counter()
        matches = compute_matches(requester, pool)
        self._metrics.record_computation((time.perf_counter() - start_time) * 1000)

        self._cache.set(requester_id, matches)
        logger.debug(
            "Computed %d matches for %s from %d candidates",
            len(matches),
            requester_id,
            len(pool),
        )
        return matches

    def _forget(self, requester_id: str, task: asyncio.Future) -> None:
        if self._inflight.get(requester_id) is task:
            del self._inflight[requester_id]
        # Mark the exception retrieved when every waiter was cancelled
        if not task.cancelled():
            task.exception()

    def invalidate(self, user_id: str) -> None:
        """Drop the cached match list for a user.

        Callers waiting on an in-flight computation still receive its
        result, but later callers start a fresh one.

        Args:
            user_id: The user whose entry to remove
        """
        self._inflight.pop(user_id, None)
        self._cache.invalidate(user_id)
        self._metrics.record_invalidation()
        logger.debug("Invalidated matches for %s", user_id)

    def invalidate_pair(self, first_user_id: str, second_user_id: str) -> None:
        """Drop the cached match lists of both parties of a match request.

        The second entry is dropped even when the first invalidation fails.
        """
        try:
            self.invalidate(first_user_id)
        finally:
            self.invalidate(second_user_id)

    def get_stats(self) -> dict:
        """Get cache and matching statistics.

        Returns:
            Dictionary with cache backend stats and service counters
        """
        return {
            "cache": self._cache.get_stats(),
            "matching": self._metrics.to_dict(),
        }

    async def is_healthy(self) -> bool:
        """Check if both the cache and the profile store are reachable."""
        cache_healthy = self._cache.health_check()
        repository_healthy = await self._repository.health_check()
        return cache_healthy and repository_healthy

    @property
    def cache(self) -> MatchCacheStore:
        """Get the underlying cache (for testing)."""
        return self._cache

    @property
    def repository(self) -> ProfileRepository:
        """Get the underlying repository (for testing)."""
        return self._repository

    @property
    def metrics(self) -> MatchMetrics:
        return self._metrics
