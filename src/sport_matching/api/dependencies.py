"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from sport_matching.config import configure_logging, settings
from sport_matching.handlers import MatchHandler, MatchRequestHandler, ProfileHandler
from sport_matching.protocols import MatchCacheStore, ProfileRepository
from sport_matching.repositories import (
    InMemoryMatchCache,
    InMemoryMatchRequestRepository,
    InMemoryProfileRepository,
    RedisMatchCache,
    RedisProfileRepository,
)
from sport_matching.services import MatchingService, MatchRequestService, ProfileService

logger = logging.getLogger(__name__)


def build_profile_repository() -> ProfileRepository:
    """Create the profile store selected by PROFILE_STORE_BACKEND."""
    if settings.profile_store_backend == "redis":
        return RedisProfileRepository.create()
    return InMemoryProfileRepository()


def build_match_cache() -> MatchCacheStore:
    """Create the match cache selected by MATCH_CACHE_BACKEND."""
    if settings.match_cache_backend == "redis":
        return RedisMatchCache.create()
    return InMemoryMatchCache.create()


def _get_state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized. Check lifespan setup.")
    return value


def get_match_handler(request: Request) -> MatchHandler:
    return _get_state(request, "match_handler")


def get_match_request_handler(request: Request) -> MatchRequestHandler:
    return _get_state(request, "match_request_handler")


def get_profile_handler(request: Request) -> ProfileHandler:
    return _get_state(request, "profile_handler")


def make_lifespan(
    profiles: ProfileRepository | None = None,
    cache: MatchCacheStore | None = None,
):
    """Build the lifespan context manager for a FastAPI app.

    Args:
        profiles: Profile store to use. If None, built from settings.
        cache: Match cache to use. If None, built from settings.

    Returns:
        An async context manager factory suitable for FastAPI(lifespan=...)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize all layers and store them in app.state.

        1. Repositories and cache (data access)
        2. Services (business logic)
        3. Handlers (HTTP endpoints)

        Cleanup:
            Removes all services from app.state on shutdown
        """
        configure_logging()

        profile_repository = profiles if profiles is not None else build_profile_repository()
        match_cache = cache if cache is not None else build_match_cache()

        matching_service = MatchingService.create(repository=profile_repository, cache=match_cache)
        match_request_service = MatchRequestService(
            requests=InMemoryMatchRequestRepository(),
            profiles=profile_repository,
            matching=matching_service,
        )
        profile_service = ProfileService(profiles=profile_repository, matching=matching_service)

        app.state.profile_repository = profile_repository
        app.state.match_cache = match_cache
        app.state.matching_service = matching_service
        app.state.match_request_service = match_request_service
        app.state.profile_service = profile_service
        app.state.match_handler = MatchHandler(matching_service=matching_service)
        app.state.match_request_handler = MatchRequestHandler(request_service=match_request_service)
        app.state.profile_handler = ProfileHandler(profile_service=profile_service)

        logger.info("Matching service initialized")
        logger.info("Match cache: %s, TTL %ss", type(match_cache).__name__, match_cache.ttl)
        logger.info("Profile store: %s", type(profile_repository).__name__)

        yield

        if isinstance(profile_repository, RedisProfileRepository):
            await profile_repository.close()

        del app.state.profile_handler
        del app.state.match_request_handler
        del app.state.match_handler
        del app.state.profile_service
        del app.state.match_request_service
        del app.state.matching_service
        del app.state.match_cache
        del app.state.profile_repository
        logger.info("Matching service shut down")

    return lifespan


# Type aliases for cleaner dependency injection
MatchHandlerDep = Annotated[MatchHandler, Depends(get_match_handler)]
MatchRequestHandlerDep = Annotated[MatchRequestHandler, Depends(get_match_request_handler)]
ProfileHandlerDep = Annotated[ProfileHandler, Depends(get_profile_handler)]
