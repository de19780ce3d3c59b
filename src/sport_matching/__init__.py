"""Sport Matching - location-based sport partner matching with per-user caching.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (ProfileRepository, MatchCacheStore, MatchRequestRepository)
    - repositories: Data access implementations (in-memory, Redis)
    - services: Business logic (matching, match requests, profile updates)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from sport_matching.repositories import InMemoryMatchCache, InMemoryProfileRepository
    from sport_matching.services import MatchingService

    matching = MatchingService.create(
        repository=InMemoryProfileRepository(profiles),
        cache=InMemoryMatchCache.create(),
    )
    matches = await matching.get_matches("user-1")
    ```

For HTTP API:
    ```python
    from sport_matching.api.app import app
    ```
"""

from sport_matching.config import settings
from sport_matching.entities import CandidateMatch, MatchRequest, MatchRequestStatus, UserProfile
from sport_matching.errors import (
    ForbiddenError,
    InvalidMatchRequestError,
    InvalidProfileUpdateError,
    NotFoundError,
    RepositoryUnavailableError,
    SportMatchingError,
)
from sport_matching.geo import distance_km
from sport_matching.protocols import MatchCacheStore, MatchRequestRepository, ProfileRepository
from sport_matching.repositories import (
    InMemoryMatchCache,
    InMemoryMatchRequestRepository,
    InMemoryProfileRepository,
    RedisMatchCache,
    RedisProfileRepository,
)
from sport_matching.services import MatchingService, MatchRequestService, ProfileService

__all__ = [
    # Configuration
    "settings",
    # Geometry
    "distance_km",
    # Protocols (interfaces)
    "ProfileRepository",
    "MatchCacheStore",
    "MatchRequestRepository",
    # Services (business logic)
    "MatchingService",
    "MatchRequestService",
    "ProfileService",
    # Repositories (data access)
    "InMemoryMatchCache",
    "InMemoryMatchRequestRepository",
    "InMemoryProfileRepository",
    "RedisMatchCache",
    "RedisProfileRepository",
    # Entities (domain models)
    "UserProfile",
    "CandidateMatch",
    "MatchRequest",
    "MatchRequestStatus",
    # Errors
    "SportMatchingError",
    "NotFoundError",
    "RepositoryUnavailableError",
    "InvalidMatchRequestError",
    "InvalidProfileUpdateError",
    "ForbiddenError",
]
