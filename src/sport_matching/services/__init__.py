"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository / Cache
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from sport_matching.services import MatchingService

    matching = MatchingService.create(repository=profiles, cache=cache)
    requests = MatchRequestService(requests=store, profiles=profiles, matching=matching)
    ```
"""

from .match_request_service import MatchRequestService
from .matching_service import MatchingService, compute_matches, match_candidate
from .profile_service import ProfileService

__all__ = [
    "MatchingService",
    "MatchRequestService",
    "ProfileService",
    "compute_matches",
    "match_candidate",
]
