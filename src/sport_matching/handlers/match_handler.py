"""HTTP handlers for match lookups.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import time

from sport_matching.dto import CandidateMatchItem, HealthCheckResponse, MatchesResponse, StatsResponse
from sport_matching.services import MatchingService

from .error_mapping import to_http_exception


class MatchHandler:
    """HTTP handlers for match lookups and cache control.

    This handler delegates business logic to MatchingService
    and handles HTTP-specific concerns like:
    - Converting entities to DTOs
    - Setting appropriate status codes
    - Error handling and responses
    """

    def __init__(self, matching_service: MatchingService) -> None:
        """Initialize the match handler.

        Args:
            matching_service: The matching service for business logic (required).
        """
        self._matching = matching_service

    async def get_matches(self, user_id: str) -> MatchesResponse:
        """Handle GET /matches/{user_id} requests.

        Raises:
            HTTPException: 404 for an unknown user, 503 if storage is down
        """
        try:
            start_time = time.time()
            matches = await self._matching.get_matches(user_id)
            lookup_time_ms = (time.time() - start_time) * 1000

            return MatchesResponse(
                user_id=user_id,
                matches=[
                    CandidateMatchItem(
                        id=m.id,
                        name=m.name,
                        email=m.email,
                        is_available_now=m.is_available_now,
                        search_radius_km=m.search_radius_km,
                        distance_km=m.distance_km,
                        shared_sport_ids=list(m.shared_sport_ids),
                    )
                    for m in matches
                ],
                lookup_time_ms=lookup_time_ms,
            )

        except Exception as e:
            raise to_http_exception(e, "get matches") from e

    async def invalidate(self, user_id: str) -> dict:
        """Handle DELETE /matches/{user_id}/cache requests."""
        try:
            self._matching.invalidate(user_id)
            return {"success": True, "message": f"Match cache cleared for {user_id}"}

        except Exception as e:
            raise to_http_exception(e, "invalidate matches") from e

    async def get_stats(self) -> StatsResponse:
        """Handle GET /stats requests."""
        try:
            stats = self._matching.get_stats()
            return StatsResponse(cache=stats["cache"], matching=stats["matching"])

        except Exception as e:
            raise to_http_exception(e, "get stats") from e

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = await self._matching.is_healthy()

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            healthy=is_healthy,
        )
