from typing import Any

from fastapi import FastAPI, Query, status
from fastapi.middleware.cors import CORSMiddleware

from sport_matching.api.dependencies import (
    MatchHandlerDep,
    MatchRequestHandlerDep,
    ProfileHandlerDep,
    make_lifespan,
)
from sport_matching.config import settings
from sport_matching.dto import (
    AddSportRequest,
    AvailabilityRequest,
    HealthCheckResponse,
    LocationUpdateRequest,
    MatchesResponse,
    MatchRequestItem,
    MatchRequestStatusRequest,
    ProfileResponse,
    RegisterProfileRequest,
    SendMatchRequest,
    StatsResponse,
)
from sport_matching.protocols import MatchCacheStore, ProfileRepository


def create_app(
    profiles: ProfileRepository | None = None,
    cache: MatchCacheStore | None = None,
) -> FastAPI:
    """Create the API application.

    Args:
        profiles: Profile store override. Defaults to settings.
        cache: Match cache override. Defaults to settings.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Sport Matching API",
        description="Sport partner matching with per-user match caching",
        version="0.1.0",
        lifespan=make_lifespan(profiles=profiles, cache=cache),
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root() -> dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": "Sport Matching API",
            "version": "0.1.0",
            "description": "Sport partner matching with per-user match caching",
            "endpoints": {
                "matches": "/matches/{user_id}",
                "match_requests": "/match-requests",
                "users": "/users",
                "stats": "/stats",
                "health": "/health",
                "docs": "/docs",
            },
        }

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: MatchHandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/stats", response_model=StatsResponse)
    async def get_stats(handler: MatchHandlerDep) -> StatsResponse:
        """Get cache and matching statistics."""
        return await handler.get_stats()

    @app.get("/matches/{user_id}", response_model=MatchesResponse)
    async def get_matches(user_id: str, handler: MatchHandlerDep) -> MatchesResponse:
        """
        Get compatible partners for a user.

        Candidates share at least one sport with the user, are available now,
        and are within the user's own search radius.
        """
        return await handler.get_matches(user_id)

    @app.delete("/matches/{user_id}/cache", response_model=dict[str, Any])
    async def invalidate_matches(user_id: str, handler: MatchHandlerDep) -> dict[str, Any]:
        """Drop the cached match list for a user."""
        return await handler.invalidate(user_id)

    @app.post("/match-requests", response_model=MatchRequestItem, status_code=status.HTTP_201_CREATED)
    async def send_match_request(request: SendMatchRequest, handler: MatchRequestHandlerDep) -> MatchRequestItem:
        """Send a match request to another user."""
        return await handler.send(request)

    @app.get("/match-requests/incoming", response_model=list[MatchRequestItem])
    async def incoming_requests(
        handler: MatchRequestHandlerDep,
        user_id: str = Query(..., min_length=1),
    ) -> list[MatchRequestItem]:
        """Requests received by a user."""
        return await handler.list_incoming(user_id)

    @app.get("/match-requests/outgoing", response_model=list[MatchRequestItem])
    async def outgoing_requests(
        handler: MatchRequestHandlerDep,
        user_id: str = Query(..., min_length=1),
    ) -> list[MatchRequestItem]:
        """Requests sent by a user."""
        return await handler.list_outgoing(user_id)

    @app.get("/match-requests/history", response_model=list[MatchRequestItem])
    async def request_history(
        handler: MatchRequestHandlerDep,
        user_id: str = Query(..., min_length=1),
    ) -> list[MatchRequestItem]:
        """Accepted requests involving a user."""
        return await handler.list_history(user_id)

    @app.patch("/match-requests/{request_id}", response_model=MatchRequestItem)
    async def update_match_request(
        request_id: str,
        request: MatchRequestStatusRequest,
        handler: MatchRequestHandlerDep,
    ) -> MatchRequestItem:
        """Accept or reject a match request."""
        return await handler.update_status(request_id, request)

    @app.patch("/match-requests/{request_id}/cancel", response_model=MatchRequestItem)
    async def cancel_match_request(
        request_id: str,
        handler: MatchRequestHandlerDep,
        user_id: str = Query(..., min_length=1),
    ) -> MatchRequestItem:
        """Cancel a match request as one of its participants."""
        return await handler.cancel(request_id, user_id)

    @app.delete("/match-requests/{request_id}", response_model=dict[str, Any])
    async def delete_match_request(request_id: str, handler: MatchRequestHandlerDep) -> dict[str, Any]:
        """Delete a match request."""
        return await handler.delete(request_id)

    @app.post("/users", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
    async def register_profile(request: RegisterProfileRequest, handler: ProfileHandlerDep) -> ProfileResponse:
        """Register a user so they can look up and appear in matches."""
        return await handler.register(request)

    @app.get("/users/{user_id}", response_model=ProfileResponse)
    async def get_profile(user_id: str, handler: ProfileHandlerDep) -> ProfileResponse:
        return await handler.get_profile(user_id)

    @app.patch("/users/{user_id}/availability", response_model=ProfileResponse)
    async def set_availability(
        user_id: str,
        request: AvailabilityRequest,
        handler: ProfileHandlerDep,
    ) -> ProfileResponse:
        return await handler.set_availability(user_id, request)

    @app.patch("/users/{user_id}/location", response_model=ProfileResponse)
    async def update_location(
        user_id: str,
        request: LocationUpdateRequest,
        handler: ProfileHandlerDep,
    ) -> ProfileResponse:
        return await handler.update_location(user_id, request)

    @app.post("/users/{user_id}/sports", response_model=ProfileResponse)
    async def add_sport(user_id: str, request: AddSportRequest, handler: ProfileHandlerDep) -> ProfileResponse:
        return await handler.add_sport(user_id, request)

    @app.delete("/users/{user_id}/sports/{sport_id}", response_model=ProfileResponse)
    async def remove_sport(user_id: str, sport_id: str, handler: ProfileHandlerDep) -> ProfileResponse:
        return await handler.remove_sport(user_id, sport_id)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "sport_matching.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
