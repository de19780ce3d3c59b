"""Response DTOs for API endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field


class CandidateMatchItem(BaseModel):
    """Single candidate (in matches array)."""

    id: str = Field(..., description="The candidate's user identifier")
    name: str = Field(..., description="The candidate's display name")
    email: str = Field(..., description="The candidate's contact address")
    is_available_now: bool = Field(..., description="The candidate's availability flag")
    search_radius_km: int = Field(..., description="The candidate's own search radius", ge=0)
    distance_km: float = Field(..., description="Distance to the requester in km (2 decimals)", ge=0.0)
    shared_sport_ids: list[str] = Field(..., description="Sports both users practice")


class MatchesResponse(BaseModel):
    """Response DTO for the matches lookup."""

    user_id: str = Field(..., description="The requesting user")
    matches: list[CandidateMatchItem] = Field(
        default_factory=list,
        description="Compatible candidates in candidate-pool order",
    )
    lookup_time_ms: float = Field(..., description="Time taken for the lookup in milliseconds")


class MatchRequestItem(BaseModel):
    """Response DTO for a match request."""

    id: str
    from_user_id: str
    to_user_id: str
    sport_id: str
    status: str
    created_at: datetime


class ProfileResponse(BaseModel):
    """Response DTO for a profile after an update."""

    id: str
    name: str
    email: str
    is_available_now: bool
    search_radius_km: int
    latitude: float
    longitude: float
    sport_ids: list[str]


class StatsResponse(BaseModel):
    """Response DTO for cache and matching statistics."""

    cache: dict = Field(..., description="Cache backend statistics")
    matching: dict = Field(..., description="Hit/miss and computation counters")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    healthy: bool = Field(..., description="Whether the cache and profile store are reachable")
