"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    AddSportRequest,
    AvailabilityRequest,
    LocationUpdateRequest,
    MatchRequestStatusRequest,
    RegisterProfileRequest,
    SendMatchRequest,
)
from .responses import (
    CandidateMatchItem,
    HealthCheckResponse,
    MatchesResponse,
    MatchRequestItem,
    ProfileResponse,
    StatsResponse,
)

__all__ = [
    "SendMatchRequest",
    "MatchRequestStatusRequest",
    "AvailabilityRequest",
    "LocationUpdateRequest",
    "AddSportRequest",
    "RegisterProfileRequest",
    "CandidateMatchItem",
    "MatchesResponse",
    "MatchRequestItem",
    "ProfileResponse",
    "StatsResponse",
    "HealthCheckResponse",
]
