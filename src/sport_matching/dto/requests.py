"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field

from sport_matching.entities import MatchRequestStatus


class SendMatchRequest(BaseModel):
    """Request DTO for sending a match request."""

    from_user_id: str = Field(..., description="The sender", min_length=1)
    to_user_id: str = Field(..., description="The receiver", min_length=1)
    sport_id: str = Field(..., description="The sport to practice together", min_length=1)


class MatchRequestStatusRequest(BaseModel):
    """Request DTO for answering a match request.

    The service rejects anything other than Accepted or Rejected.
    """

    status: MatchRequestStatus = Field(..., description="New status: Accepted or Rejected")


class AvailabilityRequest(BaseModel):
    """Request DTO for toggling availability."""

    is_available_now: bool = Field(..., description="Whether the user is looking for a partner now")


class LocationUpdateRequest(BaseModel):
    """Request DTO for moving a user and changing their radius."""

    latitude: float = Field(..., description="Latitude in decimal degrees", ge=-90.0, le=90.0)
    longitude: float = Field(..., description="Longitude in decimal degrees", ge=-180.0, le=180.0)
    search_radius_km: int = Field(..., description="Search radius in kilometers", ge=0, le=100)


class AddSportRequest(BaseModel):
    """Request DTO for assigning a sport to a user."""

    sport_id: str = Field(..., description="The sport identifier", min_length=1)


class RegisterProfileRequest(BaseModel):
    """Request DTO for registering a user with the matching engine."""

    id: str = Field(..., description="Unique user identifier", min_length=1)
    name: str = Field(..., description="Display name", min_length=1)
    email: str = Field(..., description="Contact address", min_length=1)
    is_available_now: bool = Field(default=False, description="Whether the user is looking for a partner now")
    search_radius_km: int = Field(default=0, description="Search radius in kilometers", ge=0, le=100)
    latitude: float = Field(default=0.0, description="Latitude in decimal degrees", ge=-90.0, le=90.0)
    longitude: float = Field(default=0.0, description="Longitude in decimal degrees", ge=-180.0, le=180.0)
    sport_ids: list[str] = Field(default_factory=list, description="Sports the user practices")
