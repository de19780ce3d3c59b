"""HTTP handlers for profile updates that affect matching."""

from sport_matching.dto import (
    AddSportRequest,
    AvailabilityRequest,
    LocationUpdateRequest,
    ProfileResponse,
    RegisterProfileRequest,
)
from sport_matching.entities import UserProfile
from sport_matching.services import ProfileService

from .error_mapping import to_http_exception


def _to_response(profile: UserProfile) -> ProfileResponse:
    return ProfileResponse(
        id=profile.id,
        name=profile.name,
        email=profile.email,
        is_available_now=profile.is_available_now,
        search_radius_km=profile.search_radius_km,
        latitude=profile.latitude,
        longitude=profile.longitude,
        sport_ids=sorted(profile.sport_ids),
    )


class ProfileHandler:
    """HTTP handlers for availability, location and sports."""

    def __init__(self, profile_service: ProfileService) -> None:
        self._profiles = profile_service

    async def get_profile(self, user_id: str) -> ProfileResponse:
        try:
            return _to_response(await self._profiles.get_profile(user_id))

        except Exception as e:
            raise to_http_exception(e, "get profile") from e

    async def register(self, request: RegisterProfileRequest) -> ProfileResponse:
        """Handle POST /users requests."""
        try:
            profile = UserProfile(
                id=request.id,
                name=request.name,
                email=request.email,
                is_available_now=request.is_available_now,
                search_radius_km=request.search_radius_km,
                latitude=request.latitude,
                longitude=request.longitude,
                sport_ids=frozenset(request.sport_ids),
            )
            return _to_response(await self._profiles.register(profile))

        except Exception as e:
            raise to_http_exception(e, "register profile") from e

    async def set_availability(self, user_id: str, request: AvailabilityRequest) -> ProfileResponse:
        try:
            profile = await self._profiles.set_availability(user_id, request.is_available_now)
            return _to_response(profile)

        except Exception as e:
            raise to_http_exception(e, "update availability") from e

    async def update_location(self, user_id: str, request: LocationUpdateRequest) -> ProfileResponse:
        try:
            profile = await self._profiles.update_location(
                user_id,
                latitude=request.latitude,
                longitude=request.longitude,
                search_radius_km=request.search_radius_km,
            )
            return _to_response(profile)

        except Exception as e:
            raise to_http_exception(e, "update location") from e

    async def add_sport(self, user_id: str, request: AddSportRequest) -> ProfileResponse:
        try:
            return _to_response(await self._profiles.add_sport(user_id, request.sport_id))

        except Exception as e:
            raise to_http_exception(e, "add sport") from e

    async def remove_sport(self, user_id: str, sport_id: str) -> ProfileResponse:
        try:
            return _to_response(await self._profiles.remove_sport(user_id, sport_id))

        except Exception as e:
            raise to_http_exception(e, "remove sport") from e
