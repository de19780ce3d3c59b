"""Profile mutations that affect match eligibility.

Each update invalidates the user's own cached match list. Other users'
lists that include this user are left to expire with their TTL.
"""

import logging
from dataclasses import replace

from sport_matching.entities import UserProfile
from sport_matching.errors import InvalidProfileUpdateError
from sport_matching.protocols import ProfileRepository

from .matching_service import MatchingService

logger = logging.getLogger(__name__)

MAX_SEARCH_RADIUS_KM = 100


class ProfileService:
    """Availability, location and sport updates."""

    def __init__(self, profiles: ProfileRepository, matching: MatchingService) -> None:
        self._profiles = profiles
        self._matching = matching

    async def get_profile(self, user_id: str) -> UserProfile:
        return await self._profiles.get_profile(user_id)

    async def register(self, profile: UserProfile) -> UserProfile:
        """Store a new or replacement profile."""
        await self._save(profile)
        logger.info("Registered profile %s", profile.id)
        return profile

    async def set_availability(self, user_id: str, available: bool) -> UserProfile:
        profile = await self._profiles.get_profile(user_id)
        return await self._save(replace(profile, is_available_now=available))

    async def update_location(
        self,
        user_id: str,
        latitude: float,
        longitude: float,
        search_radius_km: int,
    ) -> UserProfile:
        """Move a user and change their search radius.

        Raises:
            InvalidProfileUpdateError: If a value is out of range
            NotFoundError: If the user does not exist
        """
        if not -90 <= latitude <= 90:
            raise InvalidProfileUpdateError("Latitude must be between -90 and 90")
        if not -180 <= longitude <= 180:
            raise InvalidProfileUpdateError("Longitude must be between -180 and 180")
        if not 0 <= search_radius_km <= MAX_SEARCH_RADIUS_KM:
            raise InvalidProfileUpdateError(
                f"Search radius must be between 0 and {MAX_SEARCH_RADIUS_KM} kilometers"
            )

        profile = await self._profiles.get_profile(user_id)
        updated = replace(
            profile,
            latitude=latitude,
            longitude=longitude,
            search_radius_km=search_radius_km,
        )
        return await self._save(updated)

    async def add_sport(self, user_id: str, sport_id: str) -> UserProfile:
        profile = await self._profiles.get_profile(user_id)
        if sport_id in profile.sport_ids:
            raise InvalidProfileUpdateError(f"Sport {sport_id} is already assigned")
        return await self._save(replace(profile, sport_ids=profile.sport_ids | {sport_id}))

    async def remove_sport(self, user_id: str, sport_id: str) -> UserProfile:
        profile = await self._profiles.get_profile(user_id)
        if sport_id not in profile.sport_ids:
            raise InvalidProfileUpdateError(f"Sport {sport_id} is not assigned")
        return await self._save(replace(profile, sport_ids=profile.sport_ids - {sport_id}))

    async def _save(self, profile: UserProfile) -> UserProfile:
        await self._profiles.save_profile(profile)
        self._matching.invalidate(profile.id)
        return profile
