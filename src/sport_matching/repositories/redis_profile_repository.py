"""Redis implementation of ProfileRepository.

Layout:
    {prefix}:{id}           hash with the scalar profile fields
    {prefix}:{id}:sports    set of sport identifiers
    {prefix}:available      set of ids with is_available_now set

The availability set keeps `list_available_excluding` from scanning the
whole keyspace.
"""

import logging

import redis
import redis.asyncio

from sport_matching.config import get_async_redis_client, settings
from sport_matching.entities import UserProfile
from sport_matching.errors import NotFoundError, RepositoryUnavailableError

logger = logging.getLogger(__name__)


class RedisProfileRepository:
    """Redis-backed profile store.

    This class satisfies the ProfileRepository protocol through structural
    typing - no explicit inheritance needed. Every Redis failure surfaces as
    RepositoryUnavailableError.
    """

    def __init__(
        self,
        redis_client: redis.asyncio.Redis | None = None,
        prefix: str | None = None,
    ) -> None:
        """Initialize the repository.

        Args:
            redis_client: asyncio Redis client. If None, creates default.
            prefix: Key prefix for profile data.
        """
        self._client = redis_client or get_async_redis_client()
        self._prefix = prefix or settings.profile_key_prefix

    @classmethod
    def create(cls, prefix: str | None = None) -> "RedisProfileRepository":
        """Factory method to create RedisProfileRepository with defaults."""
        return cls(prefix=prefix)

    def _profile_key(self, user_id: str) -> str:
        return f"{self._prefix}:{user_id}"

    def _sports_key(self, user_id: str) -> str:
        return f"{self._prefix}:{user_id}:sports"

    @property
    def _available_key(self) -> str:
        return f"{self._prefix}:available"

    @staticmethod
    def _to_profile(user_id: str, data: dict, sports: set) -> UserProfile:
        return UserProfile(
            id=user_id,
            name=data.get("name", ""),
            email=data.get("email", ""),
            is_available_now=data.get("is_available_now") == "1",
            search_radius_km=int(data.get("search_radius_km", 0)),
            latitude=float(data.get("latitude", 0.0)),
            longitude=float(data.get("longitude", 0.0)),
            sport_ids=frozenset(sports),
        )

    async def get_profile(self, user_id: str) -> UserProfile:
        try:
            data = await self._client.hgetall(self._profile_key(user_id))
            if not data:
                raise NotFoundError("User", user_id)
            sports = await self._client.smembers(self._sports_key(user_id))
        except redis.RedisError as e:
            raise RepositoryUnavailableError(f"Failed to load profile {user_id}: {e}") from e

        return self._to_profile(user_id, data, sports)

    async def list_available_excluding(self, user_id: str) -> list[UserProfile]:
        try:
            ids = sorted(await self._client.smembers(self._available_key))
            ids = [i for i in ids if i != user_id]

            pipe = self._client.pipeline(transaction=False)
            for candidate_id in ids:
                pipe.hgetall(self._profile_key(candidate_id))
                pipe.smembers(self._sports_key(candidate_id))
            results = await pipe.execute() if ids else []
        except redis.RedisError as e:
            raise RepositoryUnavailableError(f"Failed to load candidate pool: {e}") from e

        profiles = []
        for index, candidate_id in enumerate(ids):
            data, sports = results[2 * index], results[2 * index + 1]
            if not data:
                logger.warning("Availability index references missing profile %s", candidate_id)
                continue
            profile = self._to_profile(candidate_id, data, sports)
            # The index can lag behind a concurrent availability change
            if profile.is_available_now:
                profiles.append(profile)
        return profiles

    async def save_profile(self, profile: UserProfile) -> None:
        pipe = self._client.pipeline(transaction=True)
        pipe.hset(
            self._profile_key(profile.id),
            mapping={
                "name": profile.name,
                "email": profile.email,
                "is_available_now": "1" if profile.is_available_now else "0",
                "search_radius_km": str(profile.search_radius_km),
                "latitude": repr(profile.latitude),
                "longitude": repr(profile.longitude),
            },
        )
        pipe.delete(self._sports_key(profile.id))
        if profile.sport_ids:
            pipe.sadd(self._sports_key(profile.id), *sorted(profile.sport_ids))
        if profile.is_available_now:
            pipe.sadd(self._available_key, profile.id)
        else:
            pipe.srem(self._available_key, profile.id)

        try:
            await pipe.execute()
        except redis.RedisError as e:
            raise RepositoryUnavailableError(f"Failed to save profile {profile.id}: {e}") from e

    async def health_check(self) -> bool:
        try:
            return bool(await self._client.ping())
        except redis.RedisError:
            return False

    async def close(self) -> None:
        await self._client.aclose()
