"""In-memory repositories.

Used for local development and tests. Iteration follows insertion order,
which gives the matching engine a deterministic candidate pool.
"""

from sport_matching.entities import MatchRequest, UserProfile
from sport_matching.errors import NotFoundError


class InMemoryProfileRepository:
    """Dictionary-backed implementation of ProfileRepository."""

    def __init__(self, profiles: list[UserProfile] | None = None) -> None:
        self._profiles: dict[str, UserProfile] = {}
        for profile in profiles or []:
            self._profiles[profile.id] = profile

    async def get_profile(self, user_id: str) -> UserProfile:
        try:
            return self._profiles[user_id]
        except KeyError:
            raise NotFoundError("User", user_id) from None

    async def list_available_excluding(self, user_id: str) -> list[UserProfile]:
        return [
            profile
            for profile in self._profiles.values()
            if profile.id != user_id and profile.is_available_now
        ]

    async def save_profile(self, profile: UserProfile) -> None:
        self._profiles[profile.id] = profile

    async def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._profiles)


class InMemoryMatchRequestRepository:
    """Dictionary-backed implementation of MatchRequestRepository."""

    def __init__(self) -> None:
        self._requests: dict[str, MatchRequest] = {}

    async def add(self, request: MatchRequest) -> None:
        self._requests[request.id] = request

    async def get(self, request_id: str) -> MatchRequest:
        try:
            return self._requests[request_id]
        except KeyError:
            raise NotFoundError("Match request", request_id) from None

    async def update(self, request: MatchRequest) -> None:
        if request.id not in self._requests:
            raise NotFoundError("Match request", request.id)
        self._requests[request.id] = request

    async def delete(self, request_id: str) -> MatchRequest:
        try:
            return self._requests.pop(request_id)
        except KeyError:
            raise NotFoundError("Match request", request_id) from None

    async def list_for_user(self, user_id: str) -> list[MatchRequest]:
        return [r for r in self._requests.values() if user_id in r.participants]
