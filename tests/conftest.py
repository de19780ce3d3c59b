"""Shared fixtures and fakes for the test suite."""

import asyncio

import pytest

from sport_matching.entities import UserProfile
from sport_matching.repositories import InMemoryMatchCache, InMemoryProfileRepository


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingProfileRepository(InMemoryProfileRepository):
    """In-memory repository that records how often it is read."""

    def __init__(self, profiles=None) -> None:
        super().__init__(profiles)
        self.get_profile_calls = 0
        self.list_calls = 0

    async def get_profile(self, user_id):
        self.get_profile_calls += 1
        return await super().get_profile(user_id)

    async def list_available_excluding(self, user_id):
        self.list_calls += 1
        return await super().list_available_excluding(user_id)


class GatedProfileRepository(CountingProfileRepository):
    """Blocks the candidate-pool read until `release` is set.

    Events are created lazily so they bind to the running loop.
    """

    def __init__(self, profiles=None) -> None:
        super().__init__(profiles)
        self.entered: asyncio.Event | None = None
        self.release: asyncio.Event | None = None

    def arm(self) -> None:
        self.entered = asyncio.Event()
        self.release = asyncio.Event()

    async def list_available_excluding(self, user_id):
        self.entered.set()
        await self.release.wait()
        return await super().list_available_excluding(user_id)


def make_profile(
    user_id: str,
    latitude: float = 50.0,
    longitude: float = 20.0,
    sports: tuple[str, ...] = ("tennis",),
    available: bool = True,
    radius: int = 10,
) -> UserProfile:
    return UserProfile(
        id=user_id,
        name=user_id.title(),
        email=f"{user_id}@example.com",
        is_available_now=available,
        search_radius_km=radius,
        latitude=latitude,
        longitude=longitude,
        sport_ids=frozenset(sports),
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return InMemoryMatchCache(ttl=120, clock=clock)


@pytest.fixture
def players():
    """Requester plus the four candidates from the reference scenarios."""
    return [
        make_profile("requester", 50.0, 20.0, ("tennis",), radius=10),
        make_profile("alice", 50.05, 20.0, ("tennis",)),
        make_profile("bob", 51.0, 20.0, ("tennis",)),
        make_profile("carol", 50.02, 20.0, ("cycling",)),
        make_profile("dave", 50.01, 20.0, ("tennis",), available=False),
    ]
