"""Tests for the Redis profile repository against a mocked asyncio client."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
import redis

from conftest import make_profile
from sport_matching.errors import NotFoundError, RepositoryUnavailableError
from sport_matching.repositories import RedisProfileRepository

ALICE_HASH = {
    "name": "Alice",
    "email": "alice@example.com",
    "is_available_now": "1",
    "search_radius_km": "10",
    "latitude": "50.05",
    "longitude": "20.0",
}


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def repository(client):
    return RedisProfileRepository(redis_client=client, prefix="user")


def test_get_profile_reads_hash_and_sports(repository, client):
    client.hgetall = AsyncMock(return_value=ALICE_HASH)
    client.smembers = AsyncMock(return_value={"tennis", "squash"})

    profile = asyncio.run(repository.get_profile("alice"))

    assert profile.is_available_now is True
    assert profile.search_radius_km == 10
    assert profile.latitude == 50.05
    assert profile.sport_ids == frozenset({"tennis", "squash"})
    client.hgetall.assert_awaited_once_with("user:alice")
    client.smembers.assert_awaited_once_with("user:alice:sports")


def test_get_profile_unknown_user(repository, client):
    client.hgetall = AsyncMock(return_value={})

    with pytest.raises(NotFoundError):
        asyncio.run(repository.get_profile("ghost"))


def test_get_profile_connection_error(repository, client):
    client.hgetall = AsyncMock(side_effect=redis.ConnectionError("down"))

    with pytest.raises(RepositoryUnavailableError):
        asyncio.run(repository.get_profile("alice"))


def test_list_available_excludes_requester_and_stale_index_entries(repository, client):
    client.smembers = AsyncMock(return_value={"requester", "alice", "bob", "zoe"})
    pipe = MagicMock()
    pipe.execute = AsyncMock(
        return_value=[
            ALICE_HASH,
            {"tennis"},
            {**ALICE_HASH, "name": "Bob", "is_available_now": "0"},
            {"tennis"},
            {},
            set(),
        ]
    )
    client.pipeline.return_value = pipe

    profiles = asyncio.run(repository.list_available_excluding("requester"))

    assert [p.id for p in profiles] == ["alice"]
    pipe.hgetall.assert_any_call("user:alice")
    assert pipe.hgetall.call_count == 3


def test_list_available_with_empty_index(repository, client):
    client.smembers = AsyncMock(return_value=set())
    client.pipeline.return_value = MagicMock()

    assert asyncio.run(repository.list_available_excluding("requester")) == []


def test_save_profile_maintains_availability_index(repository, client):
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[])
    client.pipeline.return_value = pipe

    asyncio.run(repository.save_profile(make_profile("alice", sports=("tennis",))))
    pipe.sadd.assert_any_call("user:available", "alice")
    pipe.sadd.assert_any_call("user:alice:sports", "tennis")

    asyncio.run(repository.save_profile(make_profile("alice", available=False)))
    pipe.srem.assert_called_once_with("user:available", "alice")


def test_save_profile_connection_error(repository, client):
    pipe = MagicMock()
    pipe.execute = AsyncMock(side_effect=redis.ConnectionError("down"))
    client.pipeline.return_value = pipe

    with pytest.raises(RepositoryUnavailableError):
        asyncio.run(repository.save_profile(make_profile("alice")))
