"""Tests for the in-process match cache."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from sport_matching.entities import CandidateMatch
from sport_matching.protocols import MatchCacheStore
from sport_matching.repositories import InMemoryMatchCache


def _matches(name: str = "alice") -> list[CandidateMatch]:
    return [
        CandidateMatch(
            id=name,
            name=name.title(),
            email=f"{name}@example.com",
            is_available_now=True,
            search_radius_km=10,
            distance_km=5.56,
            shared_sport_ids=("tennis",),
        )
    ]


def test_satisfies_protocol(cache):
    assert isinstance(cache, MatchCacheStore)


def test_get_on_empty_cache_is_a_miss(cache):
    assert cache.get("requester") is None


def test_set_then_get_returns_same_object(cache):
    matches = _matches()
    cache.set("requester", matches)
    assert cache.get("requester") is matches


def test_entry_survives_until_just_before_ttl(cache, clock):
    matches = _matches()
    cache.set("requester", matches)

    clock.advance(119)
    assert cache.get("requester") is matches


def test_entry_is_a_miss_after_ttl(cache, clock):
    cache.set("requester", _matches())

    clock.advance(121)
    assert cache.get("requester") is None
    # expired entries are dropped on read
    assert cache.count() == 0


def test_entry_at_exactly_ttl_is_a_miss(cache, clock):
    cache.set("requester", _matches())
    clock.advance(120)
    assert cache.get("requester") is None


def test_set_restarts_ttl(cache, clock):
    cache.set("requester", _matches("alice"))
    clock.advance(100)
    replacement = _matches("bob")
    cache.set("requester", replacement)

    clock.advance(100)
    assert cache.get("requester") is replacement


def test_invalidate_makes_next_get_a_miss(cache):
    cache.set("requester", _matches())
    cache.invalidate("requester")
    assert cache.get("requester") is None


def test_invalidate_is_idempotent(cache):
    cache.invalidate("nobody")
    cache.invalidate("nobody")
    assert cache.count() == 0


def test_invalidate_leaves_other_users_alone(cache):
    cache.set("requester", _matches())
    cache.set("alice", _matches("requester"))

    cache.invalidate("requester")
    assert cache.get("alice") is not None


def test_empty_list_is_a_hit(cache):
    cache.set("requester", [])
    assert cache.get("requester") == []


def test_purge_expired_removes_only_stale_entries(cache, clock):
    cache.set("old", _matches())
    clock.advance(60)
    cache.set("young", _matches())
    clock.advance(70)

    assert cache.purge_expired() == 1
    assert cache.get("young") is not None
    assert cache.count() == 1


def test_clear_returns_number_removed(cache):
    cache.set("a", _matches())
    cache.set("b", _matches())
    assert cache.clear() == 2
    assert cache.count() == 0


def test_stats_report_backend_and_ttl(cache):
    cache.set("a", _matches())
    stats = cache.get_stats()
    assert stats == {"backend": "memory", "total_entries": 1, "ttl": 120}


def test_default_ttl_is_two_minutes():
    assert InMemoryMatchCache.create().ttl == 120


def test_rejects_zero_stripes():
    with pytest.raises(ValueError):
        InMemoryMatchCache(ttl=120, stripes=0)


@pytest.mark.parametrize("ttl", [0, -5])
def test_rejects_non_positive_ttl(ttl):
    with pytest.raises(ValueError):
        InMemoryMatchCache(ttl=ttl)


def test_cached_sport_ids_cannot_be_mutated_through_a_hit(cache):
    cache.set("requester", _matches())
    with pytest.raises(AttributeError):
        cache.get("requester")[0].shared_sport_ids.append("golf")


def test_concurrent_writers_never_corrupt_an_entry(cache):
    lists = [_matches(f"user{i}") for i in range(50)]

    def write_and_read(matches):
        cache.set("requester", matches)
        return cache.get("requester")

    with ThreadPoolExecutor(max_workers=16) as pool:
        results = list(pool.map(write_and_read, lists))

    assert all(any(r is m for m in lists) for r in results)
    assert any(cache.get("requester") is m for m in lists)
