#!/usr/bin/env python3
"""
Demo script for sport matching.

This script seeds a handful of players around Krakow and walks through
match lookups, cache hits and invalidation by a match request.
"""

import asyncio
import time

from sport_matching import (
    InMemoryMatchCache,
    InMemoryMatchRequestRepository,
    InMemoryProfileRepository,
    MatchingService,
    MatchRequestService,
    MatchRequestStatus,
    UserProfile,
)


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


PLAYERS = [
    UserProfile("anna", "Anna", "anna@example.com", True, 10, 50.0, 20.0, frozenset({"tennis"})),
    UserProfile("bart", "Bart", "bart@example.com", True, 25, 50.05, 20.0, frozenset({"tennis", "squash"})),
    UserProfile("celina", "Celina", "celina@example.com", True, 5, 51.0, 20.0, frozenset({"tennis"})),
    UserProfile("dawid", "Dawid", "dawid@example.com", True, 30, 50.02, 20.01, frozenset({"cycling"})),
    UserProfile("ewa", "Ewa", "ewa@example.com", False, 10, 50.01, 20.0, frozenset({"tennis"})),
]


async def demo_matching() -> None:
    """Demonstrate lookups, cache hits and invalidation."""
    profiles = InMemoryProfileRepository(PLAYERS)
    matching = MatchingService.create(repository=profiles, cache=InMemoryMatchCache.create())
    requests = MatchRequestService(
        requests=InMemoryMatchRequestRepository(),
        profiles=profiles,
        matching=matching,
    )

    print_section("Matches for Anna (tennis, 10 km)")
    start = time.perf_counter()
    matches = await matching.get_matches("anna")
    print(f"  Computed in {(time.perf_counter() - start) * 1000:.2f} ms")
    for match in matches:
        print(f"  ✓ {match.name}: {match.distance_km} km, shared {match.shared_sport_ids}")
    print("  ✗ Celina is ~111 km away, Dawid only cycles, Ewa is unavailable")

    print_section("Second lookup (cache)")
    start = time.perf_counter()
    again = await matching.get_matches("anna")
    print(f"  Served in {(time.perf_counter() - start) * 1000:.2f} ms, same object: {again is matches}")

    print_section("Match request invalidates both players")
    request = await requests.send_request("anna", "bart", "tennis")
    print(f"  Sent {request.id} ({request.status.value})")
    await requests.update_status(request.id, MatchRequestStatus.ACCEPTED)
    print(f"  Cached entry for Anna after accept: {matching.cache.get('anna')}")

    print_section("Stats")
    for key, value in matching.get_stats()["matching"].items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    asyncio.run(demo_matching())
