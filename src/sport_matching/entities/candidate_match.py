"""Candidate match domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CandidateMatch:
    """Domain entity for a computed match result.

    Derived on every cache miss and never persisted.

    Attributes:
        id: The candidate's user identifier
        name: The candidate's display name
        email: The candidate's contact address
        is_available_now: The candidate's availability flag
        search_radius_km: The candidate's own declared radius
        distance_km: Distance to the requester, rounded to 2 decimals
        shared_sport_ids: Sports practiced by both requester and candidate
    """

    id: str
    name: str
    email: str
    is_available_now: bool
    search_radius_km: int
    distance_km: float
    shared_sport_ids: tuple[str, ...] = ()
