"""User profile domain entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserProfile:
    """Domain entity for a registered user as seen by the matching engine.

    Attributes:
        id: Opaque unique user identifier
        name: Display name
        email: Contact address
        is_available_now: Whether the user is looking for a partner right now
        search_radius_km: Maximum distance the user accepts to a candidate
        latitude: Position latitude in decimal degrees (-90..90)
        longitude: Position longitude in decimal degrees (-180..180)
        sport_ids: Identifiers of the sports the user practices
    """

    id: str
    name: str
    email: str
    is_available_now: bool = False
    search_radius_km: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    sport_ids: frozenset[str] = field(default_factory=frozenset)
