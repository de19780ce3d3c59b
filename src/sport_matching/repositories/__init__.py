"""Repository layer for data access.

This layer abstracts external dependencies (Redis, process memory)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (in-memory for tests, Redis in production)
- Unit testing with fake implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from sport_matching.protocols import MatchCacheStore, MatchRequestRepository, ProfileRepository

from .memory_match_cache import InMemoryMatchCache
from .memory_repository import InMemoryMatchRequestRepository, InMemoryProfileRepository
from .redis_match_cache import RedisMatchCache
from .redis_profile_repository import RedisProfileRepository

__all__ = [
    "MatchCacheStore",
    "MatchRequestRepository",
    "ProfileRepository",
    "InMemoryMatchCache",
    "InMemoryMatchRequestRepository",
    "InMemoryProfileRepository",
    "RedisMatchCache",
    "RedisProfileRepository",
]
