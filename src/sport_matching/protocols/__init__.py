"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping storage backends (in-memory, Redis) without touching services
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from sport_matching.protocols import MatchCacheStore, ProfileRepository

    cache: MatchCacheStore = InMemoryMatchCache()  # works
    cache: MatchCacheStore = RedisMatchCache()     # also works
    ```
"""

from .match_cache_store import MatchCacheStore
from .match_request_repository import MatchRequestRepository
from .profile_repository import ProfileRepository

__all__ = [
    "MatchCacheStore",
    "MatchRequestRepository",
    "ProfileRepository",
]
