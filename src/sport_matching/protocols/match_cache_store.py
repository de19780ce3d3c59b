"""Match cache protocol.

Defines the interface for the per-user cache of computed match lists.

Implementations:
- In-process dictionary with striped locks (default)
- Redis string keys with native expiry (shared across workers)
"""

from typing import Protocol, runtime_checkable

from sport_matching.entities import CandidateMatch


@runtime_checkable
class MatchCacheStore(Protocol):
    """Protocol for match list caches keyed by requesting user."""

    @property
    def ttl(self) -> int:
        """Return the entry time-to-live in seconds."""
        ...

    def get(self, user_id: str) -> list[CandidateMatch] | None:
        """Return the cached list if it is younger than the TTL.

        Args:
            user_id: The requesting user

        Returns:
            The cached matches, or None on a miss or expired entry
        """
        ...

    def set(self, user_id: str, matches: list[CandidateMatch]) -> None:
        """Store a match list, replacing any prior entry and restarting the TTL.

        Args:
            user_id: The requesting user
            matches: The computed matches
        """
        ...

    def invalidate(self, user_id: str) -> None:
        """Remove the entry for a user. No-op if absent.

        Args:
            user_id: The user whose entry to drop
        """
        ...

    def clear(self) -> int:
        """Remove all entries.

        Returns:
            Number of entries deleted
        """
        ...

    def count(self) -> int:
        """Count stored entries (expired ones may be included).

        Returns:
            Number of entries currently held
        """
        ...

    def health_check(self) -> bool:
        """Check if the cache backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...

    def get_stats(self) -> dict:
        """Get cache statistics.

        Returns:
            Dictionary with stats (implementation-specific)
        """
        ...
