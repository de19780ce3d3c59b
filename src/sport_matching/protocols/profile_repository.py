"""Profile repository protocol.

Defines the data access interface the matching engine consumes. Reads are
the only operations that may block, so they are awaitable.

Implementations can include:
- In-memory dictionary (tests, local development)
- Redis hashes and sets (default shared store)
- Any relational database behind an async driver
"""

from typing import Protocol, runtime_checkable

from sport_matching.entities import UserProfile


@runtime_checkable
class ProfileRepository(Protocol):
    """Protocol for user profile storage.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    async def get_profile(self, user_id: str) -> UserProfile:
        """Fetch a single user together with their sport set.

        Args:
            user_id: The user identifier

        Returns:
            The stored profile

        Raises:
            NotFoundError: If the identifier does not resolve
            RepositoryUnavailableError: On transient storage failure
        """
        ...

    async def list_available_excluding(self, user_id: str) -> list[UserProfile]:
        """Fetch every available user except the given one.

        Args:
            user_id: The user to leave out of the pool

        Returns:
            Profiles with is_available_now set, each with its sport set

        Raises:
            RepositoryUnavailableError: On transient storage failure
        """
        ...

    async def save_profile(self, profile: UserProfile) -> None:
        """Create or replace a profile.

        Args:
            profile: The profile to persist

        Raises:
            RepositoryUnavailableError: On transient storage failure
        """
        ...

    async def health_check(self) -> bool:
        """Check if the repository is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
