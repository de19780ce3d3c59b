"""Match request repository protocol."""

from typing import Protocol, runtime_checkable

from sport_matching.entities import MatchRequest


@runtime_checkable
class MatchRequestRepository(Protocol):
    """Protocol for match request storage."""

    async def add(self, request: MatchRequest) -> None:
        """Persist a new request."""
        ...

    async def get(self, request_id: str) -> MatchRequest:
        """Fetch a request.

        Raises:
            NotFoundError: If the identifier does not resolve
        """
        ...

    async def update(self, request: MatchRequest) -> None:
        """Replace a stored request with a new version."""
        ...

    async def delete(self, request_id: str) -> MatchRequest:
        """Remove a request and return what was removed.

        Raises:
            NotFoundError: If the identifier does not resolve
        """
        ...

    async def list_for_user(self, user_id: str) -> list[MatchRequest]:
        """Return every request where the user is sender or receiver."""
        ...
