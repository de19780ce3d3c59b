"""Match request lifecycle.

Every successful mutation invalidates the cached match lists of both the
sender and the receiver before returning.
"""

import logging
import uuid
from dataclasses import replace

from sport_matching.entities import MatchRequest, MatchRequestStatus
from sport_matching.errors import ForbiddenError, InvalidMatchRequestError
from sport_matching.protocols import MatchRequestRepository, ProfileRepository

from .matching_service import MatchingService

logger = logging.getLogger(__name__)

RESPONSE_STATUSES = (MatchRequestStatus.ACCEPTED, MatchRequestStatus.REJECTED)


class MatchRequestService:
    """Send, answer, cancel and delete match requests."""

    def __init__(
        self,
        requests: MatchRequestRepository,
        profiles: ProfileRepository,
        matching: MatchingService,
    ) -> None:
        self._requests = requests
        self._profiles = profiles
        self._matching = matching

    async def send_request(self, from_user_id: str, to_user_id: str, sport_id: str) -> MatchRequest:
        """Create a pending request from one user to another.

        Raises:
            InvalidMatchRequestError: If a user addresses themselves
            NotFoundError: If either user does not exist
        """
        if from_user_id == to_user_id:
            raise InvalidMatchRequestError("Cannot send a match request to yourself")

        await self._profiles.get_profile(from_user_id)
        await self._profiles.get_profile(to_user_id)

        request = MatchRequest(
            id=str(uuid.uuid4()),
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            sport_id=sport_id,
        )
        await self._requests.add(request)

        logger.info("User %s sent match request %s to %s for sport %s", from_user_id, request.id, to_user_id, sport_id)
        self._matching.invalidate_pair(from_user_id, to_user_id)
        return request

    async def update_status(self, request_id: str, status: MatchRequestStatus) -> MatchRequest:
        """Accept or reject a request.

        Raises:
            InvalidMatchRequestError: If status is neither Accepted nor Rejected
            NotFoundError: If the request does not exist
        """
        if status not in RESPONSE_STATUSES:
            raise InvalidMatchRequestError(f"Status must be Accepted or Rejected, got {status.value}")

        request = await self._requests.get(request_id)
        updated = replace(request, status=status)
        await self._requests.update(updated)

        logger.info("Match request %s updated to %s", request_id, status.value)
        self._matching.invalidate_pair(*updated.participants)
        return updated

    async def cancel(self, request_id: str, acting_user_id: str) -> MatchRequest:
        """Cancel a request on behalf of one of its participants.

        Raises:
            ForbiddenError: If the acting user is not a participant
            NotFoundError: If the request does not exist
        """
        request = await self._requests.get(request_id)
        if acting_user_id not in request.participants:
            raise ForbiddenError(f"User {acting_user_id} is not part of match request {request_id}")

        cancelled = replace(request, status=MatchRequestStatus.CANCELLED)
        await self._requests.update(cancelled)

        logger.info("User %s cancelled match request %s", acting_user_id, request_id)
        self._matching.invalidate_pair(*cancelled.participants)
        return cancelled

    async def delete(self, request_id: str) -> MatchRequest:
        """Remove a request entirely.

        Raises:
            NotFoundError: If the request does not exist
        """
        removed = await self._requests.delete(request_id)

        logger.info("Match request %s deleted", request_id)
        self._matching.invalidate_pair(*removed.participants)
        return removed

    async def list_incoming(self, user_id: str) -> list[MatchRequest]:
        requests = await self._requests.list_for_user(user_id)
        return [r for r in requests if r.to_user_id == user_id]

    async def list_outgoing(self, user_id: str) -> list[MatchRequest]:
        requests = await self._requests.list_for_user(user_id)
        return [r for r in requests if r.from_user_id == user_id]

    async def list_history(self, user_id: str) -> list[MatchRequest]:
        """Accepted requests where the user is either side."""
        requests = await self._requests.list_for_user(user_id)
        return [r for r in requests if r.status == MatchRequestStatus.ACCEPTED]
