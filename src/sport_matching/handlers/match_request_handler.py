"""HTTP handlers for the match request lifecycle."""

from sport_matching.dto import MatchRequestItem, MatchRequestStatusRequest, SendMatchRequest
from sport_matching.entities import MatchRequest
from sport_matching.services import MatchRequestService

from .error_mapping import to_http_exception


def _to_item(request: MatchRequest) -> MatchRequestItem:
    return MatchRequestItem(
        id=request.id,
        from_user_id=request.from_user_id,
        to_user_id=request.to_user_id,
        sport_id=request.sport_id,
        status=request.status.value,
        created_at=request.created_at,
    )


class MatchRequestHandler:
    """HTTP handlers for sending and answering match requests."""

    def __init__(self, request_service: MatchRequestService) -> None:
        self._requests = request_service

    async def send(self, request: SendMatchRequest) -> MatchRequestItem:
        """Handle POST /match-requests requests."""
        try:
            created = await self._requests.send_request(
                from_user_id=request.from_user_id,
                to_user_id=request.to_user_id,
                sport_id=request.sport_id,
            )
            return _to_item(created)

        except Exception as e:
            raise to_http_exception(e, "send match request") from e

    async def update_status(self, request_id: str, request: MatchRequestStatusRequest) -> MatchRequestItem:
        """Handle PATCH /match-requests/{id} requests."""
        try:
            return _to_item(await self._requests.update_status(request_id, request.status))

        except Exception as e:
            raise to_http_exception(e, "update match request") from e

    async def cancel(self, request_id: str, user_id: str) -> MatchRequestItem:
        """Handle PATCH /match-requests/{id}/cancel requests."""
        try:
            return _to_item(await self._requests.cancel(request_id, user_id))

        except Exception as e:
            raise to_http_exception(e, "cancel match request") from e

    async def delete(self, request_id: str) -> dict:
        """Handle DELETE /match-requests/{id} requests."""
        try:
            await self._requests.delete(request_id)
            return {"success": True, "message": f"Match request {request_id} deleted"}

        except Exception as e:
            raise to_http_exception(e, "delete match request") from e

    async def list_incoming(self, user_id: str) -> list[MatchRequestItem]:
        try:
            return [_to_item(r) for r in await self._requests.list_incoming(user_id)]

        except Exception as e:
            raise to_http_exception(e, "list incoming match requests") from e

    async def list_outgoing(self, user_id: str) -> list[MatchRequestItem]:
        try:
            return [_to_item(r) for r in await self._requests.list_outgoing(user_id)]

        except Exception as e:
            raise to_http_exception(e, "list outgoing match requests") from e

    async def list_history(self, user_id: str) -> list[MatchRequestItem]:
        try:
            return [_to_item(r) for r in await self._requests.list_history(user_id)]

        except Exception as e:
            raise to_http_exception(e, "list match request history") from e
