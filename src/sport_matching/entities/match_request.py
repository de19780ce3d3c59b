"""Match request domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class MatchRequestStatus(str, Enum):
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"


@dataclass(frozen=True)
class MatchRequest:
    """A request from one user to another to practice a sport together.

    Attributes:
        id: Request identifier
        from_user_id: The sender
        to_user_id: The receiver
        sport_id: The sport the request is about
        status: Current lifecycle status
        created_at: When the request was sent (UTC)
    """

    id: str
    from_user_id: str
    to_user_id: str
    sport_id: str
    status: MatchRequestStatus = MatchRequestStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def participants(self) -> tuple[str, str]:
        return self.from_user_id, self.to_user_id
