"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .candidate_match import CandidateMatch
from .match_request import MatchRequest, MatchRequestStatus
from .user_profile import UserProfile

__all__ = ["CandidateMatch", "MatchRequest", "MatchRequestStatus", "UserProfile"]
