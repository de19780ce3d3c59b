"""Handler layer for HTTP endpoints.

This layer contains the HTTP request/response handlers.
Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository / Cache
    (HTTP)  -> (Business) -> (Data Access)
"""

from .error_mapping import to_http_exception
from .match_handler import MatchHandler
from .match_request_handler import MatchRequestHandler
from .profile_handler import ProfileHandler

__all__ = [
    "MatchHandler",
    "MatchRequestHandler",
    "ProfileHandler",
    "to_http_exception",
]
