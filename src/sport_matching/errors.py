"""Domain exceptions.

Services raise these; the handler layer maps them to HTTP status codes.
"""


class SportMatchingError(Exception):
    """Base class for all domain errors."""


class NotFoundError(SportMatchingError):
    """A user or match request identifier does not resolve."""

    def __init__(self, kind: str, identifier: str) -> None:
        super().__init__(f"{kind} {identifier} not found")
        self.kind = kind
        self.identifier = identifier


class RepositoryUnavailableError(SportMatchingError):
    """A storage collaborator failed with a transient I/O error.

    Not retried inside the core; callers decide on a retry policy.
    """


class InvalidMatchRequestError(SportMatchingError):
    """A match request operation was given invalid input."""


class ForbiddenError(SportMatchingError):
    """The acting user may not perform the operation."""


class InvalidProfileUpdateError(SportMatchingError):
    """A profile update carried an out-of-range or conflicting value."""
