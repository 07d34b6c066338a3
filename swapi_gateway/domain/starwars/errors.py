"""
Domain-specific errors for the Star Wars bounded context.

Every failure a request can hit is one of three kinds.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Error taxonomy. Values are the public ``type`` of an error body."""

    BAD_REQUEST = "BAD_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL_SERVER_ERROR"


class StarWarsDomainError(Exception):
    """Base error for all Star Wars domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BadRequestError(StarWarsDomainError):
    """Raised when client input is malformed. Never reaches upstream."""

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, reason: str) -> None:
        super().__init__(f"Bad request. Reason: {reason}")
        self.reason = reason


class ResourceNotFoundError(StarWarsDomainError):
    """Raised when upstream reports that a resource does not exist.

    Args:
        resource: Label of the missing resource ("starship", "peoples", ...).
        resource_id: Identifier that was looked up. Empty for collections.
    """

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, resource_id: str = "") -> None:
        if resource_id:
            message = f"resource: {resource} with id: {resource_id} not found"
        else:
            message = f"resource: {resource} not found"
        super().__init__(message)
        self.resource = resource
        self.resource_id = resource_id


class InternalError(StarWarsDomainError):
    """Raised when upstream or infrastructure fails.

    The public message is fixed. The cause is kept for logging only.
    """

    kind = ErrorKind.INTERNAL

    def __init__(self, cause: str = "") -> None:
        super().__init__("Internal server error.")
        self.cause = cause
