"""
Error taxonomy shared by the service layer and the HTTP boundary.

Services raise these exceptions; ``api.error_handlers`` maps each one to
an HTTP status code using the ``http_status`` attribute.  None of them
are retryable.
"""

from typing import Optional

from fastapi import status


class SocialMediaError(Exception):
    """Base class for all domain and storage failures."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SocialMediaError):
    """Malformed or missing input."""

    http_status = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class ConflictError(SocialMediaError):
    """Uniqueness violation, e.g. a username that is already taken."""

    http_status = status.HTTP_409_CONFLICT
    default_message = "Resource already exists"


class AuthorizationError(SocialMediaError):
    """The acting account does not own the target resource."""

    http_status = status.HTTP_403_FORBIDDEN
    default_message = "Not allowed to modify this resource"


class NotFoundError(SocialMediaError):
    """A referenced entity does not exist."""

    http_status = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class StorageError(SocialMediaError):
    """The persistence layer failed (connectivity, unclassified constraint)."""

    default_message = "Storage failure"
