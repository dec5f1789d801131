"""
Domain errors raised by the service layer.

Services signal failures by raising subclasses of ``BlogError`` (itself
a ``ValueError``).  Each class carries the HTTP status code it maps to;
the handlers registered in ``main.create_app`` render them as
``{"error": <message>}`` responses.
"""

from typing import Optional

from fastapi import status


class BlogError(ValueError):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(BlogError):
    """A required field is missing or malformed."""

    default_message = "Invalid request"


class NotFound(BlogError, LookupError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(BlogError):
    """A unique key (e.g. subscriber e-mail) already exists."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Already exists"


class PayloadTooLarge(BlogError):
    # Reported as 400 to keep the response contract of the upload endpoints.
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "File too large"


class InternalError(BlogError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
