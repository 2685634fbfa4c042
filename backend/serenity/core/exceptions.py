"""
Application exception hierarchy.

Every error carries the HTTP status it is rendered with by the handlers
registered in ``serenity.main``.
"""

from fastapi import status


class SerenityError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(SerenityError):
    """A required field is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthError(SerenityError):
    """Missing, invalid or expired credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class NotFoundError(SerenityError):
    """Resource is absent or not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ConcurrencyConflictError(SerenityError):
    """A session changed between load and append."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "Chat was modified by another request"


class PayloadTooLargeError(SerenityError):
    status_code = 413
    default_message = (
        "Payload too large. Please reduce the size of your message or media."
    )


class LLMGatewayError(SerenityError):
    """The completion API could not produce a reply."""

    default_message = "LLM request failed"


class ClassificationError(SerenityError):
    default_message = "Failed to analyze emotion"


class GenerationError(SerenityError):
    default_message = "Failed to get response from AI"
