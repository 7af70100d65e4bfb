from abc import ABC
from enum import StrEnum


class ErrorKind(StrEnum):
    """Machine-readable error categories, used to pick the HTTP status and response type."""

    UNAUTHORIZED = "authentication_error"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    VALIDATION = "validation_error"
    INTERNAL = "internal_server_error"


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """

    kind: ErrorKind = ErrorKind.VALIDATION


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when a request is not authenticated or its session is invalid."""

    kind = ErrorKind.UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when a user tries to access a resource they do not have permission for."""

    kind = ErrorKind.ACCESS_DENIED


class ValidationError(UserError):
    """Raised when user input fails validation."""

    kind = ErrorKind.VALIDATION


class ConfigurationError(Exception):
    """Raised when the server is missing required configuration.

    Not a UserError: the message is logged, never shown to the client.
    """

    kind = ErrorKind.INTERNAL


class MailDeliveryError(Exception):
    """Raised when an email could not be handed over to the SMTP server."""

    kind = ErrorKind.INTERNAL
