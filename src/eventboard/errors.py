from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested resource is not found."""

    def __init__(self, message: str = "Document not found") -> None:
        super().__init__(message)


class AuthenticationError(UserError):
    """Raised when authentication fails.

    Missing, malformed, unknown and expired tokens all share the default message,
    so a response never reveals whether a token ever existed.
    """

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""
