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
    """Raised when a request requires an authenticated session and has none."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when login fails. Unknown user and wrong password look the same."""

    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when a user tries to access a resource they do not have permission for."""


class ValidationError(UserError):
    """Raised when user input fails validation."""


class DuplicateUsernameError(ValidationError):
    """Raised when registering a username that is already taken."""


class StoreUnavailableError(Exception):
    """Raised when MongoDB fails on a path where the failure must be visible."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"Store unavailable during '{operation}'")
        self.operation = operation
