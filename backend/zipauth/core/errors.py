"""
Account and session errors.

Each error carries the HTTP status it is rendered with, so the service layer
can raise them directly and the exception handler in ``zipauth.main`` only
has to format them.
"""
from fastapi import status


class AccountError(Exception):
    """Base class for failures surfaced to the caller."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Account error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__


class NotAuthenticated(AccountError):
    """No session cookie was presented."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not logged in."


class AlreadyAuthenticated(AccountError):
    """A session cookie was presented to an anonymous-only operation."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already logged in."


class AccountNotFound(AccountError):
    """No account matches the given identifier or username."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User was not found."


class DuplicateUsername(AccountError):
    """An account with this username already exists."""

    status_code = status.HTTP_409_CONFLICT
    default_message = "User exists already."


class MissingField(AccountError):
    """A required body field is absent or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing field."


class InvalidCredentials(AccountError):
    """The password does not match the stored hash."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Wrong credentials!"


class MalformedCookie(AccountError):
    """The session cookie could not be decoded to an account identifier."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Malformed session cookie."


class NotAdministrator(AccountError):
    """The logged-in account lacks the administrator flag."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You are not an administrator."


class CreationFailed(AccountError):
    """The repository failed while persisting a new account."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Could not create user."
