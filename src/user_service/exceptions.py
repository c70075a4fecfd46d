"""Exceptions raised by the user service.

HTTP-facing errors carry the status code and the message shown to the client,
so the exception handlers can turn them into responses without knowing the
individual error types.
"""

from fastapi import status

from user_service.constants import MSG_NAME_EMAIL_REQUIRED, MSG_USER_NOT_FOUND


class UserServiceError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(UserServiceError):
    """Raised when required input is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = MSG_NAME_EMAIL_REQUIRED):
        super().__init__(message)


class NotFoundError(UserServiceError):
    """Raised when a user id does not exist in the store.

    The client message is fixed; the identifier is kept for logging only.
    """

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, identifier: str | int | None = None):
        self.identifier = identifier
        super().__init__(MSG_USER_NOT_FOUND)


class AdapterError(Exception):
    """Raised inside the message bus adapter when connecting or sending fails.

    Never crosses the adapter boundary: the adapter logs and swallows it.
    """

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"NATS {operation} failed: {reason}")
