"""Exceptions raised by the shopbind client."""

from typing import Any


class ShopBindError(Exception):
    """Base class for all shopbind errors."""

    pass


class ConfigurationError(ShopBindError):
    """Raised when a client cannot be built from the given settings."""

    pass


class MissingIdentifierError(ShopBindError, ValueError):
    """Raised when an operation needs a server-assigned id that is not set."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"{resource} has no id; create it before updating")


class ResponseError(ShopBindError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status of the response.
        message: Human readable message built from the error body.
        errors: Error detail as sent by the server (string, list or dict).
    """

    def __init__(self, status_code: int, message: str, errors: Any = None) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = errors
        super().__init__(f"{status_code}: {message}")


class AuthenticationError(ResponseError):
    """Raised on 401 and 403 responses."""

    pass


class NotFoundError(ResponseError):
    """Raised on 404 responses."""

    pass


class ValidationError(ResponseError):
    """Raised on 422 responses, typically for missing or invalid fields."""

    pass


class RateLimitError(ResponseError):
    """Raised on 429 responses.

    The request is not retried; retry_after carries the server's hint.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        errors: Any = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(status_code, message, errors)
        self.retry_after = retry_after
