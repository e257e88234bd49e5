"""Error types raised by the Marzban API client.

Every failure surfaces as a subclass of :class:`ApiError`:

- :class:`NetworkError` when the transport fails or a body cannot be
  decoded into the expected shape.
- :class:`ApiResponseError` when the server answers with a status code the
  endpoint recognizes as a failure.
- :class:`UnexpectedResponseError` for any other status code.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.errors import HTTPValidationError

NOT_ALLOWED_MESSAGE = "You're not allowed"
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected API response"


class ErrorKind(str, Enum):
    """Category of a classified API error."""

    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    VALIDATION = "validation"


class ApiError(Exception):
    """Base class for all errors raised by this package."""


class NetworkError(ApiError):
    """The HTTP transport failed or a response body could not be decoded.

    The underlying exception is kept on ``error`` and chained as
    ``__cause__``.
    """

    def __init__(self, error: Exception):
        super().__init__(f"Network error: {error}")
        self.error = error


class ApiResponseError(ApiError):
    """The server rejected the request with a recognized status code."""

    def __init__(
        self,
        kind: ErrorKind,
        status_code: int,
        message: str,
        detail: "HTTPValidationError | None" = None,
    ):
        super().__init__(f"API error: {message}")
        self.kind = kind
        self.status_code = status_code
        self.message = message
        self.detail = detail


class UnexpectedResponseError(ApiError):
    """The server answered with a status code the endpoint does not declare."""

    def __init__(self, status_code: int):
        super().__init__(UNEXPECTED_RESPONSE_MESSAGE)
        self.status_code = status_code
