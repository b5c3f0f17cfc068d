"""Structured exceptions for TheTVDB API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class TheTVDbError(Exception):
    """Base exception for all errors raised by this library."""

    pass


class InvalidArgumentError(TheTVDbError, ValueError):
    """A configuration value supplied by the caller is malformed."""

    pass


class APIError(TheTVDbError):
    """Base exception for classified HTTP error responses."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class UnauthorizedError(APIError):
    """401 Unauthorized. The caller must authenticate again before retrying."""

    pass


class ResourceNotFoundError(APIError):
    """404 Not Found."""

    pass


class ParseError(TheTVDbError):
    """Response body could not be interpreted as a JSON envelope.

    The underlying decode error is available as ``__cause__``.
    """

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body
