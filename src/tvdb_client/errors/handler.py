"""Error handling utilities for HTTP responses."""

import httpx

from tvdb_client.errors.exceptions import ResourceNotFoundError, UnauthorizedError


def raise_for_status(response: httpx.Response) -> None:
    """Raise the appropriate exception for an HTTP error response.

    Only 401 and 404 are mapped onto library exceptions. Every other 4xx/5xx
    status surfaces as the ``httpx.HTTPStatusError`` raised by httpx itself,
    so callers can still inspect the original request and response.

    Args:
        response: HTTP response object

    Raises:
        UnauthorizedError: For 401 responses
        ResourceNotFoundError: For 404 responses
        httpx.HTTPStatusError: For any other 4xx/5xx response
    """
    if response.is_success:
        return

    status_code = response.status_code

    exception_map = {
        401: UnauthorizedError,
        404: ResourceNotFoundError,
    }

    if status_code in exception_map:
        exc_class = exception_map[status_code]
        raise exc_class(
            f"HTTP {status_code} for {response.request.method} {response.request.url}",
            status_code=status_code,
            response=response,
        )

    response.raise_for_status()
