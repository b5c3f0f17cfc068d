"""Transport layer for TheTVDB clients.

The transport is the only I/O boundary of the library. Requests go through a
plain ``httpx.Client``; :class:`LoggingTransport` wraps whatever transport that
client uses so every exchange shows up in debug logs. Requests are sent once;
failures reach the caller on the first attempt.

Example:
    ```python
    from tvdb_client.transport import create_http_client

    http = create_http_client(base_url="https://api.thetvdb.com", timeout=10.0)
    ```

In tests, pass an ``httpx.MockTransport`` as ``transport``.
"""

import logging
import time

import httpx

logger = logging.getLogger(__name__)

API_BASE_URL = "https://api.thetvdb.com"


class LoggingTransport(httpx.BaseTransport):
    """Transport that logs each request and its outcome at DEBUG level.

    Args:
        wrapped_transport: The underlying transport to delegate to
    """

    def __init__(self, *, wrapped_transport: httpx.BaseTransport) -> None:
        self._wrapped_transport = wrapped_transport

    def __enter__(self):
        self._wrapped_transport.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return self._wrapped_transport.__exit__(exc_type, exc_val, exc_tb)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request through the wrapped transport.

        Transport errors are re-raised untouched.
        """
        logger.debug(f"Request {request.method} {request.url}")
        started = time.perf_counter()

        response = self._wrapped_transport.handle_request(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"Response {request.method} {request.url} -> {response.status_code} ({elapsed_ms:.0f}ms)")
        return response

    def close(self) -> None:
        self._wrapped_transport.close()


def create_http_client(
    *,
    base_url: str = API_BASE_URL,
    timeout: float | httpx.Timeout | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Build the ``httpx.Client`` used to talk to the API.

    Args:
        base_url: Base URI that request paths are resolved against
        timeout: Request timeout; httpx's default applies when None
        transport: Transport to wrap, ``httpx.HTTPTransport()`` by default

    Returns:
        Configured synchronous httpx client
    """
    wrapped = LoggingTransport(wrapped_transport=transport or httpx.HTTPTransport())

    kwargs = {}
    if timeout is not None:
        kwargs["timeout"] = timeout

    return httpx.Client(base_url=base_url, transport=wrapped, **kwargs)
