"""TheTVDB Client Core - request/response pipeline for the TheTVDB JSON API.

This library provides the pieces every TheTVDB route is built on:
- Bearer token, API version and language negotiation
- Request execution with 401/404 classification
- JSON envelope unwrapping (``data``, ``errors``, ``links``)
- Credential resolution from the environment or a .env file

Example:
    ```python
    from tvdb_client import TheTVDbClient

    with TheTVDbClient() as client:
        client.authentication().login(api_key="...")
        client.set_accepted_languages(["nl", "en"])

        series = client.perform_api_call_with_json_response("GET", "/series/121361")
        pages = client.get_last_links()
    ```
"""

from tvdb_client.client import TheTVDbClient
from tvdb_client.envelope import JSONEnvelope
from tvdb_client.errors import (
    APIError,
    InvalidArgumentError,
    ParseError,
    ResourceNotFoundError,
    TheTVDbError,
    UnauthorizedError,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "InvalidArgumentError",
    "JSONEnvelope",
    "ParseError",
    "ResourceNotFoundError",
    "TheTVDbClient",
    "TheTVDbError",
    "UnauthorizedError",
    "__version__",
]
