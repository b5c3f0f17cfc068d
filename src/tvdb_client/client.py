"""TheTVDB API client: request execution and JSON envelope decoding."""

import logging
from threading import Lock
from typing import Any

import httpx

from tvdb_client.auth.credentials import (
    BASE_URL_ENV,
    LANGUAGES_ENV,
    TOKEN_ENV,
    VERSION_ENV,
    CredentialResolver,
)
from tvdb_client.auth.state import DEFAULT_LANGUAGES, DEFAULT_VERSION, CredentialState
from tvdb_client.envelope import JSONEnvelope, JSONValue, decode_envelope
from tvdb_client.errors.exceptions import InvalidArgumentError
from tvdb_client.errors.handler import raise_for_status
from tvdb_client.headers import build_request_headers
from tvdb_client.routes import AuthenticationRoute, LanguagesRoute
from tvdb_client.transport import API_BASE_URL, create_http_client

logger = logging.getLogger(__name__)


class TheTVDbClient:
    """Client for the TheTVDB JSON API.

    Route objects call :meth:`perform_api_call` or
    :meth:`perform_api_call_with_json_response` with a verb and a path; the
    client adds authentication, version and language headers, classifies the
    response and unwraps the JSON envelope.

    Args:
        http_client: Pre-configured ``httpx.Client``. Used as-is, including its
            base URL. When omitted one is built from ``base_url``/``timeout``.
        base_url: Base URI for requests when no ``http_client`` is given.
        timeout: Request timeout when no ``http_client`` is given.

    Example:
        ```python
        client = TheTVDbClient()
        client.set_token(token)

        episodes = client.perform_api_call_with_json_response("GET", "/series/121361/episodes")
        if client.get_last_links().get("next"):
            ...
        ```
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        *,
        base_url: str = API_BASE_URL,
        timeout: float | httpx.Timeout | None = None,
    ) -> None:
        self._owns_http_client = http_client is None
        self._http = http_client if http_client is not None else create_http_client(base_url=base_url, timeout=timeout)
        self._credentials = CredentialState()
        self._last_envelope = JSONEnvelope()
        self._envelope_lock = Lock()

    @classmethod
    def from_env(
        cls,
        *,
        resolver: CredentialResolver | None = None,
        http_client: httpx.Client | None = None,
        timeout: float | httpx.Timeout | None = None,
    ) -> "TheTVDbClient":
        """Build a client configured from the environment (or a .env file).

        Reads ``TVDB_BASE_URL``, ``TVDB_TOKEN``, ``TVDB_API_VERSION`` and
        ``TVDB_LANGUAGES`` (comma-separated). A given ``http_client`` keeps
        its own base URL and timeout, so ``TVDB_BASE_URL`` is not consulted.

        Raises:
            InvalidArgumentError: If ``TVDB_API_VERSION`` is malformed.
        """
        resolver = resolver or CredentialResolver()

        if http_client is None:
            base_url = resolver.resolve(env_var_name=BASE_URL_ENV, default=API_BASE_URL, secret=False)
            client = cls(base_url=base_url, timeout=timeout)
        else:
            client = cls(http_client)

        try:
            client.set_version(resolver.resolve(env_var_name=VERSION_ENV, default=DEFAULT_VERSION, secret=False))
        except InvalidArgumentError:
            client.close()
            raise

        client.set_accepted_languages(resolver.resolve_list(env_var_name=LANGUAGES_ENV, default=list(DEFAULT_LANGUAGES)))

        token = resolver.resolve(env_var_name=TOKEN_ENV)
        if token is not None:
            client.set_token(token)

        return client

    def __enter__(self) -> "TheTVDbClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying httpx client if this instance created it."""
        if self._owns_http_client:
            self._http.close()

    # Routes

    def authentication(self) -> AuthenticationRoute:
        return AuthenticationRoute(self)

    def languages(self) -> LanguagesRoute:
        return LanguagesRoute(self)

    # Credential state

    @property
    def base_url(self) -> str:
        return str(self._http.base_url)

    @property
    def token(self) -> str | None:
        return self._credentials.token

    @property
    def version(self) -> str:
        return self._credentials.version

    def set_token(self, token: str) -> None:
        self._credentials.set_token(token)

    def clear_token(self) -> None:
        self._credentials.clear_token()

    def set_version(self, version: str) -> None:
        """Set the API version, e.g. ``"2.2.0"``.

        Raises:
            InvalidArgumentError: If the value is not ``x.y.z`` with numeric parts.
        """
        self._credentials.set_version(version)

    def set_accepted_languages(self, languages: list[str]) -> None:
        self._credentials.set_accepted_languages(languages)

    def get_accepted_languages(self) -> list[str]:
        return self._credentials.get_accepted_languages()

    def build_headers(self) -> dict[str, str]:
        """Headers that the next request will carry."""
        return build_request_headers(self._credentials)

    # Request execution

    def perform_api_call(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: JSONValue = None,
    ) -> httpx.Response:
        """Send one request and classify the response.

        Args:
            method: HTTP verb
            path: Path relative to the base URL (or an absolute URL)
            params: Optional query parameters
            json: Optional JSON request body

        Returns:
            The successful response, unmodified

        Raises:
            UnauthorizedError: On 401. Not retried; authenticate again first.
            ResourceNotFoundError: On 404.
            httpx.HTTPStatusError: On any other 4xx/5xx status.
            httpx.TransportError: When no response was received.
        """
        request = self._http.build_request(
            method.upper(),
            path,
            params=params,
            json=json,
            headers=self.build_headers(),
        )
        response = self._http.send(request)
        raise_for_status(response)
        return response

    def request_headers(self, method: str, path: str) -> dict[str, list[str]]:
        """Execute a call and return the headers the server responded with.

        Header names keep the case the server used. Multi-valued headers keep
        every value, in order.
        """
        response = self.perform_api_call(method, path)
        encoding = response.headers.encoding

        headers: dict[str, list[str]] = {}
        for name, value in response.headers.raw:
            headers.setdefault(name.decode(encoding), []).append(value.decode(encoding))
        return headers

    def request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: JSONValue = None,
    ) -> JSONEnvelope:
        """Execute a call and decode the JSON envelope of the response.

        The envelope also becomes the one read by :meth:`get_last_json_errors`
        and :meth:`get_last_links`. When the call fails the previous envelope
        is kept.

        Raises:
            ParseError: If the body is not a JSON object.
            Any exception raised by :meth:`perform_api_call`.
        """
        response = self.perform_api_call(method, path, params=params, json=json)
        envelope = decode_envelope(response.content)
        if envelope.errors:
            logger.debug(f"{method} {path} returned partial errors: {', '.join(envelope.errors)}")

        with self._envelope_lock:
            self._last_envelope = envelope
        return envelope

    def perform_api_call_with_json_response(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: JSONValue = None,
    ) -> JSONValue:
        """Execute a call and return the ``data`` payload (or the whole object).

        Returns:
            The value under ``data`` when present, otherwise the decoded object
            including any ``errors``/``links`` keys.
        """
        return self.request_json(method, path, params=params, json=json).payload

    # Side channel of the most recent JSON call

    @property
    def last_envelope(self) -> JSONEnvelope:
        return self._last_envelope

    def get_last_json_errors(self) -> dict[str, str]:
        """``errors`` of the most recent JSON response, empty when absent."""
        return dict(self._last_envelope.errors)

    def get_last_links(self) -> dict[str, int]:
        """Pagination ``links`` of the most recent JSON response, empty when absent."""
        return dict(self._last_envelope.links)
