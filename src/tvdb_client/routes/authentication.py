"""Authentication endpoints: token login and refresh."""

import logging
import os

from tvdb_client.auth.credentials import (
    API_KEY_ENV,
    API_KEY_FILE_ENV,
    USER_KEY_ENV,
    USER_KEY_FILE_ENV,
    USERNAME_ENV,
    CredentialResolver,
)
from tvdb_client.auth.exceptions import CredentialNotFoundError
from tvdb_client.errors.exceptions import ParseError
from tvdb_client.routes.base import BaseRoute

logger = logging.getLogger(__name__)


class AuthenticationRoute(BaseRoute):
    """Obtain and refresh the bearer token of the parent client."""

    def login(
        self,
        api_key: str | None = None,
        user_key: str | None = None,
        username: str | None = None,
        *,
        resolver: CredentialResolver | None = None,
    ) -> str:
        """Log in and store the returned token on the parent client.

        Missing arguments are resolved from ``TVDB_API_KEY``,
        ``TVDB_USER_KEY`` and ``TVDB_USERNAME``; only the API key is required.
        When the key variables are unset, the keys are read from the files
        named by ``TVDB_API_KEY_FILE`` and ``TVDB_USER_KEY_FILE``.

        Returns:
            The new token

        Raises:
            CredentialNotFoundError: If no API key can be resolved.
            CredentialFileError: If a key file is configured but unreadable.
            UnauthorizedError: If the service rejects the credentials.
            ParseError: If the response carries no token.
        """
        resolver = resolver or CredentialResolver()

        api_key = resolver.resolve(value=api_key, env_var_name=API_KEY_ENV)
        if api_key is None and API_KEY_FILE_ENV in os.environ:
            api_key = resolver.resolve_from_file(env_var_name=API_KEY_FILE_ENV, required=True)
        if api_key is None:
            raise CredentialNotFoundError(
                f"Required credential not found (checked env vars: {API_KEY_ENV}, {API_KEY_FILE_ENV})",
                env_var_name=API_KEY_ENV,
            )

        body = {"apikey": api_key}

        user_key = resolver.resolve(value=user_key, env_var_name=USER_KEY_ENV)
        if user_key is None and USER_KEY_FILE_ENV in os.environ:
            user_key = resolver.resolve_from_file(env_var_name=USER_KEY_FILE_ENV, required=True)
        if user_key is not None:
            body["userkey"] = user_key

        username = resolver.resolve(value=username, env_var_name=USERNAME_ENV, secret=False)
        if username is not None:
            body["username"] = username

        token = self._extract_token(self.parent.perform_api_call_with_json_response("POST", "/login", json=body))
        self.parent.set_token(token)
        logger.info("Authenticated against TheTVDB API")
        return token

    def refresh_token(self) -> str:
        """Exchange the current token for a fresh one and store it.

        Raises:
            UnauthorizedError: If the current token is missing or expired.
        """
        token = self._extract_token(self.parent.perform_api_call_with_json_response("GET", "/refresh_token"))
        self.parent.set_token(token)
        logger.debug("Refreshed TheTVDB API token")
        return token

    @staticmethod
    def _extract_token(payload) -> str:
        token = payload.get("token") if isinstance(payload, dict) else None
        if not isinstance(token, str):
            raise ParseError("Authentication response does not contain a token")
        return token
