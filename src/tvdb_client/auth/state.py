"""Credential state shared by every request a client sends.

Holds the bearer token, the API version negotiated through the ``Accept``
header and the ordered list of accepted languages. State only changes through
the explicit setters below.
"""

import logging
import re
from threading import Lock

from tvdb_client.errors.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_VERSION = "2.2.0"
DEFAULT_LANGUAGES: tuple[str, ...] = ("en",)

VERSION_PATTERN = re.compile(r"^\d+\.\d+\.\d+$")
VERSION_ERROR_MESSAGE = "Version does not match pattern x.y.z (where x, y, z are numbers)"


class CredentialState:
    """Token, version and language preferences of a single client.

    Example:
        ```python
        state = CredentialState()
        state.set_version("3.0.0")
        state.set_accepted_languages(["nl", "en"])
        state.set_token("eyJhbGciOi...")
        ```
    """

    def __init__(self) -> None:
        self._token: str | None = None
        self._version = DEFAULT_VERSION
        self._languages = list(DEFAULT_LANGUAGES)
        self._lock = Lock()

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def version(self) -> str:
        return self._version

    def set_token(self, token: str) -> None:
        """Store the bearer token verbatim."""
        with self._lock:
            self._token = token

    def clear_token(self) -> None:
        with self._lock:
            self._token = None

    def set_version(self, version: str) -> None:
        """Set the API version sent with every request.

        Args:
            version: Version string in ``major.minor.patch`` form.

        Raises:
            InvalidArgumentError: If the version is not three dot-separated
                numbers. The stored version is left unchanged.
        """
        if not isinstance(version, str) or not VERSION_PATTERN.fullmatch(version):
            raise InvalidArgumentError(VERSION_ERROR_MESSAGE)

        with self._lock:
            self._version = version
        logger.debug(f"API version set to {version}")

    def set_accepted_languages(self, languages: list[str]) -> None:
        """Replace the accepted languages, first entry being the preferred one."""
        with self._lock:
            self._languages = list(languages)
        logger.debug(f"Accepted languages set to {', '.join(self._languages)}")

    def get_accepted_languages(self) -> list[str]:
        """Return a copy of the accepted languages in preference order."""
        return list(self._languages)
