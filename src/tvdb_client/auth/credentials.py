"""Multi-source credential and configuration resolution.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment)
4. Default value

Example:
    ```python
    from tvdb_client.auth import CredentialResolver

    resolver = CredentialResolver()

    api_key = resolver.resolve(env_var_name="TVDB_API_KEY", required=True)
    languages = resolver.resolve_list(env_var_name="TVDB_LANGUAGES", default=["en"])
    user_key = resolver.resolve_from_file(env_var_name="TVDB_USER_KEY_FILE")
    ```

Credential values are never logged, only the source they came from.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from tvdb_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

API_KEY_ENV = "TVDB_API_KEY"
USER_KEY_ENV = "TVDB_USER_KEY"
API_KEY_FILE_ENV = "TVDB_API_KEY_FILE"
USER_KEY_FILE_ENV = "TVDB_USER_KEY_FILE"
USERNAME_ENV = "TVDB_USERNAME"
TOKEN_ENV = "TVDB_TOKEN"
BASE_URL_ENV = "TVDB_BASE_URL"
VERSION_ENV = "TVDB_API_VERSION"
LANGUAGES_ENV = "TVDB_LANGUAGES"


class CredentialResolver:
    """Resolve credentials and settings from multiple sources.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load a .env file at all.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            # Existing environment variables win over .env entries
            if load_dotenv(dotenv_path=self._dotenv_path, override=False):
                logger.debug("Loaded .env file for credential resolution")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Resolve a single value.

        Args:
            value: Explicit value, wins over every other source.
            env_var_name: Environment variable to check.
            default: Fallback when nothing else is set.
            required: Raise instead of returning None.
            secret: Mask the value in debug logs. Disable for plain settings.

        Returns:
            The resolved value, or None when not found and not required.

        Raises:
            CredentialNotFoundError: If required and not found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if secret else result
            logger.debug(f"Resolved {env_var_name or 'value'} from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_list(
        self,
        *,
        value: list[str] | None = None,
        env_var_name: str | None = None,
        default: list[str] | None = None,
    ) -> list[str] | None:
        """Resolve a comma-separated list, e.g. ``TVDB_LANGUAGES=nl,en``.

        Blank entries are dropped; order is preserved.
        """
        if value is not None:
            return list(value)

        raw = self.resolve(env_var_name=env_var_name, secret=False)
        if raw is not None:
            items = [item.strip() for item in raw.split(",") if item.strip()]
            if items:
                return items

        return list(default) if default is not None else None

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a credential from a file.

        The path may come from ``file_path`` or from the environment variable
        ``env_var_name``; ``~`` and ``$VAR`` are expanded. Surrounding
        whitespace is stripped from the contents.

        Raises:
            CredentialFileError: If required and the file cannot be read.
        """
        path_to_use = str(file_path) if file_path is not None else None
        if path_to_use is None and env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, secret=False)

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content
