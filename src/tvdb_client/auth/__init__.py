"""Authentication state and credential resolution for TheTVDB clients.

Example:
    ```python
    from tvdb_client.auth import CredentialResolver

    resolver = CredentialResolver()
    api_key = resolver.resolve(env_var_name="TVDB_API_KEY", required=True)
    ```
"""

from tvdb_client.auth.credentials import CredentialResolver
from tvdb_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from tvdb_client.auth.state import CredentialState

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "CredentialState",
]
