"""Routes built on top of the client's request pipeline."""

from tvdb_client.routes.authentication import AuthenticationRoute
from tvdb_client.routes.base import BaseRoute
from tvdb_client.routes.languages import LanguagesRoute

__all__ = [
    "AuthenticationRoute",
    "BaseRoute",
    "LanguagesRoute",
]
