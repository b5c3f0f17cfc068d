"""Base class for API routes."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tvdb_client.client import TheTVDbClient


class BaseRoute:
    """A group of endpoints that share the parent client's pipeline."""

    def __init__(self, parent: "TheTVDbClient") -> None:
        self.parent = parent
