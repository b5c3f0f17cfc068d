"""Error taxonomy and status classification for TheTVDB clients."""

from tvdb_client.errors.exceptions import (
    APIError,
    InvalidArgumentError,
    ParseError,
    ResourceNotFoundError,
    TheTVDbError,
    UnauthorizedError,
)
from tvdb_client.errors.handler import raise_for_status

__all__ = [
    "APIError",
    "InvalidArgumentError",
    "ParseError",
    "ResourceNotFoundError",
    "TheTVDbError",
    "UnauthorizedError",
    "raise_for_status",
]
