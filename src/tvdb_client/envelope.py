"""JSON envelope decoding for TheTVDB responses.

Every JSON response of the API is an object that may carry three well-known
top-level keys next to arbitrary others:

- ``data``: the primary payload
- ``errors``: partial errors, e.g. ``{"invalidLanguage": "..."}``
- ``links``: pagination, e.g. ``{"first": 1, "next": 2, "last": 7}``
"""

import json
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from tvdb_client.errors.exceptions import ParseError

JSONValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None

DATA_KEY = "data"
ERRORS_KEY = "errors"
LINKS_KEY = "links"


@dataclass(frozen=True)
class JSONEnvelope:
    """Decoded response envelope.

    Attributes:
        payload: Value under ``data`` if present, otherwise the whole object.
        errors: Copy of the ``errors`` mapping, empty when absent.
        links: Copy of the ``links`` mapping, empty when absent.
        raw: The decoded JSON object as returned by the service.
    """

    payload: JSONValue = None
    errors: dict[str, str] = field(default_factory=dict)
    links: dict[str, int] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_object(cls, obj: dict[str, Any]) -> "JSONEnvelope":
        """Split a decoded JSON object into payload and side-channel fields."""
        payload = obj[DATA_KEY] if DATA_KEY in obj else obj

        return cls(
            payload=payload,
            errors=_extract_mapping(obj, ERRORS_KEY),
            links=_extract_mapping(obj, LINKS_KEY),
            raw=obj,
        )


def _extract_mapping(obj: dict[str, Any], key: str) -> dict[str, Any]:
    # Anything other than a JSON object under the key counts as absent
    value = obj.get(key)
    if isinstance(value, dict):
        return dict(value)
    return {}


def decode_envelope(body: str | bytes) -> JSONEnvelope:
    """Parse a response body into a :class:`JSONEnvelope`.

    Args:
        body: Raw response body

    Returns:
        The decoded envelope

    Raises:
        ParseError: If the body is not valid JSON, or is valid JSON but not
            an object.
    """
    # Lossy text is only kept for diagnostics; decoding itself is strict
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body

    try:
        decoded = json.loads(body)
    except ValueError as e:
        raise ParseError(f"Unable to decode JSON response: {e}", body=text) from e

    if not isinstance(decoded, dict):
        cause = TypeError(f"expected a JSON object, got {type(decoded).__name__}")
        raise ParseError(f"Unexpected JSON response: {cause}", body=text) from cause

    return JSONEnvelope.from_object(decoded)
