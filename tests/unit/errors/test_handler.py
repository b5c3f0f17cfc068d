"""Tests for error handling utilities."""

import httpx
import pytest
from httpx import Request, Response

from tvdb_client.errors.exceptions import APIError, ResourceNotFoundError, UnauthorizedError
from tvdb_client.errors.handler import raise_for_status


def _response(status_code: int, **kwargs) -> Response:
    return Response(status_code, request=Request("GET", "https://api.example.com/series/1"), **kwargs)


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [200, 201, 204])
def test_raise_for_status_success_response(status_code):
    """Test raise_for_status doesn't raise for successful responses."""
    raise_for_status(_response(status_code))


@pytest.mark.unit
def test_raise_for_status_401_unauthorized():
    """Test raise_for_status raises UnauthorizedError for 401."""
    response = _response(401, text="Not Authorized")

    with pytest.raises(UnauthorizedError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 401
    assert exc_info.value.response is response
    assert "401" in str(exc_info.value)


@pytest.mark.unit
def test_raise_for_status_404_not_found():
    """Test raise_for_status raises ResourceNotFoundError for 404."""
    response = _response(404, headers={"Content-Length": "0"})

    with pytest.raises(ResourceNotFoundError) as exc_info:
        raise_for_status(response)

    assert exc_info.value.status_code == 404
    assert "/series/1" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize("status_code", [400, 403, 405, 409, 422, 429, 500, 502])
def test_raise_for_status_other_errors_are_httpx_errors(status_code):
    """Unmapped statuses surface as httpx's own HTTPStatusError."""
    response = _response(status_code, text="nope")

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        raise_for_status(response)

    assert not isinstance(exc_info.value, APIError)
    assert exc_info.value.response is response
