"""Tests for structured API exceptions."""

import pytest
from httpx import Response

from tvdb_client.auth.exceptions import CredentialError
from tvdb_client.errors.exceptions import (
    APIError,
    InvalidArgumentError,
    ParseError,
    ResourceNotFoundError,
    TheTVDbError,
    UnauthorizedError,
)


@pytest.mark.unit
def test_api_error_instantiation():
    """Test APIError can be instantiated with all attributes."""
    response = Response(status_code=500)

    error = APIError(message="Test error", status_code=500, response=response)

    assert str(error) == "Test error"
    assert error.status_code == 500
    assert error.response == response


@pytest.mark.unit
def test_api_error_defaults():
    error = APIError("Test error")

    assert error.status_code is None
    assert error.response is None


@pytest.mark.unit
def test_exception_inheritance():
    """Test exception inheritance chain."""
    assert issubclass(UnauthorizedError, APIError)
    assert issubclass(ResourceNotFoundError, APIError)
    assert not issubclass(UnauthorizedError, ResourceNotFoundError)

    for exc_class in (APIError, InvalidArgumentError, ParseError, CredentialError):
        assert issubclass(exc_class, TheTVDbError)

    assert issubclass(InvalidArgumentError, ValueError)
    assert not issubclass(ParseError, APIError)


@pytest.mark.unit
def test_parse_error_keeps_body_and_cause():
    cause = ValueError("Expecting value")

    try:
        raise ParseError("Unable to decode JSON response", body="ABC") from cause
    except ParseError as e:
        assert e.body == "ABC"
        assert e.__cause__ is cause
        assert str(e) == "Unable to decode JSON response"
