"""Tests for the logging transport and http client factory."""

import httpx
import pytest

from tvdb_client.transport import API_BASE_URL, LoggingTransport, create_http_client


class TestLoggingTransport:
    @pytest.mark.unit
    def test_delegates_to_wrapped_transport(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        transport = LoggingTransport(wrapped_transport=httpx.MockTransport(handler))

        with httpx.Client(transport=transport) as client:
            response = client.get("https://api.example.com/languages")

        assert response.json() == {"ok": True}
        assert len(seen) == 1

    @pytest.mark.unit
    def test_logs_request_and_response(self, caplog):
        transport = LoggingTransport(wrapped_transport=httpx.MockTransport(lambda request: httpx.Response(404)))

        with caplog.at_level("DEBUG", logger="tvdb_client.transport"):
            with httpx.Client(transport=transport) as client:
                client.get("https://api.example.com/series/1")

        assert "Request GET https://api.example.com/series/1" in caplog.text
        assert "-> 404" in caplog.text

    @pytest.mark.unit
    def test_transport_errors_are_not_retried(self):
        attempts = 0

        def handler(request: httpx.Request) -> httpx.Response:
            nonlocal attempts
            attempts += 1
            raise httpx.ConnectError("Error Communicating with Server", request=request)

        transport = LoggingTransport(wrapped_transport=httpx.MockTransport(handler))

        with httpx.Client(transport=transport) as client:
            with pytest.raises(httpx.ConnectError):
                client.get("https://api.example.com/")

        assert attempts == 1


class TestCreateHttpClient:
    @pytest.mark.unit
    def test_defaults(self):
        with create_http_client() as client:
            assert str(client.base_url).startswith(API_BASE_URL)
            assert isinstance(client._transport, LoggingTransport)

    @pytest.mark.unit
    def test_custom_timeout(self):
        with create_http_client(timeout=3.0) as client:
            assert client.timeout == httpx.Timeout(3.0)

    @pytest.mark.unit
    def test_custom_transport_is_wrapped(self):
        mock = httpx.MockTransport(lambda request: httpx.Response(204))

        with create_http_client(base_url="https://api.example.com", transport=mock) as client:
            response = client.get("/updated/query")

        assert response.status_code == 204
        assert response.request.url == "https://api.example.com/updated/query"
