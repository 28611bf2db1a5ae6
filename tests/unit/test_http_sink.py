# tests/unit/test_http_sink.py
"""
Tests for markledger.sync.sink.HttpRemoteSink and markledger.core.http.
"""

import json

import httpx
import pytest

from markledger.core.exceptions import RemoteSinkError
from markledger.core.http import create_api_client, handle_api_error, is_success
from markledger.sync.sink import HttpRemoteSink, RemoteSink

ENDPOINT = "https://hooks.test/bookmarks"
PAYLOAD = {"project": "demo", "bookmarks": [{"text": "TODO", "deeplink": "x://file/a:1", "type": "todo"}]}


class TestCreateApiClient:
    """Tests for create_api_client function."""

    def test_bearer_header(self):
        """Test the API key is sent as a Bearer token."""
        client = create_api_client(api_key="secret")
        try:
            assert client.headers["Authorization"] == "Bearer secret"
            assert client.headers["Content-Type"] == "application/json"
        finally:
            client.close()

    def test_no_key_no_auth_header(self):
        """Test no Authorization header without a key."""
        client = create_api_client()
        try:
            assert "Authorization" not in client.headers
        finally:
            client.close()

    def test_is_success(self):
        """Test only 2xx counts as success."""
        assert is_success(200)
        assert is_success(204)
        assert not is_success(302)
        assert not is_success(500)


class TestHandleApiError:
    """Tests for handle_api_error function."""

    def test_timeout(self):
        """Test timeouts map to RemoteSinkError with a hint."""
        error = handle_api_error(httpx.ReadTimeout("slow"), endpoint=ENDPOINT)

        assert isinstance(error, RemoteSinkError)
        assert "timed out" in str(error)
        assert error.status_code is None

    def test_connect_error(self):
        """Test connection failures keep the original error."""
        original = httpx.ConnectError("refused")

        error = handle_api_error(original, endpoint=ENDPOINT)

        assert "Failed to connect" in str(error)
        assert error.original_error is original


class TestHttpRemoteSink:
    """Tests for HttpRemoteSink."""

    def test_implements_protocol(self):
        """Test HttpRemoteSink satisfies RemoteSink."""
        assert isinstance(HttpRemoteSink(ENDPOINT, "key"), RemoteSink)

    def test_posts_json_with_bearer(self):
        """Test the request shape."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"ok": True})

        sink = HttpRemoteSink(ENDPOINT, "secret", transport=httpx.MockTransport(handler))

        status = sink.send(PAYLOAD)

        assert status == 200
        assert seen == {"method": "POST", "url": ENDPOINT, "auth": "Bearer secret", "body": PAYLOAD}

    def test_server_error_raises_with_body(self):
        """Test a 500 raises RemoteSinkError carrying the status and body."""
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="internal"))
        sink = HttpRemoteSink(ENDPOINT, "secret", transport=transport)

        with pytest.raises(RemoteSinkError) as exc_info:
            sink.send(PAYLOAD)

        assert str(exc_info.value) == "API request failed with status 500: internal"
        assert exc_info.value.status_code == 500
        assert exc_info.value.endpoint == ENDPOINT

    def test_redirect_is_failure(self):
        """Test a 3xx is not treated as success."""
        transport = httpx.MockTransport(
            lambda request: httpx.Response(302, headers={"Location": "https://elsewhere.test/"})
        )
        sink = HttpRemoteSink(ENDPOINT, "secret", transport=transport)

        with pytest.raises(RemoteSinkError) as exc_info:
            sink.send(PAYLOAD)

        assert exc_info.value.status_code == 302

    def test_transport_error_raises(self):
        """Test transport failures become RemoteSinkError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        sink = HttpRemoteSink(ENDPOINT, "secret", transport=httpx.MockTransport(handler))

        with pytest.raises(RemoteSinkError, match="Failed to connect"):
            sink.send(PAYLOAD)
