"""
Tests for FacebookAdsClient, against httpx.MockTransport.
"""

from urllib.parse import parse_qs

import httpx
import pytest

from ..client import FacebookAdsClient
from ..exceptions import (
    FacebookAPIError,
    FacebookAuthError,
    FacebookTimeoutError,
    FacebookTransportError,
)


def make_client(handler, **kwargs) -> FacebookAdsClient:
    kwargs.setdefault("access_token", "test_token")
    kwargs.setdefault("ad_account_id", "123456789")
    return FacebookAdsClient(transport=httpx.MockTransport(handler), **kwargs)


class TestCredentials:
    """Tests for credential bookkeeping."""

    def test_account_id_prefixed(self):
        """Test bare digits get act_ prefix."""
        client = FacebookAdsClient(access_token="t", ad_account_id="987")
        assert client.ad_account_id == "act_987"
        assert client.missing_credentials == []

    def test_missing(self):
        """Test both settings are reported when absent."""
        client = FacebookAdsClient(access_token="  ", ad_account_id="")
        assert client.missing_credentials == ["META_ACCESS_TOKEN", "META_AD_ACCOUNT_ID"]

    @pytest.mark.asyncio
    async def test_no_token_no_request(self):
        """Test request without token fails before touching the network."""
        seen = []
        client = make_client(lambda request: seen.append(request), access_token="")
        with pytest.raises(FacebookAuthError):
            await client.get("act_123456789/adsets")
        assert seen == []


class TestRequests:
    """Tests for GET and POST."""

    @pytest.mark.asyncio
    async def test_get_sends_token_in_query(self):
        """Test GET URL, fields and token."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        client = make_client(handler, api_version="v19.0")
        result = await client.get("act_123456789/adsets", params={"fields": "id,name", "limit": 200})
        assert result == {"data": []}
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/v19.0/act_123456789/adsets"
        assert seen[0].url.params["access_token"] == "test_token"
        assert seen[0].url.params["fields"] == "id,name"
        assert seen[0].url.params["limit"] == "200"

    @pytest.mark.asyncio
    async def test_post_sends_form(self):
        """Test POST carries status and token as form fields."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"success": True})

        client = make_client(handler)
        result = await client.post("555", form_data={"status": "PAUSED"})
        assert result == {"success": True}
        form = parse_qs(seen[0].content.decode())
        assert seen[0].method == "POST"
        assert seen[0].url.path.endswith("/555")
        assert form["status"] == ["PAUSED"]
        assert form["access_token"] == ["test_token"]

    @pytest.mark.asyncio
    async def test_api_error(self):
        """Test Graph API error payload becomes FacebookAPIError."""
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": {
                "message": "Invalid OAuth access token.",
                "type": "OAuthException",
                "code": 190,
                "fbtrace_id": "AbC",
            }})

        client = make_client(handler)
        with pytest.raises(FacebookAPIError) as exc_info:
            await client.get("act_123456789")
        assert exc_info.value.code == 190
        assert exc_info.value.is_auth_error
        assert exc_info.value.fbtrace_id == "AbC"

    @pytest.mark.asyncio
    async def test_error_without_payload(self):
        """Test HTTP error with HTML body still carries the status."""
        client = make_client(lambda request: httpx.Response(502, text="<html>Bad Gateway</html>"))
        with pytest.raises(FacebookAPIError) as exc_info:
            await client.get("act_123456789")
        assert exc_info.value.code == 502

    @pytest.mark.asyncio
    async def test_not_json(self):
        """Test 200 with a non-JSON body."""
        client = make_client(lambda request: httpx.Response(200, text="ok"))
        with pytest.raises(FacebookAPIError):
            await client.get("act_123456789")

    @pytest.mark.asyncio
    async def test_timeout(self):
        """Test transport timeout is reported with the configured limit."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = make_client(handler, timeout=5.0)
        with pytest.raises(FacebookTimeoutError) as exc_info:
            await client.get("act_123456789")
        assert "5.0" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Test network failure becomes FacebookTransportError."""
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = make_client(handler)
        with pytest.raises(FacebookTransportError) as exc_info:
            await client.post("555", form_data={"status": "ACTIVE"})
        assert "ConnectError" in exc_info.value.message
