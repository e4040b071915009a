"""Unit tests for RESTTransport.

Tests focus on URL/header construction, query encoding and the API error
convention.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from mavenlink.client.core import APIError, TransportError
from mavenlink.client.runtime.rest import RESTTransport, encode_query
from mavenlink.client.utils import HTTPClient


@pytest.fixture
def http_client():
    client = MagicMock(spec=HTTPClient)
    client.get = AsyncMock(return_value={"count": 0, "results": []})
    client.close = AsyncMock()
    return client


@pytest.fixture
def transport(http_client):
    return RESTTransport("https://api.example.com/api/v1", "tok-123", http_client=http_client)


class TestRESTTransport:
    """Test RESTTransport request construction."""

    def test_init_creates_http_client(self):
        """Test a default HTTPClient is created with the timeout."""
        transport = RESTTransport("https://api.example.com/", "tok", timeout=5.0)
        assert isinstance(transport._http, HTTPClient)
        assert transport._http.timeout.total == 5.0
        assert transport.base_url == "https://api.example.com"

    def test_build_url(self, transport):
        assert transport.build_url("stories.json") == "https://api.example.com/api/v1/stories.json"
        assert transport.build_url("/posts.json") == "https://api.example.com/api/v1/posts.json"

    @pytest.mark.asyncio
    async def test_get_sends_bearer_token_and_query(self, transport, http_client):
        """Test get() forwards URL, encoded query and bearer header."""
        result = await transport.get(
            "stories.json", params={"page": 2, "per_page": 200, "parents_only": True}
        )

        assert result == {"count": 0, "results": []}
        http_client.get.assert_awaited_once_with(
            "https://api.example.com/api/v1/stories.json",
            params={"page": "2", "per_page": "200", "parents_only": "true"},
            headers={"authorization": "bearer tok-123"},
        )

    @pytest.mark.asyncio
    async def test_errors_field_raises_api_error(self, transport, http_client):
        """Test a body with ``errors`` raises APIError carrying it."""
        errors = [{"type": "oauth", "message": "Invalid OAuth 2 Access Token"}]
        http_client.get.return_value = {"errors": errors}

        with pytest.raises(APIError, match="Invalid OAuth 2 Access Token") as exc_info:
            await transport.get("workspaces.json", params={"page": 1})

        assert exc_info.value.errors == errors

    @pytest.mark.asyncio
    async def test_empty_body_raises_transport_error(self, transport, http_client):
        """Test a null JSON body is treated as a transport failure."""
        http_client.get.return_value = None

        with pytest.raises(TransportError):
            await transport.get("workspaces.json")

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, transport, http_client):
        """Test TransportError from the HTTP client is not swallowed."""
        http_client.get.side_effect = TransportError("down")

        with pytest.raises(TransportError, match="down"):
            await transport.get("workspaces.json")

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self, transport, http_client):
        await transport.close()
        http_client.close.assert_awaited_once()


class TestEncodeQuery:
    """Test query value encoding."""

    def test_none_params(self):
        assert encode_query(None) is None

    def test_booleans_and_none(self):
        assert encode_query({"a": True, "b": False, "c": None, "d": 3, "e": "x"}) == {
            "a": "true",
            "b": "false",
            "d": "3",
            "e": "x",
        }
