"""Authorized REST transport for the Mavenlink API."""

from __future__ import annotations

import logging
from typing import Any

from ...core.exceptions import APIError, TransportError
from ...utils.http import HTTPClient

logger = logging.getLogger(__name__)


class RESTTransport:
    """Single-page GET against a fixed API root with bearer authorization.

    Holds no state beyond the token, the base URL and the HTTP client. The
    HTTP client can be injected so callers can share a session or pass a
    test double.
    """

    def __init__(
        self,
        base_url: str,
        access_token: str,
        *,
        timeout: float = 30.0,
        http_client: HTTPClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token = access_token
        self._http = http_client or HTTPClient(timeout=timeout)

    def build_url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def auth_headers(self) -> dict[str, str]:
        return {"authorization": f"bearer {self._token}"}

    async def get(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Fetch one endpoint and return its JSON body.

        Args:
            endpoint: Path below the API root (e.g. "stories.json")
            params: Query parameters; order is not significant

        Returns:
            Parsed JSON response

        Raises:
            TransportError: Network failure or unparsable/empty body
            APIError: Body contains an ``errors`` field
        """
        url = self.build_url(endpoint)
        response = await self._http.get(
            url, params=encode_query(params), headers=self.auth_headers()
        )
        if not response and not isinstance(response, (dict, list)):
            raise TransportError(f"Empty response body from {url}")
        if isinstance(response, dict) and "errors" in response:
            logger.warning(
                "api_error_response",
                extra={"endpoint": endpoint, "errors": response["errors"]},
            )
            raise APIError(response["errors"])
        return response

    async def close(self) -> None:
        await self._http.close()


def encode_query(params: dict[str, Any] | None) -> dict[str, str] | None:
    """Stringify query values the way the Mavenlink API expects them.

    Booleans become ``true``/``false`` and ``None`` values are dropped.
    """
    if params is None:
        return None
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        else:
            encoded[key] = str(value)
    return encoded
