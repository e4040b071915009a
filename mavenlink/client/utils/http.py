"""HTTP client helper."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import aiohttp

from ..core.exceptions import TransportError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    Returns parsed JSON bodies whatever the HTTP status; deciding whether a
    body signals an application error is left to the caller. Anything that
    prevents getting a JSON body is raised as TransportError.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET request."""
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                status = response.status
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.warning(
                        "http_invalid_json",
                        extra={"url": url, "status": status, "error_message": str(e)},
                    )
                    raise TransportError(
                        f"Invalid JSON in response from {url} (HTTP {status})",
                        cause=e,
                        status_code=status,
                    ) from e
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.error(
                "http_request_failed",
                extra={
                    "url": url,
                    "error_type": type(e).__name__,
                    "error_message": str(e),
                },
            )
            raise TransportError(f"Request to {url} failed: {e}", cause=e) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
