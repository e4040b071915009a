"""Mavenlink REST connector.

Architecture:
    Each resource accessor is a thin binding: it looks up an endpoint spec
    and adapter in the endpoint registry and runs them through RestRunner.
    The "get all" variants hand the single-page accessor to PageExecutor,
    which fetches page 1, then every other page concurrently.
"""

from __future__ import annotations

from typing import Any

from mavenlink.client.connectors.mavenlink.config import (
    BASE_URL,
    DEFAULT_TIMEOUT,
    PER_PAGE,
)
from mavenlink.client.models import NormalizedPage
from mavenlink.client.runtime.pagination import PageExecutor, PageLoader, PagePolicy
from mavenlink.client.runtime.rest import RestRunner, RESTTransport
from mavenlink.client.utils.http import HTTPClient

from .endpoints import get_endpoint_adapter, get_endpoint_spec


class MavenlinkRESTConnector:
    """Mavenlink REST connector.

    Usage:
        async with MavenlinkRESTConnector(token) as mavenlink:
            tasks = await mavenlink.get_all_tasks()
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = BASE_URL,
        per_page: int = PER_PAGE,
        timeout: float = DEFAULT_TIMEOUT,
        max_concurrency: int | None = None,
        http_client: HTTPClient | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize Mavenlink REST connector.

        Args:
            access_token: OAuth bearer token, sent verbatim on every request
            base_url: API root (defaults to the Mavenlink v1 API)
            per_page: Page size requested from list endpoints
            timeout: Total request timeout in seconds
            max_concurrency: Optional bound on concurrent page fetches in
                the ``get_all_*`` methods (None = unbounded)
            http_client: Optional HTTPClient to share a session
            transport: Optional pre-built transport (overrides the above)
        """
        if not access_token:
            raise ValueError("access_token is required")

        self.per_page = per_page
        self._transport = transport or RESTTransport(
            base_url,
            access_token,
            timeout=timeout,
            http_client=http_client,
        )
        self._runner = RestRunner(self._transport)
        self._executor = PageExecutor(PagePolicy(max_concurrency=max_concurrency))

    async def get(self, endpoint: str, options: dict[str, Any] | None = None) -> dict[str, Any]:
        """Raw GET against any Mavenlink endpoint (e.g. "users.json")."""
        return await self._transport.get(endpoint, params=options)

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a registered Mavenlink endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "projects", "tasks")
            params: Request parameters; ``per_page`` defaults to the connector's

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        params = {"per_page": self.per_page, **params}
        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def load_all_items(self, loader: PageLoader, *args: Any) -> list[dict[str, Any]]:
        """Load every page through ``loader(page, *args)`` and concatenate the entities."""
        return await self._executor.execute(loader, *args)

    async def get_projects(self, page: int) -> NormalizedPage:
        """Get one page of projects (workspaces)."""
        return await self.fetch("projects", {"page": page})

    async def get_all_projects(self) -> list[dict[str, Any]]:
        return await self.load_all_items(self.get_projects)

    async def get_tasks(self, page: int) -> NormalizedPage:
        """Get one page of parent tasks (stories) with ``assignees`` resolved."""
        return await self.fetch("tasks", {"page": page})

    async def get_all_tasks(self) -> list[dict[str, Any]]:
        return await self.load_all_items(self.get_tasks)

    async def get_projects_custom_fields(self, page: int) -> NormalizedPage:
        """Get one page of custom field values attached to projects."""
        return await self.fetch("projects_custom_fields", {"page": page})

    async def get_all_projects_custom_fields(self) -> list[dict[str, Any]]:
        return await self.load_all_items(self.get_projects_custom_fields)

    async def get_comments(self, page: int) -> NormalizedPage:
        """Get one page of parent comments (posts)."""
        return await self.fetch("comments", {"page": page})

    async def get_all_comments(self) -> list[dict[str, Any]]:
        return await self.load_all_items(self.get_comments)

    async def get_comments_for_project(self, page: int, project_id: str) -> NormalizedPage:
        """Get one page of parent comments (posts) of one project."""
        return await self.fetch("comments_for_project", {"page": page, "project_id": project_id})

    async def get_all_comments_for_project(self, project_id: str) -> list[dict[str, Any]]:
        return await self.load_all_items(self.get_comments_for_project, project_id)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> MavenlinkRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
