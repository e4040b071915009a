"""Mavenlink REST endpoint registry.

This module collects the endpoint specifications and adapters so the
connector can look them up by id.
"""

from __future__ import annotations

from mavenlink.client.runtime.rest import ResponseAdapter, RestEndpointSpec

from .custom_field_values import SPEC as CustomFieldValuesSpec  # noqa: N811
from .custom_field_values import Adapter as CustomFieldValuesAdapter
from .posts import PROJECT_SPEC as ProjectPostsSpec  # noqa: N811
from .posts import SPEC as PostsSpec  # noqa: N811
from .posts import Adapter as PostsAdapter
from .stories import SPEC as StoriesSpec  # noqa: N811
from .stories import Adapter as StoriesAdapter
from .workspaces import SPEC as WorkspacesSpec  # noqa: N811
from .workspaces import Adapter as WorkspacesAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "projects": (WorkspacesSpec, WorkspacesAdapter),
    "tasks": (StoriesSpec, StoriesAdapter),
    "projects_custom_fields": (CustomFieldValuesSpec, CustomFieldValuesAdapter),
    "comments": (PostsSpec, PostsAdapter),
    "comments_for_project": (ProjectPostsSpec, PostsAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "projects", "tasks")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint_spec",
    "get_endpoint_adapter",
    "list_endpoints",
    "WorkspacesSpec",
    "WorkspacesAdapter",
    "StoriesSpec",
    "StoriesAdapter",
    "CustomFieldValuesSpec",
    "CustomFieldValuesAdapter",
    "PostsSpec",
    "ProjectPostsSpec",
    "PostsAdapter",
]
