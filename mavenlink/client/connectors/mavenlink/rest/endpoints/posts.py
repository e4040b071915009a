"""Mavenlink posts (comments) endpoint definitions and adapter.

Two endpoint ids share ``posts.json``: every parent post visible to the
token, and the parent posts of one workspace.
"""

from __future__ import annotations

from typing import Any

from mavenlink.client.models import NormalizedPage
from mavenlink.client.processing import Processor
from mavenlink.client.runtime.rest import ResponseAdapter, RestEndpointSpec

ENTITY_NAME = "posts"


def build_path(params: dict[str, Any]) -> str:
    return "posts.json"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "per_page": params["per_page"],
        "parents_only": True,
        "page": params["page"],
    }


def build_project_query(params: dict[str, Any]) -> dict[str, Any]:
    """Same as build_query, filtered to one workspace."""
    if params.get("project_id") is None:
        raise ValueError("project_id is required for comments_for_project")
    query = build_query(params)
    query["workspace_id"] = params["project_id"]
    return query


SPEC = RestEndpointSpec(
    id="comments",
    build_path=build_path,
    build_query=build_query,
)

PROJECT_SPEC = RestEndpointSpec(
    id="comments_for_project",
    build_path=build_path,
    build_query=build_project_query,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> NormalizedPage:
        return Processor().process_result(response, ENTITY_NAME)
