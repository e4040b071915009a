"""Mavenlink workspaces (projects) endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from mavenlink.client.models import NormalizedPage
from mavenlink.client.processing import Processor
from mavenlink.client.runtime.rest import ResponseAdapter, RestEndpointSpec

ENTITY_NAME = "workspaces"


def build_path(params: dict[str, Any]) -> str:
    return "workspaces.json"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "per_page": params["per_page"],
        "page": params["page"],
    }


SPEC = RestEndpointSpec(
    id="projects",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Flattens the ``workspaces`` dictionary in result order."""

    def parse(self, response: Any, params: dict[str, Any]) -> NormalizedPage:
        return Processor().process_result(response, ENTITY_NAME)
