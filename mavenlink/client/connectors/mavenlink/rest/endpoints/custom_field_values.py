"""Mavenlink custom field values endpoint, scoped to workspaces.

Used to read per-project custom fields (e.g. an external CRM id).
"""

from __future__ import annotations

from typing import Any

from mavenlink.client.models import NormalizedPage
from mavenlink.client.processing import Processor
from mavenlink.client.runtime.rest import ResponseAdapter, RestEndpointSpec

ENTITY_NAME = "custom_field_values"


def build_path(params: dict[str, Any]) -> str:
    return "custom_field_values.json"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "per_page": params["per_page"],
        "page": params["page"],
        "subject_type": "Workspace",
    }


SPEC = RestEndpointSpec(
    id="projects_custom_fields",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> NormalizedPage:
        return Processor().process_result(response, ENTITY_NAME)
