"""Mavenlink stories (tasks) endpoint definition and adapter.

Only parent stories are requested, with their assignees included. The
response then carries a ``users`` dictionary next to ``stories``:

    {
        "count": 2,
        "results": [{"key": "stories", "id": "10"}, {"key": "stories", "id": "11"}],
        "stories": {"10": {"id": "10", "assignee_ids": ["7"]}, ...},
        "users": {"7": {"id": "7", "full_name": "..."}}
    }

The adapter replaces ``assignee_ids`` with the user objects under
``assignees``.
"""

from __future__ import annotations

from typing import Any

from mavenlink.client.models import NormalizedPage, RelationSpec
from mavenlink.client.processing import Processor
from mavenlink.client.runtime.rest import ResponseAdapter, RestEndpointSpec

ENTITY_NAME = "stories"

ASSIGNEES = RelationSpec(
    related_field="assignee_ids",
    related_object="users",
    rename_to="assignees",
)


def build_path(params: dict[str, Any]) -> str:
    return "stories.json"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "parents_only": True,
        "include": "assignees",
        "per_page": params["per_page"],
        "page": params["page"],
    }


SPEC = RestEndpointSpec(
    id="tasks",
    build_path=build_path,
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    def parse(self, response: Any, params: dict[str, Any]) -> NormalizedPage:
        return Processor().process_result_with_relation(response, ENTITY_NAME, ASSIGNEES)
