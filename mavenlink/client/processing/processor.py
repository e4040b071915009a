"""Normalization of Mavenlink responses into ordered entity lists.

Mavenlink answers every list request with a sparse index rather than a list:

    {
        "count": 3,
        "results": [{"key": "stories", "id": "1"}, ...],
        "stories": {"1": {...}, "2": {...}},
        "users": {"7": {...}}          # present when ``include=`` was used
    }

``results`` carries the server ordering; the per-type dictionaries carry the
entities. The processor walks ``results`` and produces independent copies
of the referenced entities, optionally resolving one relation field against
an included dictionary.

See http://developer.mavenlink.com/#response-format
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from typing import Any

from ..core.exceptions import ShapeError
from ..models import NormalizedPage, PageMeta, RelationSpec

logger = logging.getLogger(__name__)


class Processor:
    """Turns raw Mavenlink responses into ``NormalizedPage`` objects."""

    def process_result(self, data: Mapping[str, Any], entity_name: str) -> NormalizedPage:
        """Flatten one response into entities ordered like ``results``.

        Args:
            data: Raw Mavenlink response
            entity_name: Dictionary holding the requested entities (e.g. "stories")

        Returns:
            NormalizedPage with the entities and total item/page counts

        Raises:
            ShapeError: If ``results``, ``count`` or a referenced entity is missing
        """
        results = _require(data, "results", "response")
        count = _require(data, "count", "response")
        if not isinstance(count, int) or isinstance(count, bool):
            raise ShapeError(f"Invalid count {count!r} in response", key="count")

        entities: list[dict[str, Any]] = []
        if results:
            index = _require(data, entity_name, "response")
            for pointer in results:
                entity_id = _require(pointer, "id", "result pointer")
                entity = _require_entity(index, entity_id, entity_name)
                entities.append(copy.deepcopy(entity))

        return NormalizedPage(data=entities, meta=PageMeta.from_counts(count, len(results)))

    def process_result_with_relation(
        self,
        data: Mapping[str, Any],
        entity_name: str,
        relation: RelationSpec | Mapping[str, Any],
    ) -> NormalizedPage:
        """Flatten a response and resolve one relation field on every entity.

        See http://developer.mavenlink.com/#includes

        Args:
            data: Raw Mavenlink response
            entity_name: Dictionary holding the requested entities
            relation: RelationSpec, or a mapping with its fields
                (``relatedField``/``related_field`` style keys both work)

        Returns:
            NormalizedPage whose entities carry the resolved related objects
        """
        if not isinstance(relation, RelationSpec):
            relation = RelationSpec.model_validate(relation)

        page = self.process_result(data, entity_name)
        for item in page.data:
            value = item.get(relation.related_field)
            if _is_absent(value):
                continue

            resolved = self._resolve(data, relation, value)

            if relation.rename_to:
                del item[relation.related_field]
                item[relation.rename_to] = resolved
            else:
                item[relation.related_field] = resolved
        return page

    def _resolve(self, data: Mapping[str, Any], relation: RelationSpec, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            if not value:
                return []
            related = _require(data, relation.related_object, "response")
            return [
                copy.deepcopy(_require_entity(related, related_id, relation.related_object))
                for related_id in value
            ]

        if relation.lookup_scalar_by_value:
            related = _require(data, relation.related_object, "response")
            return copy.deepcopy(_require_entity(related, value, relation.related_object))

        # Scalar ids are looked up under the field name, not the id value
        related = data.get(relation.related_object) or {}
        found = related.get(relation.related_field)
        if found is None:
            logger.debug(
                "relation_scalar_unresolved",
                extra={
                    "related_field": relation.related_field,
                    "related_object": relation.related_object,
                },
            )
        return copy.deepcopy(found)


def _require(container: Any, key: Any, where: str) -> Any:
    """Look up ``key`` or raise ShapeError naming the missing piece."""
    try:
        return container[key]
    except (KeyError, IndexError, TypeError) as exc:
        raise ShapeError(f"Missing {key!r} in {where}", key=key) from exc


def _require_entity(index: Any, entity_id: Any, where: str) -> Any:
    """Look up an entity by id; dictionary keys are strings on the wire."""
    if isinstance(entity_id, (int, float)) and isinstance(index, Mapping) and entity_id not in index:
        entity_id = str(entity_id)
    return _require(index, entity_id, where)


def _is_absent(value: Any) -> bool:
    """Missing, null or empty scalar relation values are left untouched."""
    if isinstance(value, (list, tuple)):
        return False
    return value is None or value is False or value == ""
