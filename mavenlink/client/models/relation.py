"""Relation resolution options."""

from pydantic import BaseModel, ConfigDict, Field


class RelationSpec(BaseModel):
    """How to resolve one relation field against an included dictionary.

    Attributes:
        related_field: Entity field holding a related id or a list of ids
        related_object: Name of the response dictionary holding related entities
        rename_to: If set, the resolved value replaces ``related_field`` under this key
        lookup_scalar_by_value: Resolve a single (non-list) id by its value.
            When False, a scalar is looked up under the field name itself,
            which is what existing callers of the Mavenlink client rely on.
    """

    related_field: str = Field(..., min_length=1, alias="relatedField")
    related_object: str = Field(..., min_length=1, alias="relatedObject")
    rename_to: str | None = Field(default=None, alias="renameTo")
    lookup_scalar_by_value: bool = False

    model_config = ConfigDict(frozen=True, populate_by_name=True)
