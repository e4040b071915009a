"""Data models for normalized Mavenlink responses.

Architecture:
    Pydantic v2 models shared by the normalizer, the pagination executor and
    the connector. Models are frozen; the entity mappings inside a page are
    plain dicts because Mavenlink entities carry arbitrary fields.

Model Categories:
    - Pages: NormalizedPage, PageMeta
    - Options: RelationSpec
"""

from .page import NormalizedPage, PageMeta
from .relation import RelationSpec

__all__ = [
    "NormalizedPage",
    "PageMeta",
    "RelationSpec",
]
