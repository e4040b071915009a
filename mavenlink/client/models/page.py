"""Normalized page data model."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PageMeta(BaseModel):
    """Collection-level counters reported alongside one page."""

    total_items: int = Field(..., ge=0, alias="totalItems")
    total_pages: int = Field(..., ge=0, alias="totalPages")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_counts(cls, count: int, page_length: int) -> PageMeta:
        """Build meta from the server ``count`` and the size of one page.

        A page with no results reports zero pages whatever ``count`` says.
        """
        total_pages = math.ceil(count / page_length) if page_length else 0
        return cls(total_items=count, total_pages=total_pages)


class NormalizedPage(BaseModel):
    """Ordered entities of one page plus collection meta."""

    data: list[dict[str, Any]] = Field(default_factory=list)
    meta: PageMeta

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def __len__(self) -> int:
        return len(self.data)
