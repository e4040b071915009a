"""Pagination layer for loading whole resources.

Architecture:
    - definitions.py: PagePolicy and the loader signature
    - executors.py: PageExecutor (first page, then concurrent fan-out and join)
    - telemetry.py: Structured logging

Usage:
    A loader is any ``async def loader(page, *args) -> NormalizedPage``;
    the executor only reads ``meta.total_pages`` and ``data`` from its result.
"""

from __future__ import annotations

from .definitions import PageLoader, PagePolicy
from .executors import PageExecutor, load_all_items

__all__ = [
    "PageLoader",
    "PagePolicy",
    "PageExecutor",
    "load_all_items",
]
