"""Pagination policy structures."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from ...models import NormalizedPage

# loader(page_number, *extra_args) -> NormalizedPage
PageLoader = Callable[..., Awaitable[NormalizedPage]]


@dataclass(frozen=True)
class PagePolicy:
    """Pagination policy for loading a whole resource.

    Attributes:
        first_page: Number of the first page (Mavenlink pages are 1-based)
        max_concurrency: Upper bound on page fetches in flight after the
            first page (None = every remaining page at once)
    """

    first_page: int = 1
    max_concurrency: int | None = None

    def __post_init__(self) -> None:
        if self.first_page < 0:
            raise ValueError("first_page must be >= 0")
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1 or None")


def loader_name(loader: Any) -> str:
    """Best-effort identifier for a loader, used in telemetry."""
    return getattr(loader, "__name__", None) or type(loader).__name__
