"""Page execution logic for loading every page of a resource.

This module provides the PageExecutor class that fetches the first page,
reads the page count from its meta, fetches the remaining pages
concurrently and concatenates their entities in page order.
"""

from __future__ import annotations

import asyncio
import contextlib
from time import perf_counter
from typing import Any

from ...models import NormalizedPage
from .definitions import PageLoader, PagePolicy, loader_name
from .telemetry import log_page_completed, log_page_error, log_pagination_complete


class PageExecutor:
    """Runs a single-page loader over every page of a resource.

    Failure policy is fail-fast: the first page that raises aborts the whole
    run with that exception. Pages already in flight are not cancelled.
    """

    def __init__(self, policy: PagePolicy | None = None) -> None:
        """Initialize page executor.

        Args:
            policy: Pagination policy (defaults to unbounded fan-out)
        """
        self._policy = policy or PagePolicy()

    async def execute(self, loader: PageLoader, *args: Any) -> list[dict[str, Any]]:
        """Load every page and return all entities as one list.

        Args:
            loader: Async callable ``loader(page, *args) -> NormalizedPage``
            *args: Extra positional arguments forwarded to every loader call

        Returns:
            Entities of all pages, page order first, then order within page
        """
        endpoint_id = loader_name(loader)
        start = perf_counter()
        first_page = self._policy.first_page

        first = await self._fetch(loader, first_page, args, endpoint_id)
        total_pages = first.meta.total_pages

        if total_pages <= 1:
            log_pagination_complete(
                endpoint_id=endpoint_id,
                pages_fetched=1,
                total_items=len(first.data),
                total_latency_ms=(perf_counter() - start) * 1000.0,
            )
            return first.data

        semaphore = (
            asyncio.Semaphore(self._policy.max_concurrency)
            if self._policy.max_concurrency
            else None
        )
        remaining = range(first_page + 1, first_page + total_pages)
        pages = await asyncio.gather(
            *(self._fetch(loader, page, args, endpoint_id, semaphore) for page in remaining)
        )

        items: list[dict[str, Any]] = list(first.data)
        for page in pages:
            items.extend(page.data)

        log_pagination_complete(
            endpoint_id=endpoint_id,
            pages_fetched=total_pages,
            total_items=len(items),
            total_latency_ms=(perf_counter() - start) * 1000.0,
        )
        return items

    async def _fetch(
        self,
        loader: PageLoader,
        page: int,
        args: tuple[Any, ...],
        endpoint_id: str,
        semaphore: asyncio.Semaphore | None = None,
    ) -> NormalizedPage:
        async with semaphore if semaphore is not None else contextlib.nullcontext():
            page_start = perf_counter()
            try:
                result = await loader(page, *args)
            except Exception as e:
                log_page_error(
                    endpoint_id=endpoint_id,
                    page=page,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

        log_page_completed(
            endpoint_id=endpoint_id,
            page=page,
            rows=len(result.data),
            latency_ms=(perf_counter() - page_start) * 1000.0,
        )
        return result


async def load_all_items(loader: PageLoader, *args: Any) -> list[dict[str, Any]]:
    """Load every page of a resource with the default (unbounded) policy."""
    return await PageExecutor().execute(loader, *args)
