"""Structured logging for pagination runs.

Each helper emits one event-name message with its fields in ``extra`` so
that a JSON log formatter can pick them up.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_completed(
    *,
    endpoint_id: str,
    page: int,
    rows: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page fetch.

    Args:
        endpoint_id: Loader identifier
        page: 1-based page number
        rows: Number of entities on the page
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetch_completed",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "rows": rows,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch. The error itself is re-raised by the caller."""
    logger.error(
        "page_fetch_error",
        extra={
            "endpoint_id": endpoint_id,
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    pages_fetched: int,
    total_items: int,
    total_latency_ms: float | None = None,
) -> None:
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": pages_fetched,
            "total_items": total_items,
            "total_latency_ms": total_latency_ms,
        },
    )
