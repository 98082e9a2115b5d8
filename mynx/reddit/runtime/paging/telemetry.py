"""Structured logging for listing pagination and polling.

Events carry their context in ``extra`` so a structured handler can render
them as fields.
"""

from __future__ import annotations

import logging
from datetime import datetime

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    url: str,
    page_index: int,
    items: int,
    cursor: str | None,
    latency_ms: float | None = None,
) -> None:
    """Log a fetched, non-empty page.

    Args:
        url: Listing URL
        page_index: Zero-based index of the page in this pagination pass
        items: Number of entities on the page
        cursor: Cursor the page was requested with (None for the first page)
        latency_ms: Fetch latency including throttle wait
    """
    logger.info(
        "page_fetched",
        extra={
            "url": url,
            "page_index": page_index,
            "items": items,
            "cursor": cursor,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(*, url: str, pages: int, items: int) -> None:
    """Log the end of a pagination pass (an empty page was reached)."""
    logger.info(
        "pagination_complete",
        extra={"url": url, "pages": pages, "items": items},
    )


def log_page_error(
    *,
    url: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch.

    Args:
        url: Listing URL
        page_index: Zero-based index of the page that failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "page_error",
        extra={
            "url": url,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_poll_batch(*, url: str, items: int, watermark: datetime) -> None:
    """Log one polling round."""
    logger.info(
        "poll_batch",
        extra={"url": url, "items": items, "watermark": watermark.isoformat()},
    )
