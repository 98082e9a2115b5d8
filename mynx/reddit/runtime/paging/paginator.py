"""Cursor pagination over reddit listings.

``paginate`` turns a listing URL into one lazy stream of entities spanning
every page. A page is requested only when the consumer pulls past the end of
the previous one, so at most one page is held ahead of consumption. The
stream ends at the first page that decodes to nothing.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from time import perf_counter
from typing import Any

from ...core.exceptions import PaginationError
from .definitions import ListingQuery, PageFetcher, cursor_of
from .telemetry import log_page_error, log_page_fetched, log_pagination_complete


async def paginate(fetch_page: PageFetcher, query: ListingQuery) -> AsyncIterator[Any]:
    """Yield every entity of a listing, page after page.

    Args:
        fetch_page: Throttled (optionally cached) fetch-and-decode of one page
        query: First-page query

    Yields:
        Entities in listing order

    Raises:
        APIError: If a page fetch fails; entities already yielded stay valid
        PaginationError: If a page is not a list or its last item has no name
    """
    page_index = 0
    total = 0
    while True:
        start = perf_counter()
        try:
            page = await fetch_page(query.url, query.to_params())
        except Exception as e:
            log_page_error(
                url=query.url,
                page_index=page_index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        if not page:
            log_pagination_complete(url=query.url, pages=page_index, items=total)
            return
        if not isinstance(page, list):
            raise PaginationError(f"{query.url} did not return a listing")

        log_page_fetched(
            url=query.url,
            page_index=page_index,
            items=len(page),
            cursor=query.after,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        for item in page:
            yield item

        total += len(page)
        page_index += 1
        query = query.next_page(cursor_of(page))
