"""Bounded "since" queries and the unbounded polling stream built on them."""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import UTC, datetime
from typing import Any

from ...config import DEFAULT_CHUNK_WINDOW
from .definitions import ListingQuery, PageFetcher
from .filters import filter_chunked
from .paginator import paginate
from .telemetry import log_poll_batch


def as_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC so they compare with entity times."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


def posted_after(item: Any, since: datetime) -> bool:
    posted = getattr(item, "time", None)
    return posted is not None and posted > since


def latest(*moments: datetime) -> datetime:
    return max(moments)


def items_since(
    fetch_page: PageFetcher,
    query: ListingQuery,
    since: datetime,
    *,
    window: int = DEFAULT_CHUNK_WINDOW,
) -> AsyncIterator[Any]:
    """Entities of a newest-first listing posted strictly after ``since``.

    Tolerates local disorder: the stream ends only after ``window``
    consecutive items are all at or before ``since``.
    """
    cutoff = as_utc(since)
    return filter_chunked(
        lambda item: posted_after(item, cutoff),
        paginate(fetch_page, query),
        window=window,
    )


async def poll(
    fetch_page: PageFetcher,
    query: ListingQuery,
    since: datetime,
    *,
    window: int = DEFAULT_CHUNK_WINDOW,
) -> AsyncIterator[Any]:
    """Endless stream of new entities, oldest first within each round.

    Each round collects ``items_since(watermark)``, yields it in reverse
    (oldest first), and moves the watermark to the newest time seen. The
    stream never ends on its own; stop pulling to stop polling. Every round
    makes at least one throttled request.
    """
    watermark = as_utc(since)
    while True:
        batch = [item async for item in items_since(fetch_page, query, watermark, window=window)]
        batch.reverse()
        watermark = latest(watermark, *(item.time for item in batch))
        log_poll_batch(url=query.url, items=len(batch), watermark=watermark)
        for item in batch:
            yield item
