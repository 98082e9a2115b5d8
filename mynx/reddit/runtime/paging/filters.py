"""Windowed take-while for mostly-ordered streams.

Listings sorted by "new" are occasionally out of order, so stopping at the
first item older than a cutoff can cut a stream short. ``filter_chunked``
looks at consecutive, non-overlapping windows instead: it keeps the matching
items of each window and stops only when a whole window has no match.
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable
from typing import TypeVar

from ...config import DEFAULT_CHUNK_WINDOW

T = TypeVar("T")


async def take(iterator: AsyncIterator[T], n: int) -> list[T]:
    """Pull up to ``n`` items; fewer means the iterator is exhausted."""
    items: list[T] = []
    while len(items) < n:
        try:
            items.append(await anext(iterator))
        except StopAsyncIteration:
            break
    return items


async def filter_chunked(
    predicate: Callable[[T], bool],
    source: AsyncIterable[T],
    *,
    window: int = DEFAULT_CHUNK_WINDOW,
) -> AsyncIterator[T]:
    """Yield matching items window by window until a window has no match.

    Args:
        predicate: Item test
        source: Stream to filter (consumed lazily, one window at a time)
        window: Number of consecutive items that must all fail to stop

    Yields:
        Items passing ``predicate``, in source order
    """
    if window <= 0:
        raise ValueError("window must be > 0")
    iterator = aiter(source)
    try:
        while True:
            chunk = await take(iterator, window)
            matches = [item for item in chunk if predicate(item)]
            if not matches:
                return
            for item in matches:
                yield item
            if len(chunk) < window:
                return
    finally:
        aclose = getattr(iterator, "aclose", None)
        if aclose is not None:
            await aclose()
