"""Listing query and page-fetch definitions.

This module defines the data structures the paginator threads through its
loop: the immutable query for one page, the fetch callable contract, and
cursor extraction.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field, replace
from typing import Any

from ...config import DEFAULT_PAGE_LIMIT, DEFAULT_SORT
from ...core.exceptions import PaginationError

# Fetches one page: (url, query params) -> decoded page (a list of entities).
PageFetcher = Callable[[str, dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ListingQuery:
    """Query for one listing page.

    Attributes:
        url: Listing URL (any reddit page that returns a Listing)
        params: Caller filter parameters, merged over the defaults
        limit: Page size hint sent as ``limit``
        sort: Sort order sent as ``sort``
        after: Cursor of the previous page's last item (None on the first page)
    """

    url: str
    params: dict[str, Any] = field(default_factory=dict)
    limit: int = DEFAULT_PAGE_LIMIT
    sort: str = DEFAULT_SORT
    after: str | None = None

    @classmethod
    def create(
        cls,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        limit: int = DEFAULT_PAGE_LIMIT,
        sort: str = DEFAULT_SORT,
    ) -> ListingQuery:
        """Build a first-page query; ``limit``/``sort``/``after`` in params win."""
        extra = dict(params or {})
        return cls(
            url=url,
            params=extra,
            limit=extra.pop("limit", limit),
            sort=extra.pop("sort", sort),
            after=extra.pop("after", None),
        )

    def to_params(self) -> dict[str, Any]:
        """Query parameters for this page."""
        query: dict[str, Any] = {"limit": self.limit, "sort": self.sort, **self.params}
        if self.after is not None:
            query["after"] = self.after
        return query

    def next_page(self, cursor: str) -> ListingQuery:
        """Query for the page following the item named ``cursor``."""
        return replace(self, after=cursor)


def cursor_of(page: list[Any]) -> str:
    """Cursor for the page after ``page``: the fullname of its last item.

    Raises:
        PaginationError: If the last item has no ``name``
    """
    cursor = getattr(page[-1], "name", None)
    if not cursor:
        raise PaginationError(
            f"Cannot continue listing: last item {page[-1]!r} has no name"
        )
    return cursor
