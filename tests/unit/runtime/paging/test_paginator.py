"""Unit tests for cursor pagination."""

from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest

from mynx.reddit.core import APIError, PaginationError
from mynx.reddit.runtime.paging import ListingQuery, paginate

URL = "https://www.reddit.com/r/python/comments/"


def items(*names: str) -> list[SimpleNamespace]:
    return [SimpleNamespace(name=name) for name in names]


class PagedFetcher:
    """Serves one page per call; an empty page once the pages run out."""

    def __init__(self, *pages) -> None:
        self.pages = list(pages)
        self.calls: list[dict] = []

    async def __call__(self, url: str, params: dict):
        self.calls.append(dict(params))
        index = len(self.calls) - 1
        page = self.pages[index] if index < len(self.pages) else []
        if isinstance(page, Exception):
            raise page
        return page


class TestPaginate:
    """Test paginate()."""

    @pytest.mark.asyncio
    async def test_follows_cursor_until_empty_page(self):
        """Test pages of 2, 2 and 0 yield 4 items in 3 fetches."""
        fetch = PagedFetcher(items("t1_a", "t1_b"), items("t1_c", "t1_d"), [])

        result = [item.name async for item in paginate(fetch, ListingQuery.create(URL))]

        assert result == ["t1_a", "t1_b", "t1_c", "t1_d"]
        assert len(fetch.calls) == 3
        assert "after" not in fetch.calls[0]
        assert fetch.calls[1]["after"] == "t1_b"
        assert fetch.calls[2]["after"] == "t1_d"
        assert all(call["limit"] == 1000 and call["sort"] == "new" for call in fetch.calls)

    @pytest.mark.asyncio
    async def test_empty_first_page(self):
        """Test an empty listing yields nothing after one fetch."""
        fetch = PagedFetcher([])

        result = [item async for item in paginate(fetch, ListingQuery.create(URL))]

        assert result == []
        assert len(fetch.calls) == 1

    @pytest.mark.asyncio
    async def test_pages_fetched_lazily(self):
        """Test the next page is fetched only when the consumer needs it."""
        fetch = PagedFetcher(items("t1_a", "t1_b"), items("t1_c"))
        stream = paginate(fetch, ListingQuery.create(URL))

        assert (await anext(stream)).name == "t1_a"
        assert (await anext(stream)).name == "t1_b"
        assert len(fetch.calls) == 1

        assert (await anext(stream)).name == "t1_c"
        assert len(fetch.calls) == 2
        await stream.aclose()

    @pytest.mark.asyncio
    async def test_missing_cursor_fails_after_yielding_page(self):
        """Test a nameless last item raises instead of looping."""
        fetch = PagedFetcher([SimpleNamespace(name="t1_a"), SimpleNamespace()])
        seen = []

        with pytest.raises(PaginationError):
            async for item in paginate(fetch, ListingQuery.create(URL)):
                seen.append(item)

        assert len(seen) == 2
        assert len(fetch.calls) == 1

    @pytest.mark.asyncio
    async def test_fetch_error_keeps_yielded_items(self, caplog):
        """Test a failing page propagates after earlier items were consumed."""
        fetch = PagedFetcher(items("t1_a"), APIError("HTTP 503", status_code=503))
        seen = []

        with caplog.at_level(logging.ERROR, logger="mynx.reddit.runtime.paging.telemetry"):
            with pytest.raises(APIError):
                async for item in paginate(fetch, ListingQuery.create(URL)):
                    seen.append(item.name)

        assert seen == ["t1_a"]
        errors = [r for r in caplog.records if r.getMessage() == "page_error"]
        assert errors[0].page_index == 1
        assert errors[0].error_type == "APIError"

    @pytest.mark.asyncio
    async def test_non_list_page(self):
        """Test a page that is not a listing is rejected."""
        fetch = PagedFetcher(SimpleNamespace(name="t2_user"))

        with pytest.raises(PaginationError):
            async for _ in paginate(fetch, ListingQuery.create(URL)):
                pass

    @pytest.mark.asyncio
    async def test_logs_pages(self, caplog):
        """Test fetched pages and completion are logged."""
        fetch = PagedFetcher(items("t1_a", "t1_b"))

        with caplog.at_level(logging.INFO, logger="mynx.reddit.runtime.paging.telemetry"):
            async for _ in paginate(fetch, ListingQuery.create(URL)):
                pass

        fetched = [r for r in caplog.records if r.getMessage() == "page_fetched"]
        complete = [r for r in caplog.records if r.getMessage() == "pagination_complete"]
        assert fetched[0].items == 2
        assert fetched[0].cursor is None
        assert complete[0].pages == 1
        assert complete[0].items == 2
