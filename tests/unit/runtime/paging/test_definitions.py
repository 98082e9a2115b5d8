"""Unit tests for listing query definitions."""

from types import SimpleNamespace

import pytest

from mynx.reddit.core import PaginationError
from mynx.reddit.runtime.paging import ListingQuery, cursor_of

URL = "https://www.reddit.com/r/python/comments/"


class TestListingQuery:
    """Test ListingQuery."""

    def test_defaults(self):
        """Test first-page parameters."""
        query = ListingQuery.create(URL)
        assert query.to_params() == {"limit": 1000, "sort": "new"}

    def test_caller_params_override_defaults(self):
        """Test limit and sort from params win and extra params are kept."""
        query = ListingQuery.create(URL, {"limit": 25, "sort": "top", "t": "week"})
        assert query.to_params() == {"limit": 25, "sort": "top", "t": "week"}

    def test_after_from_params(self):
        """Test a caller-provided cursor starts mid-listing."""
        query = ListingQuery.create(URL, {"after": "t1_abc"})
        assert query.after == "t1_abc"
        assert query.to_params()["after"] == "t1_abc"

    def test_next_page(self):
        """Test next_page returns a new query with the cursor."""
        first = ListingQuery.create(URL, {"t": "day"})
        second = first.next_page("t1_zzz")

        assert first.after is None
        assert second.to_params() == {"limit": 1000, "sort": "new", "t": "day", "after": "t1_zzz"}

    def test_create_does_not_mutate_params(self):
        """Test caller dicts are left untouched."""
        params = {"limit": 5}
        ListingQuery.create(URL, params)
        assert params == {"limit": 5}


class TestCursorOf:
    """Test cursor extraction."""

    def test_last_item_name(self):
        """Test the cursor is the last item's fullname."""
        page = [SimpleNamespace(name="t1_a"), SimpleNamespace(name="t1_b")]
        assert cursor_of(page) == "t1_b"

    def test_missing_name_raises(self):
        """Test a nameless last item is a loud error."""
        with pytest.raises(PaginationError):
            cursor_of([SimpleNamespace(name="t1_a"), SimpleNamespace()])
