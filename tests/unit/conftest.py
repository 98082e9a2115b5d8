"""Shared fixtures: raw reddit payloads, entities and a fake HTTP client."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from mynx.reddit.models import Comment
from mynx.reddit.runtime import throttle as throttle_module
from mynx.reddit.runtime.rest import RawResponse

CREATED = 1_700_000_000  # 2023-11-14T22:13:20Z


@pytest.fixture
def raw_comment():
    """Factory for a raw ``t1`` object."""

    def _make(id: str = "c1", **overrides):
        data = {
            "id": id,
            "name": f"t1_{id}",
            "subreddit": "python",
            "link_id": "t3_xvzdh",
            "created_utc": CREATED,
            "ups": 12,
            "downs": 3,
            "body": "hello",
            "author": "alice",
            "replies": "",
        }
        data.update(overrides)
        return {"kind": "t1", "data": data}

    return _make


@pytest.fixture
def raw_link():
    """Factory for a raw ``t3`` object."""

    def _make(id: str = "xvzdh", **overrides):
        data = {
            "id": id,
            "name": f"t3_{id}",
            "subreddit": "python",
            "permalink": f"/r/python/comments/{id}/some_title/",
            "created_utc": CREATED,
            "title": "Some title",
            "selftext": "self text",
            "author": "bob",
            "num_comments": 4,
        }
        data.update(overrides)
        return {"kind": "t3", "data": data}

    return _make


@pytest.fixture
def raw_listing():
    """Wrap raw children in a Listing envelope."""

    def _make(*children, after=None):
        return {"kind": "Listing", "data": {"children": list(children), "after": after}}

    return _make


@pytest.fixture
def make_comment():
    """Factory for decoded comments posted ``seconds`` after the epoch."""

    def _make(id: str, seconds: float, **extra):
        return Comment(
            id=id,
            name=f"t1_{id}",
            permalink=f"https://www.reddit.com/r/python/comments/xvzdh/_/{id}",
            time=datetime.fromtimestamp(seconds, tz=UTC),
            score=0,
            **extra,
        )

    return _make


@pytest.fixture
def json_response():
    """Build a RawResponse whose body is ``payload`` serialized as JSON."""

    def _make(payload, status: int = 200, set_cookies=None):
        return RawResponse(
            status=status,
            headers={"Content-Type": "application/json"},
            body=json.dumps(payload),
            set_cookies=list(set_cookies or []),
        )

    return _make


@pytest.fixture
def fake_http():
    """HTTPClient stand-in; set ``fake_http.request.side_effect`` or ``return_value``."""
    http = MagicMock()
    http.request = AsyncMock()
    http.close = AsyncMock()
    return http


@pytest.fixture
def reset_default_throttle():
    """Restore the process-wide throttle after a test touches it."""
    saved = throttle_module._default_throttle
    throttle_module._default_throttle = None
    yield
    throttle_module._default_throttle = saved
