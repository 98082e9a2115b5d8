"""Live reddit.com checks for decoding and pagination."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from mynx.reddit import Comment, Link, RedditAPI, RedditConfig, subreddit_comments_url, subreddit_new_url
from mynx.reddit.runtime.throttle import RequestThrottle

USER_AGENT = "mynx-reddit integration tests"


@pytest.mark.asyncio
async def test_new_links_decode():
    """Test the newest links of a busy subreddit decode as Link entities."""
    config = RedditConfig(page_limit=5, user_agent=USER_AGENT)
    async with RedditAPI(config, throttle=RequestThrottle(2000)) as api:
        links = []
        async for link in api.items(subreddit_new_url("python")):
            links.append(link)
            if len(links) == 5:
                break

    assert len(links) == 5
    assert all(isinstance(link, Link) for link in links)
    assert all(link.permalink.startswith("https://www.reddit.com/r/") for link in links)


@pytest.mark.asyncio
async def test_recent_comments_since():
    """Test items_since returns only comments newer than the cutoff."""
    since = datetime.now(UTC) - timedelta(hours=1)
    config = RedditConfig(page_limit=25, user_agent=USER_AGENT)
    async with RedditAPI(config, throttle=RequestThrottle(2000)) as api:
        comments = []
        async for comment in api.items_since(subreddit_comments_url("AskReddit"), since):
            comments.append(comment)
            if len(comments) == 30:
                break

    assert comments
    assert all(isinstance(c, Comment) and c.time > since for c in comments)
