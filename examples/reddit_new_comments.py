#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from datetime import UTC, datetime, timedelta

from mynx.reddit import RedditAPI, RedditConfig, subreddit_comments_url


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream new comments from one or more subreddits")
    p.add_argument("subreddits", nargs="*", default=["python"])
    p.add_argument("--minutes", type=int, default=0, help="Also show comments from the last N minutes")
    p.add_argument("--user-agent", default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    since = datetime.now(UTC) - timedelta(minutes=args.minutes)
    config = RedditConfig(page_limit=100)

    async with RedditAPI(config, user_agent=args.user_agent) as api:
        url = subreddit_comments_url(args.subreddits)
        async for comment in api.new_items(url, since):
            if comment.is_deleted:
                continue
            body = (comment.body or "").replace("\n", " ")
            print(f"{comment.time.isoformat()} | r/{comment.get('subreddit')} | {comment.author}: {body[:80]}")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
