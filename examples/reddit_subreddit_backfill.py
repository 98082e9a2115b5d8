#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from datetime import UTC, datetime, timedelta

from mynx.reddit import RedditAPI, RedditConfig, subreddit_new_url


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List links posted to a subreddit in the last N hours")
    p.add_argument("subreddit", nargs="?", default="python")
    p.add_argument("hours", nargs="?", type=int, default=6)
    p.add_argument("--cache", action="store_true", help="Memoize pages for two minutes")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    since = datetime.now(UTC) - timedelta(hours=args.hours)

    async with RedditAPI(RedditConfig(page_limit=100)) as api:
        if args.cache:
            api.enable_caching()
        links = [link async for link in api.items_since(subreddit_new_url(args.subreddit), since)]

    print(f"r/{args.subreddit}: {len(links)} links in the last {args.hours}h")
    print(f"{'Posted':25} | {'X-post':6} | Title")
    print("-" * 80)
    for link in links:
        print(f"{link.time.isoformat():25} | {'yes' if link.is_x_post else '':6} | {link.title}")


if __name__ == "__main__":
    asyncio.run(main())
