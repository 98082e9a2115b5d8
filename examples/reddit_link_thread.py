#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from mynx.reddit import Comment, RedditAPI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print a link and its comment tree")
    p.add_argument("permalink", help="https://www.reddit.com/r/<sub>/comments/<id>/<slug>/")
    p.add_argument("--depth", type=int, default=3)
    return p.parse_args()


def print_tree(items, depth: int, indent: int = 0) -> None:
    for item in items:
        if not isinstance(item, Comment):
            print(f"{'  ' * indent}[{item.get('count', 0)} more]")
            continue
        marker = "[deleted]" if item.is_deleted else (item.body or "").replace("\n", " ")[:70]
        print(f"{'  ' * indent}{item.score:>5} {item.author}: {marker}")
        if indent + 1 < depth:
            print_tree(item.replies, depth, indent + 1)


async def main() -> None:
    args = parse_args()
    async with RedditAPI() as api:
        link = await api.get_link(args.permalink)

    print(f"{link.title} ({link.author})")
    print(link.permalink)
    print("-" * 80)
    print_tree(link.replies, args.depth)


if __name__ == "__main__":
    asyncio.run(main())
