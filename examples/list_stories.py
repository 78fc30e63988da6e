#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.pivotal import TrackerClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Page through a project's stories")
    p.add_argument("project_id", type=int)
    p.add_argument("--state", default=None, help="with_state filter (e.g. started)")
    p.add_argument("--limit", type=int, default=128, help="page size")
    p.add_argument("--max-pages", type=int, default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    options = {"with_state": args.state} if args.state else {}

    async with TrackerClient.from_env() as client:
        pages = 0

        def on_page(stories, meta, decide):
            nonlocal pages
            pages += 1
            print(f"-- page {pages}: {meta.offset}..{meta.offset + meta.returned} of {meta.total}")
            for story in stories:
                print(f"{story.id:>10} | {story.current_state or '':>10} | {story.name}")
            decide("max pages reached" if args.max_pages and pages >= args.max_pages else None)

        outcome = await client.list_stories(args.project_id, options, on_page, limit=args.limit)
        print(f"Session {outcome.status.value}: {outcome.items} stories in {outcome.pages} pages")
        if outcome.failed:
            raise SystemExit(f"error: {outcome.error}")


if __name__ == "__main__":
    asyncio.run(main())
