#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from laakhay.pivotal import TrackerClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream a project's activity feed")
    p.add_argument("project_id", type=int)
    p.add_argument("count", nargs="?", type=int, default=50)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with TrackerClient.from_env() as client:
        seen = 0
        async with client.iter_activity(args.project_id, limit=min(args.count, 100)) as session:
            async for page in session:
                for activity in page.items:
                    print(f"{activity.occurred_at} | {activity.kind:30} | {activity.message}")
                    seen += 1
                if seen >= args.count:
                    break
        print(f"{seen} activities ({session.status.value})")


if __name__ == "__main__":
    asyncio.run(main())
