#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import mimetypes

from laakhay.pivotal import TrackerClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Attach a file to a story as a comment")
    p.add_argument("project_id", type=int)
    p.add_argument("story_id", type=int)
    p.add_argument("path")
    p.add_argument("comment", nargs="?", default="Attached file")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    content_type = mimetypes.guess_type(args.path)[0] or "application/octet-stream"
    async with TrackerClient.from_env() as client:
        comment = await client.post_attachment(
            args.project_id, args.story_id, args.path, content_type, args.comment
        )
        for attachment in comment.file_attachments:
            print(f"Attached {attachment.filename} ({attachment.size} bytes) to comment {comment.id}")


if __name__ == "__main__":
    asyncio.run(main())
