#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from mavenlink.client import MavenlinkRESTConnector


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List every parent Mavenlink task with its assignees")
    p.add_argument("--token", default=os.environ.get("MAVENLINK_ACCESS_TOKEN"))
    p.add_argument("--max-concurrency", type=int, default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if not args.token:
        raise SystemExit("Pass --token or set MAVENLINK_ACCESS_TOKEN")

    async with MavenlinkRESTConnector(args.token, max_concurrency=args.max_concurrency) as mavenlink:
        tasks = await mavenlink.get_all_tasks()

    print(f"{len(tasks)} tasks")
    print(f"{'ID':>10} | {'Title':40} | Assignees")
    print("-" * 80)
    for task in tasks:
        names = ", ".join(user.get("full_name", user.get("id", "?")) for user in task.get("assignees") or [])
        print(f"{task.get('id', ''):>10} | {str(task.get('title', ''))[:40]:40} | {names}")


if __name__ == "__main__":
    asyncio.run(main())
