#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from mgmtapi import ManagementAPI, TransportConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List tenant connections via REST")
    p.add_argument("--strategy", default=None)
    p.add_argument("--name", default=None)
    p.add_argument("--fields", default=None, help="comma separated, e.g. name,strategy")
    p.add_argument("--exclude-fields", action="store_true")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    config = TransportConfig(log_bodies=args.verbose)
    async with ManagementAPI.from_env(config=config) as api:
        connections = await api.list_connections(
            strategy=args.strategy,
            name=args.name,
            fields=args.fields,
            include_fields=not args.exclude_fields,
        ).execute()
    for connection in connections:
        clients = len(connection.enabled_clients or [])
        print(f"{connection.name or '-':<40} {connection.strategy or '-':<16} {clients} clients")


if __name__ == "__main__":
    asyncio.run(main())
