#!/usr/bin/env python3
from __future__ import annotations

import argparse

from mgmtapi import ApiStatusError, ManagementAPI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Rotate a client secret (blocking call)")
    p.add_argument("client_id")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    api = ManagementAPI.from_env()
    try:
        client = api.rotate_client_secret(args.client_id).execute_blocking()
    except ApiStatusError as e:
        raise SystemExit(f"rotation failed ({e.status_code}): {e}") from e
    print(f"{client.name}: new secret ends with ...{(client.client_secret or '')[-4:]}")


if __name__ == "__main__":
    main()
