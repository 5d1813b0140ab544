import argparse
import json
import sys
from typing import List

import requests


def read_offers(path: str) -> List[dict]:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def insert_offers(base_url: str, offers: List[dict], dry_run: bool, limit: int, timeout: float) -> int:
    url = base_url.rstrip("/") + "/offers/"
    count = 0
    for payload in offers:
        if limit and count >= limit:
            break
        if dry_run:
            count += 1
            continue
        r = requests.post(url, json=payload, timeout=timeout)
        if r.status_code == 201:
            count += 1
            continue
        print(f"Failed to insert offer ({r.status_code}): {payload}", file=sys.stderr)
    return count


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--offers_path", type=str, default="data/offers.json")
    parser.add_argument("--limit", type=int, default=0)
    parser.add_argument("--timeout", type=float, default=10.0)
    parser.add_argument("--dry_run", action="store_true")
    args = parser.parse_args()
    try:
        rows = read_offers(args.offers_path)
    except (OSError, ValueError) as e:
        print(f"Failed to read offers: {e}", file=sys.stderr)
        sys.exit(1)
    print(insert_offers(args.base_url, rows, args.dry_run, args.limit, args.timeout))


if __name__ == "__main__":
    main()
